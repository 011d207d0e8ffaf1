"""Describes the CookIn domain. Centres around the `RecipeStore`.

- Records are plain values: a `Recipe` holds its `MainInformation`, its
  ingredients and its directions, and nothing else.
- The store keeps the entire collection as one blob under one key. Every
  change rewrites the whole thing.
- Bad data on disk reads as an empty catalog rather than an error.

The key-value service behind the store is injected, so tests can fake it.
"""
