from markdown2 import (  # pyright: ignore[reportMissingTypeStubs]
    markdown,  # pyright: ignore[reportUnknownVariableType]
)

from domain.models import Recipe, format_ingredient


def recipe_markdown(recipe: Recipe) -> str:
    info = recipe.main_information
    lines = [
        f"# {info.name}",
        "",
        f"By {info.author}",
        "",
        info.description,
        "",
        f"Category: {info.category.label}",
        "",
        "## Ingredients",
        "",
    ]
    lines += [f"- {format_ingredient(i)}" for i in recipe.ingredients]
    lines += ["", "## Directions", ""]
    for n, direction in enumerate(recipe.directions, start=1):
        prefix = "*(Optional)* " if direction.is_optional else ""
        lines.append(f"{n}. {prefix}{direction.description}")
    return "\n".join(lines) + "\n"


def recipe_html(recipe: Recipe) -> str:
    return markdown(  # pyright: ignore[reportUnknownVariableType]
        recipe_markdown(recipe)
    )
