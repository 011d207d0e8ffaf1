from domain.models import Category, Direction, Ingredient, MainInformation, Recipe, Unit
from domain.models import sample_recipe
from domain.render import recipe_html, recipe_markdown


def test_recipe_markdown() -> None:
    recipe = Recipe(
        main_information=MainInformation(
            name="Fruit Salad",
            description="Bright and quick",
            author="Sam",
            category=Category.dessert,
        ),
        ingredients=[
            Ingredient(name="Apple", quantity=2, unit=Unit.none),
            Ingredient(name="Honey", quantity=1, unit=Unit.tbs),
        ],
        directions=[
            Direction(description="Chop the fruit", is_optional=False),
            Direction(description="Drizzle with honey", is_optional=True),
        ],
    )
    assert recipe_markdown(recipe) == (
        "# Fruit Salad\n"
        "\n"
        "By Sam\n"
        "\n"
        "Bright and quick\n"
        "\n"
        "Category: Dessert\n"
        "\n"
        "## Ingredients\n"
        "\n"
        "- 2 Apples\n"
        "- 1 Tablespoon Honey\n"
        "\n"
        "## Directions\n"
        "\n"
        "1. Chop the fruit\n"
        "2. *(Optional)* Drizzle with honey\n"
    )


def test_recipe_html() -> None:
    html = recipe_html(sample_recipe())
    assert "<h1>Classic Margherita Pizza</h1>" in html
    assert "<li>200 Grams Fresh Mozzarella</li>" in html
    assert "<ol>" in html
