"""A recipe book: store recipes with ingredients and look them up by name."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = ["NAME_LIMIT", "INSTRUCTIONS_LIMIT", "Recipe", "RecipeBook", "main"]

NAME_LIMIT = 49
"""Longest recipe or ingredient name kept; longer names are cut."""

INSTRUCTIONS_LIMIT = 499
"""Longest instructions kept; longer text is cut."""


@dataclass
class Recipe:
    """A named recipe; ingredients are listed newest first."""

    name: str
    instructions: str
    ingredients: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = self.name[:NAME_LIMIT]
        self.instructions = self.instructions[:INSTRUCTIONS_LIMIT]

    def add_ingredient(self, name: str) -> None:
        """Put an ingredient at the front of the ingredient list."""
        self.ingredients.insert(0, name[:NAME_LIMIT])

    def ingredients_line(self) -> str:
        return "Ingredients: " + ", ".join(self.ingredients)

    def format(self) -> str:
        """Render the recipe as name, ingredients and instructions lines."""
        return (
            f"Name: {self.name}\n"
            f"{self.ingredients_line()}\n"
            f"Instructions: {self.instructions}"
        )


class RecipeBook:
    """A collection of recipes, newest first."""

    def __init__(self) -> None:
        self._recipes: list[Recipe] = []

    def __len__(self) -> int:
        return len(self._recipes)

    def add_recipe(self, name: str, instructions: str) -> Recipe:
        """Create a recipe, put it at the front of the book and return it."""
        recipe = Recipe(name, instructions)
        self._recipes.insert(0, recipe)
        return recipe

    def find(self, name: str) -> Recipe | None:
        """Return the newest recipe called name, or None."""
        return next((r for r in self._recipes if r.name == name), None)

    def recipes(self) -> list[Recipe]:
        """Return all recipes, newest first."""
        return list(self._recipes)


_MENU = """
Menu:
1. Add Recipe
2. Search Recipe
3. List Recipes
4. Quit"""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_choice(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _add(book: RecipeBook) -> None:
    name = input("\nEnter Recipe Name: ")
    instructions = input("Enter Instructions: ")
    recipe = book.add_recipe(name, instructions)
    print("\nEnter Ingredients (enter 'done' to finish adding ingredients):")
    while (ingredient := input()) != "done":
        recipe.add_ingredient(ingredient)
    print("Recipe added successfully!")


def _search(book: RecipeBook) -> None:
    name = input("\nEnter Recipe Name to Search: ")
    recipe = book.find(name)
    if recipe is None:
        print(f"\nRecipe for {name} not found.")
        return
    print(f"\nRecipe for {recipe.name}:")
    print(recipe.ingredients_line())
    print(f"Instructions: {recipe.instructions}")


def _list(book: RecipeBook) -> None:
    print("\nAvailable recipes:")
    for recipe in book.recipes():
        print(recipe.format())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recipe assistant menu on standard input until the user quits."""
    argparse.ArgumentParser(description="Keep and search recipes.").parse_args(argv)
    book = RecipeBook()
    actions = {1: _add, 2: _search, 3: _list}
    try:
        while True:
            print(_MENU)
            choice = _parse_choice(input("Select an option (1/2/3/4): "))
            if choice == 4:
                print("\nGoodbye!")
                return 0
            action = actions.get(choice)
            if action is None:
                print("\nInvalid choice. Please select a valid option.")
                continue
            action(book)
    except EOFError:
        return 0