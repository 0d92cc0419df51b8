from algobox.recipes import INSTRUCTIONS_LIMIT, NAME_LIMIT, Recipe, RecipeBook, main


def test_add_and_find_recipe():
    book = RecipeBook()
    book.add_recipe("Tea", "Boil water")
    found = book.find("Tea")
    assert found is not None
    assert (found.name, found.instructions) == ("Tea", "Boil water")


def test_find_missing_returns_none():
    book = RecipeBook()
    book.add_recipe("Tea", "Boil water")
    assert book.find("Coffee") is None


def test_ingredients_are_newest_first():
    recipe = Recipe("Tea", "Boil water")
    recipe.add_ingredient("water")
    recipe.add_ingredient("leaves")
    assert recipe.ingredients == ["leaves", "water"]


def test_recipes_are_newest_first():
    book = RecipeBook()
    book.add_recipe("One", "x")
    book.add_recipe("Two", "y")
    assert [r.name for r in book.recipes()] == ["Two", "One"]
    assert len(book) == 2


def test_find_returns_newest_duplicate():
    book = RecipeBook()
    book.add_recipe("Soup", "old")
    book.add_recipe("Soup", "new")
    assert book.find("Soup").instructions == "new"


def test_add_recipe_returns_stored_recipe():
    book = RecipeBook()
    recipe = book.add_recipe("Tea", "Boil")
    recipe.add_ingredient("water")
    assert book.find("Tea").ingredients == ["water"]


def test_format_lines():
    recipe = Recipe("Tea", "Boil water")
    recipe.add_ingredient("water")
    recipe.add_ingredient("leaves")
    lines = recipe.format().splitlines()
    assert lines[0] == "Name: Tea"
    assert lines[1].startswith("Ingredients: ")
    assert "leaves" in lines[1] and "water" in lines[1]
    assert lines[2] == "Instructions: Boil water"


def test_long_fields_are_cut():
    recipe = Recipe("n" * 80, "i" * 900)
    recipe.add_ingredient("g" * 80)
    assert len(recipe.name) == NAME_LIMIT
    assert len(recipe.instructions) == INSTRUCTIONS_LIMIT
    assert len(recipe.ingredients[0]) == NAME_LIMIT


def test_main_add_search_list(monkeypatch, capsys):
    answers = iter(
        ["1", "Tea", "Boil water", "water", "done", "2", "Tea", "2", "Cake", "3", "7", "4"]
    )
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Recipe added successfully!" in out
    assert "Recipe for Tea:" in out
    assert "Recipe for Cake not found." in out
    assert "Name: Tea" in out
    assert "Invalid choice. Please select a valid option." in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_stops_at_end_of_input(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 0