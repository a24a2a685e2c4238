"""Exceptions raised by the recipe file parser and the repository."""


class RecipeError(Exception):
    """Base class for recipe collection errors."""


class FormatError(RecipeError, ValueError):
    """Raised when a line breaks the sectioned recipe file grammar."""

    def __init__(self, message: str, *, lineno: int = 0, line: str | None = None):
        self.lineno = lineno
        self.line = line
        if lineno:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class RecipeNotFoundError(RecipeError, LookupError):
    """Raised when a recipe to delete matches nothing in the collection."""

    def __init__(self, recipe_name: str | None = None):
        self.recipe_name = recipe_name
        if recipe_name is None:
            super().__init__("No recipe given to match in collection")
        else:
            super().__init__(f"Recipe '{recipe_name}' not found in collection")
