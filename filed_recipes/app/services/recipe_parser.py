"""
Reads and writes the sectioned recipe text format:

    [Recept]
    <name>
    [Ingredienser]
    <amount>;<measure>;<name>
    [Instruktioner]
    <instruction line>

Blank lines are ignored on read. No file I/O happens here.
"""

import re
from typing import Iterable, List

from ..core.errors import FormatError
from ..core.state_machine import (
    INGREDIENT_SEPARATOR,
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    SECTION_MARKERS,
    SECTION_RECIPE,
    Effect,
    ReadState,
    transition,
)
from ..models.recipe import Ingredient, Recipe


class RecipeParser:
    line_break = re.compile(r"\r\n|\r|\n")

    @classmethod
    def parse(cls, raw: str) -> List[Recipe]:
        recipes: List[Recipe] = []
        state = ReadState.INDEFINITE

        for lineno, line in enumerate(cls.line_break.split(raw), start=1):
            step = transition(state, line, lineno=lineno)
            state = step.state

            if step.effect == Effect.NEW_RECIPE:
                recipes.append(Recipe(name=step.value))
            elif step.effect == Effect.ADD_INGREDIENT:
                cls._current(recipes, line, lineno).add_ingredient(step.value)
            elif step.effect == Effect.ADD_INSTRUCTION:
                cls._current(recipes, line, lineno).add_instruction(step.value)

        return recipes

    @classmethod
    def serialize(cls, recipes: Iterable[Recipe]) -> str:
        lines: List[str] = []
        for recipe in recipes:
            lines.append(SECTION_RECIPE)
            lines.append(cls._checked_line(recipe.name, f"name of '{recipe.name}'"))
            lines.append(SECTION_INGREDIENTS)
            for ingredient in recipe.ingredients:
                lines.append(cls._ingredient_line(ingredient, recipe.name))
            lines.append(SECTION_INSTRUCTIONS)
            for instruction in recipe.instructions:
                lines.append(cls._checked_line(instruction, f"instruction of '{recipe.name}'"))

        return "".join(line + "\n" for line in lines)

    @staticmethod
    def _current(recipes: List[Recipe], line: str, lineno: int) -> Recipe:
        if not recipes:
            raise FormatError("section content before any recipe name", lineno=lineno, line=line)
        return recipes[-1]

    @classmethod
    def _checked_line(cls, value: str, what: str) -> str:
        # Anything here must read back as the same single content line.
        if value == "" or value in SECTION_MARKERS or cls.line_break.search(value):
            raise FormatError(f"cannot write {what}: {value!r} would not read back", line=value)
        return value

    @classmethod
    def _ingredient_line(cls, ingredient: Ingredient, recipe_name: str) -> str:
        fields = [ingredient.amount, ingredient.measure, ingredient.name]
        for field in fields:
            if INGREDIENT_SEPARATOR in field or cls.line_break.search(field):
                raise FormatError(
                    f"cannot write ingredient of '{recipe_name}': {field!r} contains a separator",
                    line=field,
                )
        return INGREDIENT_SEPARATOR.join(fields)
