import logging
from enum import Enum
from typing import Dict, NamedTuple, Optional, Union

from ..models.recipe import Ingredient
from .errors import FormatError

log = logging.getLogger(__name__)

SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"

INGREDIENT_SEPARATOR = ";"


class ReadState(str, Enum):
    INDEFINITE = "indefinite"
    NAME = "name"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


class Effect(str, Enum):
    NONE = "none"
    NEW_RECIPE = "new_recipe"
    ADD_INGREDIENT = "add_ingredient"
    ADD_INSTRUCTION = "add_instruction"


SECTION_MARKERS: Dict[str, ReadState] = {
    SECTION_RECIPE: ReadState.NAME,
    SECTION_INGREDIENTS: ReadState.INGREDIENT,
    SECTION_INSTRUCTIONS: ReadState.INSTRUCTION,
}


class Step(NamedTuple):
    state: ReadState
    effect: Effect = Effect.NONE
    value: Union[str, Ingredient, None] = None


def parse_ingredient(line: str, *, lineno: int = 0) -> Ingredient:
    fields = line.split(INGREDIENT_SEPARATOR)
    if len(fields) != 3:
        raise FormatError(
            f"expected amount;measure;name, got {len(fields)} field(s)",
            lineno=lineno,
            line=line,
        )
    amount, measure, name = fields
    return Ingredient(amount=amount, measure=measure, name=name)


def transition(state: ReadState, line: str, *, lineno: int = 0) -> Step:
    """
    Decide what a single line of a recipe file means given the current section.

    Pure: the caller applies the returned effect. Blank lines and section
    markers only (possibly) move the state; any other line is content for the
    current section.
    """
    if line == "":
        return Step(state)

    marker_state: Optional[ReadState] = SECTION_MARKERS.get(line)
    if marker_state is not None:
        log.debug(f"Line {lineno}: entering {marker_state.value} section")
        return Step(marker_state)

    if state == ReadState.NAME:
        return Step(state, Effect.NEW_RECIPE, line)

    if state == ReadState.INGREDIENT:
        return Step(state, Effect.ADD_INGREDIENT, parse_ingredient(line, lineno=lineno))

    if state == ReadState.INSTRUCTION:
        return Step(state, Effect.ADD_INSTRUCTION, line)

    raise FormatError("content before any section marker", lineno=lineno, line=line)
