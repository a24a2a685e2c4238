import pytest

from filed_recipes.app.core.errors import FormatError
from filed_recipes.app.core.state_machine import Effect, ReadState, transition
from filed_recipes.app.models.recipe import Ingredient


def test_markers_switch_state():
    assert transition(ReadState.INDEFINITE, "[Recept]").state == ReadState.NAME
    assert transition(ReadState.NAME, "[Ingredienser]").state == ReadState.INGREDIENT
    assert transition(ReadState.INGREDIENT, "[Instruktioner]").state == ReadState.INSTRUCTION
    assert transition(ReadState.INSTRUCTION, "[Recept]").effect == Effect.NONE


def test_blank_line_keeps_state():
    step = transition(ReadState.INGREDIENT, "")
    assert step.state == ReadState.INGREDIENT
    assert step.effect == Effect.NONE


def test_markers_are_exact():
    # Surrounding whitespace or different case makes it a content line
    step = transition(ReadState.INSTRUCTION, " [Recept]")
    assert step.effect == Effect.ADD_INSTRUCTION
    assert step.value == " [Recept]"
    assert transition(ReadState.INSTRUCTION, "[recept]").effect == Effect.ADD_INSTRUCTION


def test_content_lines_per_state():
    assert transition(ReadState.NAME, "Pancakes") == (ReadState.NAME, Effect.NEW_RECIPE, "Pancakes")
    assert transition(ReadState.INGREDIENT, "2;dl;flour") == (
        ReadState.INGREDIENT,
        Effect.ADD_INGREDIENT,
        Ingredient(amount="2", measure="dl", name="flour"),
    )
    assert transition(ReadState.INSTRUCTION, "Mix") == (ReadState.INSTRUCTION, Effect.ADD_INSTRUCTION, "Mix")


def test_empty_ingredient_fields_are_legal():
    step = transition(ReadState.INGREDIENT, ";;salt")
    assert step.value == Ingredient(amount="", measure="", name="salt")


@pytest.mark.parametrize("line", ["2;cups", "1;2;3;4", "flour"])
def test_wrong_ingredient_field_count(line):
    with pytest.raises(FormatError) as exc:
        transition(ReadState.INGREDIENT, line, lineno=7)
    assert exc.value.lineno == 7
    assert exc.value.line == line


def test_content_before_any_marker():
    with pytest.raises(FormatError):
        transition(ReadState.INDEFINITE, "Pancakes")
