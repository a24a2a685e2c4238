from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, constr


class Ingredient(BaseModel):
    amount: str = ""
    measure: str = ""
    name: str = ""


class Recipe(BaseModel):
    name: constr(min_length=1)
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    # Assigned by the repository on load; copies handed out keep it.
    key: Optional[str] = Field(default=None, exclude=True)

    def __eq__(self, other: object) -> bool:
        # Value equality covers the recipe content only, never the key.
        if not isinstance(other, Recipe):
            return NotImplemented
        return (
            self.name == other.name
            and self.ingredients == other.ingredients
            and self.instructions == other.instructions
        )

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def clone(self) -> Recipe:
        """Return an independent copy sharing no lists with this recipe."""
        return self.model_copy(deep=True)
