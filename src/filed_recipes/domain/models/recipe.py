"""Recipe-related domain models.

Contains the Ingredient and Recipe entities. These are Pydantic models, so
equality is structural: two recipes with the same name, ingredients and
instructions compare equal even when they are distinct objects.

This module belongs to the Domain layer. It only depends on Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Ingredient
# ---------------------------------------------------------------------------


class Ingredient(BaseModel):
    """One recipe component: an (amount, unit, name) triple."""

    amount: str = Field("", description="Free-form quantity, e.g. '2' or '1/2'")
    unit: str = Field("", description="Free-form unit, e.g. 'dl' or 'st'")
    name: str = Field(..., min_length=1, description="Ingredient name")

    @field_validator("amount", "unit", "name", mode="before")
    @classmethod
    def _strip(cls, v: str) -> str:
        """Strip surrounding whitespace from every field."""
        if isinstance(v, str):
            return v.strip()
        return v

    @classmethod
    def from_fields(cls, amount: str, unit: str, name: str) -> Ingredient:
        """Build an ingredient from its three fields, in file order."""
        return cls(amount=amount, unit=unit, name=name)

    def as_tuple(self) -> tuple[str, str, str]:
        """Return ``(amount, unit, name)``."""
        return (self.amount, self.unit, self.name)

    def __str__(self) -> str:
        """Human-readable form, e.g. ``2 dl flour``."""
        return " ".join(part for part in self.as_tuple() if part)


# ---------------------------------------------------------------------------
# Recipe
# ---------------------------------------------------------------------------


class Recipe(BaseModel):
    """A named dish with ordered ingredients and ordered instructions."""

    name: str = Field(..., min_length=1)
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("instructions", mode="before")
    @classmethod
    def _strip_instructions(cls, v: list[str]) -> list[str]:
        """Strip every instruction and drop the blank ones."""
        if isinstance(v, (list, tuple)):
            return [
                item.strip() if isinstance(item, str) else item
                for item in v
                if not (isinstance(item, str) and not item.strip())
            ]
        return v

    def add_ingredient(self, ingredient: Ingredient) -> None:
        """Append an ingredient."""
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        """Append one instruction line, stripped. Blank lines are ignored."""
        instruction = instruction.strip()
        if instruction:
            self.instructions.append(instruction)

    def clone(self) -> Recipe:
        """Return a deep copy that shares no lists or ingredients with *self*."""
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return self.name
