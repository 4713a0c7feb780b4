"""Sectioned plain-text recipe format — parse and serialize.

Each recipe consists of the sections ``[Recept]``, ``[Ingredienser]`` and
``[Instruktioner]``. The line after ``[Recept]`` is the recipe name. The
lines after ``[Ingredienser]`` up to ``[Instruktioner]`` are ingredients,
one per line, written as ``amount;unit;name``. The lines after
``[Instruktioner]`` up to the next ``[Recept]`` or the end of the file are
instructions, one per line. Blank lines are ignored anywhere.

There is no escaping: a field can never contain ``;`` or a line break.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import ValidationError

from filed_recipes.domain.errors import RecipeFormatError
from filed_recipes.domain.models.enums import RecipeReadStatus
from filed_recipes.domain.models.recipe import Ingredient, Recipe

SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"

INGREDIENT_DELIMITER = ";"
INGREDIENT_FIELD_COUNT = 3

_SECTION_STATUS = {
    SECTION_RECIPE: RecipeReadStatus.EXPECTING_NAME,
    SECTION_INGREDIENTS: RecipeReadStatus.READING_INGREDIENTS,
    SECTION_INSTRUCTIONS: RecipeReadStatus.READING_INSTRUCTIONS,
}


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_ingredient(line: str, line_number: int | None = None) -> Ingredient:
    """Parse one ``amount;unit;name`` line.

    Raises:
        RecipeFormatError: If the line does not split into exactly three
            fields, or the ingredient name is empty.
    """
    parts = line.split(INGREDIENT_DELIMITER)
    if len(parts) != INGREDIENT_FIELD_COUNT:
        raise RecipeFormatError(
            f"ingredient must have {INGREDIENT_FIELD_COUNT} "
            f"'{INGREDIENT_DELIMITER}'-separated fields, found {len(parts)}",
            line_number=line_number,
            line=line,
        )
    try:
        return Ingredient.from_fields(*parts)
    except ValidationError as exc:
        raise RecipeFormatError(
            "ingredient name is empty", line_number=line_number, line=line
        ) from exc


def parse_lines(lines: Iterable[str]) -> list[Recipe]:
    """Parse recipe file lines into a list of recipes sorted by name.

    Args:
        lines: The file content, one item per line. Trailing line
            terminators are ignored.

    Returns:
        The recipes, sorted by name (stable for equal names).

    Raises:
        RecipeFormatError: If the text does not follow the section grammar.
    """
    recipes: list[Recipe] = []
    status = RecipeReadStatus.INDEFINITE
    current: Recipe | None = None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        section = _SECTION_STATUS.get(line)
        if section is not None:
            if section is RecipeReadStatus.EXPECTING_NAME:
                current = None
            elif current is None:
                raise RecipeFormatError(
                    "section appears before any recipe name",
                    line_number=line_number,
                    line=line,
                )
            status = section
            continue

        if status is RecipeReadStatus.EXPECTING_NAME:
            if current is not None:
                raise RecipeFormatError(
                    f"expected {SECTION_INGREDIENTS} or {SECTION_INSTRUCTIONS} "
                    "after the recipe name",
                    line_number=line_number,
                    line=line,
                )
            current = Recipe(name=line)
            recipes.append(current)
        elif current is None:
            # Only INDEFINITE gets here: the other sections need a recipe.
            raise RecipeFormatError(
                f"content before the first {SECTION_RECIPE} section",
                line_number=line_number,
                line=line,
            )
        elif status is RecipeReadStatus.READING_INGREDIENTS:
            current.add_ingredient(parse_ingredient(line, line_number))
        else:
            current.add_instruction(line)

    if status is RecipeReadStatus.EXPECTING_NAME and current is None:
        raise RecipeFormatError(f"{SECTION_RECIPE} section without a recipe name")

    return sorted(recipes, key=lambda r: r.name)


def parse_text(text: str) -> list[Recipe]:
    """Parse a whole recipe file given as one string."""
    return parse_lines(text.splitlines())


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _check_field(value: str, what: str) -> str:
    if "\n" in value or "\r" in value:
        raise RecipeFormatError(f"{what} cannot contain a line break", line=value)
    return value


def _check_line(value: str, what: str) -> str:
    value = _check_field(value, what)
    if value in _SECTION_STATUS:
        raise RecipeFormatError(f"{what} cannot be a section marker", line=value)
    return value


def format_ingredient(ingredient: Ingredient) -> str:
    """Return the ``amount;unit;name`` line for *ingredient*."""
    fields: list[str] = []
    for label, value in zip(("amount", "unit", "name"), ingredient.as_tuple()):
        value = _check_field(value, f"ingredient {label}")
        if INGREDIENT_DELIMITER in value:
            raise RecipeFormatError(
                f"ingredient {label} cannot contain '{INGREDIENT_DELIMITER}'",
                line=value,
            )
        fields.append(value)
    return INGREDIENT_DELIMITER.join(fields)


def serialize_recipe(recipe: Recipe) -> list[str]:
    """Return the lines for a single recipe, markers included."""
    lines = [SECTION_RECIPE, _check_line(recipe.name, "recipe name")]
    lines.append(SECTION_INGREDIENTS)
    lines.extend(format_ingredient(ing) for ing in recipe.ingredients)
    lines.append(SECTION_INSTRUCTIONS)
    for instruction in recipe.instructions:
        instruction = _check_line(instruction.strip(), "instruction")
        # Blank lines are skipped on read.
        if instruction:
            lines.append(instruction)
    return lines


def serialize_recipes(
    recipes: Iterable[Recipe],
    *,
    blank_line_between: bool = True,
) -> list[str]:
    """Convert recipes to file lines, in the given order.

    Args:
        recipes: The recipes to write.
        blank_line_between: Separate consecutive recipes with an empty line.

    Raises:
        RecipeFormatError: If a value cannot be represented in the format.
    """
    lines: list[str] = []
    for i, recipe in enumerate(recipes):
        if i and blank_line_between:
            lines.append("")
        lines.extend(serialize_recipe(recipe))
    return lines
