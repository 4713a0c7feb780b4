"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that knows
nothing about how recipes are stored.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from filed_recipes.domain.models.recipe import Recipe

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Filed Recipes") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


def json_panel(raw_json: str, title: str = "⚙️  Settings") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Recipes
# ---------------------------------------------------------------------------


def recipe_table(recipes: Sequence[Recipe], title: str = "📖 Recipes") -> Table:
    """Build a numbered table of recipe names (numbers start at 1)."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Recipe", style="bold")
    table.add_column("Ingredients", justify="right")
    table.add_column("Steps", justify="right")

    for number, recipe in enumerate(recipes, start=1):
        table.add_row(
            str(number),
            escape(recipe.name),
            str(len(recipe.ingredients)),
            str(len(recipe.instructions)),
        )
    return table


def recipe_panel(recipe: Recipe) -> Panel:
    """Build a panel showing one recipe in full."""
    ingredients = Table.grid(padding=(0, 2))
    ingredients.add_column(justify="right", style="cyan")
    ingredients.add_column(style="cyan")
    ingredients.add_column()
    for ing in recipe.ingredients:
        ingredients.add_row(escape(ing.amount), escape(ing.unit), escape(ing.name))

    steps = Text()
    for number, instruction in enumerate(recipe.instructions, start=1):
        if number > 1:
            steps.append("\n")
        steps.append(f"{number}. ", style="bold")
        steps.append(instruction)

    return Panel(
        Group(
            Text("Ingredients", style="bold underline"),
            ingredients,
            Text(""),
            Text("Instructions", style="bold underline"),
            steps,
        ),
        title=f"[bold]{escape(recipe.name)}[/]",
        border_style="green",
    )


def show_recipe(recipe: Recipe) -> None:
    """Print one recipe in full."""
    console.print(recipe_panel(recipe))


def show_recipes(recipes: Sequence[Recipe]) -> None:
    """Print the numbered recipe list."""
    console.print(recipe_table(recipes))
