"""Thin CLI wrapper — Typer commands that delegate to the recipe repository.

All wiring is done through the Container (bootstrap.py).
Recipe numbers on the command line start at 1, as shown by ``list``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape

from filed_recipes.bootstrap import Container
from filed_recipes.domain.errors import FiledRecipesError
from filed_recipes.domain.ports.recipe_repository import RecipeRepositoryPort
from filed_recipes.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    show_recipe,
    show_recipes,
    success_panel,
)

app = typer.Typer(
    name="filed-recipes",
    help="📖 Recipes kept in a plain-text file",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage Filed Recipes settings",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Recipe file (defaults to the configured one)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Load, browse and edit a recipe file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.obj = Container(recipes_file=file, raise_errors=True)


def _load(ctx: typer.Context) -> RecipeRepositoryPort:
    """Load the recipe file, exiting with code 1 when that fails."""
    container: Container = ctx.obj
    repo = container.repository
    try:
        repo.load()
    except FileNotFoundError:
        error_message(f"Recipe file not found: {repo.path}")
        raise typer.Exit(code=1)
    except (FiledRecipesError, OSError, UnicodeDecodeError) as exc:
        error_message(f"Could not read recipes: {exc}")
        raise typer.Exit(code=1)
    return repo


def _check_number(repo: RecipeRepositoryPort, number: int) -> int:
    """Convert a 1-based recipe number to an index, exiting if out of range."""
    count = len(repo)
    if not 1 <= number <= count:
        error_message(f"No recipe number {number} (there are {count}).")
        raise typer.Exit(code=1)
    return number - 1


# ---------------------------------------------------------------------------
# Recipe commands
# ---------------------------------------------------------------------------


@app.command("list")
def list_recipes(ctx: typer.Context) -> None:
    """List all recipes by name."""
    repo = _load(ctx)
    recipes = repo.get_all()
    if not recipes:
        console.print("[yellow]No recipes in this file.[/]")
        return
    show_recipes(recipes)


@app.command()
def show(
    ctx: typer.Context,
    number: Annotated[int, typer.Argument(help="Recipe number as shown by 'list'")],
) -> None:
    """Show one recipe in full."""
    repo = _load(ctx)
    show_recipe(repo.get_at(_check_number(repo, number)))


@app.command("show-all")
def show_all(
    ctx: typer.Context,
    pause: Annotated[
        bool, typer.Option("--pause/--no-pause", help="Wait for a key between recipes")
    ] = True,
) -> None:
    """Show every recipe in full, in name order."""
    repo = _load(ctx)
    recipes = repo.get_all()
    for i, recipe in enumerate(recipes):
        show_recipe(recipe)
        if pause and i < len(recipes) - 1:
            typer.pause("Press any key to show the next recipe...")


@app.command()
def delete(
    ctx: typer.Context,
    number: Annotated[int, typer.Argument(help="Recipe number as shown by 'list'")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
) -> None:
    """Delete a recipe and save the file."""
    repo = _load(ctx)
    recipe = repo.get_at(_check_number(repo, number))

    if not yes and not typer.confirm(f"Delete '{recipe.name}' and save the file?"):
        raise typer.Abort()

    repo.delete(recipe)
    try:
        repo.save()
    except (FiledRecipesError, OSError) as exc:
        error_message(f"Could not save recipes: {exc}")
        raise typer.Exit(code=1)
    success_panel(f"🗑️  Deleted [bold]{escape(recipe.name)}[/]")


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the active settings."""
    container: Container = ctx.obj
    json_panel(container.settings.model_dump_json(indent=2))
    console.print(f"Settings file: [cyan]{container.settings_manager.settings_path}[/]")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Delete persisted settings and go back to the defaults."""
    container: Container = ctx.obj
    container.settings_manager.reset_to_defaults()
    success_panel("✅ Settings reset to defaults", title="⚙️  Config Reset")
