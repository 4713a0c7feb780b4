"""Filed Recipes — a recipe collection kept in a sectioned plain-text file."""

__version__ = "0.1.0"
