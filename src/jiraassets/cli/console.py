"""Shared Rich consoles. Stdout carries protocol JSON, human messages go to stderr."""

import json
import os
from functools import wraps

from rich.console import Console
from rich.markup import escape

_error_console = Console(stderr=True)


def _should_print() -> bool:
    """Check if console output is enabled."""
    return os.environ.get("JIRAASSETS_CONSOLE_ENABLED", "true").lower() == "true"


def _console_output(func):
    """Decorator to check if console output is enabled."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _should_print():
            return func(*args, **kwargs)

    return wrapper


@_console_output
def print_error(message: str):
    """Print error message to stderr."""
    _error_console.print(f"[red]{escape(message)}[/red]", highlight=False)


@_console_output
def print_warning(message: str):
    """Print warning message to stderr."""
    _error_console.print(f"[yellow]{escape(message)}[/yellow]", highlight=False)


def print_json(data: dict):
    """Print a protocol document on stdout (always outputs)."""
    print(json.dumps(data, indent=2))
