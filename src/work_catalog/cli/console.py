"""
Console abstraction layer for CLI output.

Provides a unified interface for Rich and Plain console modes:
- Rich tables for interactive terminals
- Tab separated plain rows for pipes, CI and ``--no-rich``
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table


class BaseConsole(ABC):
    """Abstract base class for console implementations."""

    @abstractmethod
    def table(self, title: str, columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        """Render rows under the given column headers."""
        ...

    @abstractmethod
    def print(self, *args: Any, **kwargs: Any) -> None:
        ...


class RichConsole(BaseConsole):
    """Rich console implementation with styled tables."""

    def __init__(self) -> None:
        self._console = Console()

    def table(self, title: str, columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        table = Table(title=title)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        self._console.print(table)

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)


class PlainConsole(BaseConsole):
    """Plain text console implementation for non-TTY and CI environments."""

    def table(self, title: str, columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        print("\t".join(columns))
        for row in rows:
            print("\t".join(row))

    def print(self, *args: Any, **kwargs: Any) -> None:
        # Filter out Rich-specific kwargs
        safe_kwargs = {
            k: v for k, v in kwargs.items() if k in {"sep", "end", "file", "flush"}
        }
        print(*args, **safe_kwargs)


def get_console(no_rich: bool = False) -> BaseConsole:
    """Factory function to get appropriate console implementation.

    Selection logic:
    1. If --no-rich flag is set -> PlainConsole
    2. If stdout is not a TTY (CI/CD, pipes) -> PlainConsole
    3. Otherwise -> RichConsole
    """
    if no_rich or not sys.stdout.isatty():
        return PlainConsole()
    return RichConsole()


__all__ = [
    "BaseConsole",
    "RichConsole",
    "PlainConsole",
    "get_console",
]
