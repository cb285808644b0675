"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Results go to stdout as JSON (or as a Rich tree for page hierarchies);
status and error messages go to stderr so stdout stays machine-readable.
"""

import json
from typing import Any, List

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from src.models.wiki_page import PageNode


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Output verbosity level (0=results only, 1=info, 2=debug)
        console: Rich Console for results (stdout)
        err_console: Rich Console for messages (stderr)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.print_json([{"title": "Home"}])
        >>> handler.success("Page updated")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=results only, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(no_color=no_color, highlight=False)
        self.err_console = Console(stderr=True, no_color=no_color, highlight=False)

    def success(self, message: str) -> None:
        self.err_console.print(f"[green]✓[/green] {_escape(message)}")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]✗ {_escape(message)}[/red]")

    def warning(self, message: str) -> None:
        self.err_console.print(f"[yellow]⚠ {_escape(message)}[/yellow]")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.err_console.print(_escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.err_console.print(f"[dim]{_escape(message)}[/dim]")

    def print_json(self, data: Any) -> None:
        """Write a result to stdout as indented JSON."""
        self.console.print_json(json.dumps(data, ensure_ascii=False))

    def print_tree(self, roots: List[PageNode], label: str = "wiki") -> None:
        """Render a page hierarchy as a Rich tree.

        Args:
            roots: Root nodes returned by the tree builder
            label: Label of the tree's top node
        """
        tree = Tree(f"[bold]{_escape(label)}[/bold]")

        def add(branch: Tree, nodes: List[PageNode]) -> None:
            for node in nodes:
                title = node.title or node.path or "/"
                child = branch.add(f"{_escape(title)} [dim]({_escape(node.path)})[/dim]")
                add(child, node.children)

        add(tree, roots)
        self.console.print(tree)


def _escape(text: str) -> str:
    return escape(str(text))
