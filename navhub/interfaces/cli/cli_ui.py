#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from navhub.helpers.dto.navigation_dto import NavigationRoute, NavigationTreeNode

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class InfoPanel:
    """Simple panel for displaying status/info."""

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO) -> None:
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def show_spinner(message: str, task_fn: Callable, *args, **kwargs) -> Any:
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def routes_table(routes: list[NavigationRoute], title: str = "Registered routes") -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Module", style="bold")
    table.add_column("Route")
    table.add_column("View")
    table.add_column("Layout")
    table.add_column("Menu", style="dim")
    for r in routes:
        table.add_row(r.module_id, r.route, r.view_type, r.layout_profile, r.menu_id or "-")
    return table


def failures_table(details: list[dict[str, Any]]) -> Table:
    """Per-declaration validation failures of a rejected registration."""
    table = Table(title="Rejected route declarations", box=box.SIMPLE_HEAVY, title_style=f"bold {COLOR_ERROR}")
    table.add_column("#", justify="right")
    table.add_column("Route")
    table.add_column("Code", style=COLOR_ERROR)
    table.add_column("Message")
    for d in details:
        error = d.get("error", {})
        table.add_row(str(d.get("index")), str(d.get("route")), error.get("code", ""), error.get("message", ""))
    return table


def navigation_tree(roots: list[NavigationTreeNode], label: str = "Navigation") -> Tree:
    """Render a navigation forest; built iteratively so deep trees cannot overflow the stack."""
    tree = Tree(f"[bold]{label}[/bold]")
    stack: list[tuple[Tree, NavigationTreeNode]] = [(tree, node) for node in reversed(roots)]
    while stack:
        parent, node = stack.pop()
        entry = node.entry
        style = "" if entry.is_active else "[dim]"
        branch = parent.add(
            f"{style}{escape(entry.title)} [{COLOR_INFO}]{escape(entry.path)}[/{COLOR_INFO}] (#{entry.sort_order})"
        )
        stack.extend((branch, child) for child in reversed(node.children))
    return tree


def print_success(message: str) -> None:
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str) -> None:
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str) -> None:
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")
