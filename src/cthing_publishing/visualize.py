"""Rich rendering utilities for publishing information."""

from __future__ import annotations

from rich.table import Table
from rich.tree import Tree

from cthing_publishing.models import ProjectSnapshot, ScmUrls


def build_scm_table(urls: ScmUrls) -> Table:
    """Build a Rich Table listing the SCM URLs of a repository.

    Args:
        urls: SCM URLs derived from the Git remote.

    Returns:
        A Rich Table object for rendering.
    """
    table = Table(title="SCM URLs")
    table.add_column("Kind", style="dim")
    table.add_column("URL")
    table.add_row("original", urls.original)
    table.add_row("read-only", urls.read_only)
    table.add_row("read-write", urls.read_write)
    table.add_row("browse", urls.browse)
    return table


def build_notation_tree(project: ProjectSnapshot, label: str, items: list[str]) -> Tree:
    """Build a Rich Tree with one leaf per dependency or plugin notation."""
    root = Tree(f"[bold]{project.group}:{project.name}:{project.version}[/bold]")
    if not items:
        root.add(f"[dim]No {label} found[/dim]")
        return root

    branch = root.add(label)
    for item in items:
        branch.add(item)
    return root


def build_checks_table(checks: dict[str, bool]) -> Table:
    table = Table(title="Publishing credentials")
    table.add_column("Check")
    table.add_column("Present")
    for name, present in checks.items():
        table.add_row(name, "[green]yes[/green]" if present else "[red]no[/red]")
    return table
