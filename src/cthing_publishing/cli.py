"""Typer CLI entry point for cthing-publishing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from cthing_publishing.config import PublishingConfig
from cthing_publishing.exceptions import PublishingError
from cthing_publishing.pom import PomCISystem, PomLicense
from cthing_publishing.publishing import PublishingExtension, RepoExtension
from cthing_publishing.scm import PomScm
from cthing_publishing.snapshot import load_project
from cthing_publishing.visualize import build_checks_table, build_notation_tree, build_scm_table

app = typer.Typer(add_completion=False, help="Derive C Thing Software publishing metadata.")
console = Console()


def _load_config() -> PublishingConfig:
    config = PublishingConfig.from_env()
    config.validate()
    logging.basicConfig(level=config.logging_level, format="[%(levelname)s] %(name)s: %(message)s")
    return config


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    return typer.Exit(code=1)


@app.command()
def scm(
    root: Annotated[Path, typer.Argument(help="Root directory of the Git working tree.")] = Path("."),
) -> None:
    """Show the SCM URLs derived from the Git remote."""
    try:
        _load_config()
        pom_scm = PomScm(root)
        if pom_scm.urls is None:
            console.print("[dim]No SCM information found.[/dim]")
            return
        console.print(build_scm_table(pom_scm.urls))
    except PublishingError as exc:
        raise _fail(exc) from None


@app.command()
def deps(
    snapshot: Annotated[Path, typer.Argument(help="Path to a resolved project snapshot (JSON).")],
    plain: Annotated[bool, typer.Option("--plain", help="Print the space separated property value.")] = False,
) -> None:
    """List the direct dependencies on organization artifacts."""
    try:
        project = load_project(snapshot)
        dependencies = PublishingExtension(project, _load_config()).find_dependencies()
        if plain:
            typer.echo(" ".join(dependencies))
        else:
            console.print(build_notation_tree(project, "dependencies", dependencies))
    except PublishingError as exc:
        raise _fail(exc) from None


@app.command()
def plugins(
    snapshot: Annotated[Path, typer.Argument(help="Path to a resolved project snapshot (JSON).")],
    plain: Annotated[bool, typer.Option("--plain", help="Print the space separated property value.")] = False,
) -> None:
    """List the organization Gradle plugins created by the project."""
    try:
        project = load_project(snapshot)
        plugin_ids = PublishingExtension(project, _load_config()).find_gradle_plugins()
        if plain:
            typer.echo(" ".join(plugin_ids))
        else:
            console.print(build_notation_tree(project, "plugins", plugin_ids))
    except PublishingError as exc:
        raise _fail(exc) from None


@app.command()
def pom(
    snapshot: Annotated[Path, typer.Argument(help="Path to a resolved project snapshot (JSON).")],
    license: Annotated[
        str, typer.Option("--license", help="Project license: ASL2, GPL2, INTERNAL, JETBRAINS or MIT.")
    ] = "ASL2",
    ci: Annotated[
        PomCISystem, typer.Option("--ci", help="CI system building the project.")
    ] = PomCISystem.GITHUB_ACTIONS,
) -> None:
    """Print the POM metadata for the project as JSON."""
    try:
        pom_license = PomLicense[license.upper()]
    except KeyError:
        raise typer.BadParameter(f"Unknown license: {license}", param_hint="--license") from None
    try:
        project = load_project(snapshot)
        action = PublishingExtension(project, _load_config()).create_pom_action()
        action.set_license(pom_license).set_ci_system(ci)
        metadata = action.execute(project)
        console.print_json(metadata.model_dump_json(exclude_none=True))
    except PublishingError as exc:
        raise _fail(exc) from None


@app.command()
def credentials(
    snapshot: Annotated[Path, typer.Argument(help="Path to a resolved project snapshot (JSON).")],
) -> None:
    """Show which publishing credentials are defined for the project."""
    try:
        project = load_project(snapshot)
        extension = PublishingExtension(project, _load_config())
        repo = RepoExtension(project)
        checks = {
            "signing": extension.can_sign(),
            "gradle plugin portal": extension.has_gradle_plugin_portal_credentials(),
            "artifact repository": repo.has_credentials(),
        }
        console.print(build_checks_table(checks))
        if repo.repo_url:
            console.print(f"[dim]Publishing to {repo.repo_url}[/dim]")
    except PublishingError as exc:
        raise _fail(exc) from None


def main() -> None:
    """Console-script entry point."""
    app()
