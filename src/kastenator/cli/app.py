# src/kastenator/cli/app.py
"""Command-line interface for Kastenator.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Resolves configuration
3. Calls commands module functions (or the AtomisationService)
4. Renders results with Rich
"""

from __future__ import annotations

import asyncio
import logging

try:
    import typer
    from rich.console import Console
    from rich.markdown import Markdown
    from rich.panel import Panel
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install kastenator[cli]"
    ) from e

from kastenator import __version__
from kastenator.atomisation import AtomisationService
from kastenator.commands import config_cmd, create, pick, stats
from kastenator.config import (
    ConfigError,
    create_discovery,
    create_service,
    create_vault,
    get_kastenator_config,
    load_env_file,
)
from kastenator.discovery import NoteDiscovery
from kastenator.models import AtomCandidate, Phase, SourceNote
from kastenator.storage import normalize_path, split_frontmatter

app = typer.Typer(
    name="kastenator",
    help="Kastenator - break quarry notes into atomic notes.",
    no_args_is_help=True,
)
console = Console()

EXCERPT_LENGTH = 500


def version_callback(value: bool) -> None:
    if value:
        console.print(f"kastenator {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show debug logging.",
    ),
) -> None:
    """Kastenator - atomise your quarry notes."""
    load_env_file()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _exit_with_config_error(error: ConfigError) -> None:
    console.print(f"[red]Error: {error.message}[/red]")
    if error.suggestion:
        console.print(f"[dim]{error.suggestion}[/dim]")
    raise typer.Exit(1)


@app.command()
def stats_cmd(
    vault_dir: str = typer.Option(
        None,
        "--vault",
        "-d",
        help="Vault directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    show_notes: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="List the quarry notes",
    ),
) -> None:
    """Show how many notes are waiting in the quarry."""
    result = asyncio.run(stats.stats(vault_dir=vault_dir, config_path=config_file))

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Quarry")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Quarry notes", str(result.total_notes))
    table.add_row("Folders", ", ".join(result.folders) or "(none)")
    table.add_row("Marker", f"{result.migration_field}:: {result.quarry_value}")

    console.print(table)

    if show_notes and result.notes:
        console.print()
        for title in result.notes:
            console.print(f"  {title}")


stats_cmd.__name__ = "stats"


@app.command()
def pick_cmd(
    vault_dir: str = typer.Option(
        None,
        "--vault",
        "-d",
        help="Vault directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Pick a random note from the quarry."""
    result = asyncio.run(pick.pick(vault_dir=vault_dir, config_path=config_file))

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if result.note is None:
        console.print("[dim]No notes in the quarry.[/dim]")
        raise typer.Exit(0)

    console.print(f"[bold]{result.note.title}[/bold]")
    console.print(f"[dim]{result.note.path}[/dim]")


pick_cmd.__name__ = "pick"


@app.command()
def config_cmd_handler(
    vault_dir: str = typer.Option(
        None,
        "--vault",
        "-d",
        help="Vault directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(vault_dir=vault_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Kastenator Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    table.add_row("vault_dir", result.vault_dir, "")
    table.add_row("", "", "")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")


config_cmd_handler.__name__ = "config"


# Atomisation walkthrough


def _split_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


async def _load_source(discovery: NoteDiscovery, note: str | None) -> SourceNote | None:
    if note is None:
        return await discovery.get_random_quarry_note()
    path = normalize_path(note)
    if not path.endswith(".md"):
        path += ".md"
    return await discovery.load_note(path)


def _show_introduction(source: SourceNote) -> None:
    _, body = split_frontmatter(source.content)
    excerpt = body[:EXCERPT_LENGTH]
    if len(body) > EXCERPT_LENGTH:
        excerpt += "..."
    console.print(Panel(Markdown(excerpt), title=source.title, subtitle=source.path))
    console.print(
        "[dim]Read the note, then name each distinct concept it contains. "
        "Each concept becomes one atom.[/dim]"
    )


def _identify_concepts(service: AtomisationService) -> None:
    console.print("\n[bold]Identification[/bold] [dim](blank line to finish)[/dim]")
    while True:
        concept = typer.prompt("Concept", default="", show_default=False).strip()
        if not concept:
            break
        candidate = service.add_candidate(concept)
        console.print(f"  [green]+[/green] {candidate.suggested_title}")


def _explain(service: AtomisationService, candidate: AtomCandidate) -> None:
    console.print(f"\n[bold]{candidate.concept}[/bold]")
    while True:
        explanation = typer.prompt("Explain it in your own words")
        service.update_candidate(candidate.id, {"explanation": explanation})
        validation = service.validate_explanation(candidate)
        if validation.valid:
            break
        console.print(f"[yellow]{validation.feedback}[/yellow]")
        for suggestion in validation.suggestions or []:
            console.print(f"  [dim]- {suggestion}[/dim]")
        if not typer.confirm("Revise explanation?", default=True):
            break

    evidence = typer.prompt("Evidence (quote from the source)", default="", show_default=False)
    tags = typer.prompt("Tags (comma-separated)", default="", show_default=False)
    related = typer.prompt("Related atoms (comma-separated)", default="", show_default=False)
    title = typer.prompt("Title", default=candidate.suggested_title)
    service.update_candidate(
        candidate.id,
        {
            "evidence": evidence.strip(),
            "tags": _split_list(tags),
            "related_atoms": _split_list(related),
            "suggested_title": title.strip() or candidate.suggested_title,
        },
    )


def _critique(service: AtomisationService, candidates: list[AtomCandidate]) -> None:
    console.print(f"\n[bold]Critique[/bold] [dim]({service.llm_provider_name})[/dim]")
    for candidate in candidates:
        critique = asyncio.run(service.agenerate_critique(candidate))
        service.update_candidate(candidate.id, {"critique": critique})
        console.print(Panel(Markdown(critique), title=candidate.suggested_title))


def _refine(service: AtomisationService, candidates: list[AtomCandidate]) -> None:
    console.print("\n[bold]Refinement[/bold]")
    for candidate in candidates:
        if typer.confirm(f"Edit explanation for '{candidate.suggested_title}'?", default=False):
            explanation = typer.prompt("Explanation", default=candidate.explanation)
            service.update_candidate(candidate.id, {"explanation": explanation})


def _confirm(service: AtomisationService, candidates: list[AtomCandidate]) -> None:
    console.print("\n[bold]Confirmation[/bold]")
    for candidate in candidates:
        console.print(f"\n[cyan]{candidate.suggested_title}[/cyan]\n{candidate.explanation}")
        approved = typer.confirm("Create this atom?", default=True)
        service.update_candidate(candidate.id, {"approved": approved})


@app.command()
def atomise_cmd(
    note: str = typer.Argument(None, help="Vault path of the note (default: random quarry note)"),
    vault_dir: str = typer.Option(
        None,
        "--vault",
        "-d",
        help="Vault directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    skip_critique: bool = typer.Option(
        False,
        "--skip-critique",
        help="Go straight from explanation to confirmation",
    ),
) -> None:
    """Atomise a quarry note interactively."""
    config = get_kastenator_config(vault_dir, config_file)
    if isinstance(config, ConfigError):
        _exit_with_config_error(config)

    vault = create_vault(config)
    service = create_service(config, vault)
    discovery = create_discovery(config, vault)

    source = asyncio.run(_load_source(discovery, note))
    if source is None:
        if note is None:
            console.print("[dim]No notes in the quarry.[/dim]")
            raise typer.Exit(0)
        console.print(f"[red]Error: Could not read {note}[/red]")
        raise typer.Exit(1)

    session = service.start_session(source)
    _show_introduction(source)

    service.advance_phase()
    _identify_concepts(service)
    if not session.candidates:
        console.print("[dim]No concepts identified. Nothing to do.[/dim]")
        service.end_session()
        raise typer.Exit(0)

    service.advance_phase()
    console.print("\n[bold]Explanation[/bold]")
    for candidate in session.candidates:
        _explain(service, candidate)

    if skip_critique:
        service.set_phase(Phase.CONFIRMATION)
    else:
        service.advance_phase()
        _critique(service, session.candidates)
        if typer.confirm("Refine explanations?", default=False):
            service.advance_phase()
            _refine(service, session.candidates)
        service.set_phase(Phase.CONFIRMATION)

    _confirm(service, session.candidates)
    if not any(c.approved for c in session.candidates):
        console.print("[dim]No atoms approved. Nothing created.[/dim]")
        service.end_session()
        raise typer.Exit(0)

    service.advance_phase()
    result = asyncio.run(create.create(service, discovery))

    for path in result.created:
        console.print(f"[green]Created {path}[/green]")

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    service.advance_phase()
    count = len(result.created)
    console.print(f"\n[bold]Done.[/bold] {count} atom(s) created from {source.title}.")
    if result.source_marked:
        console.print(f"[dim]{source.title} marked as {service.settings.atomised_value}.[/dim]")
    service.end_session()


atomise_cmd.__name__ = "atomise"
