"""Typer CLI for leapnav: edit, scan and labels commands."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from leapnav.config import Config
from leapnav.engine.labels import LabelAllocator
from leapnav.engine.session import SearchSession
from leapnav.memory_host import MemoryHost, MemoryView
from leapnav.models.candidate import Candidate
from leapnav.models.options import BIDIRECTIONAL, SearchOptions
from leapnav.models.search import LabeledMatch, ScanReport
from leapnav.models.text import Position

app = typer.Typer(
    name="leapnav",
    help="Label-based jump navigation: type two characters, then a label.",
    no_args_is_help=True,
)


@app.command()
def edit(
    paths: Annotated[list[Path], typer.Argument(help="Files to open, one group each")],
    original: Annotated[
        Path | None, typer.Option("--original", help="Left side of a comparison tab")
    ] = None,
    modified: Annotated[
        Path | None, typer.Option("--modified", help="Right side of a comparison tab")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Open files in the desktop editor with jump search enabled."""
    if (original is None) != (modified is None):
        typer.echo("--original and --modified must be given together", err=True)
        raise typer.Exit(code=2)
    compare = (original, modified) if original is not None and modified is not None else None

    from leapnav.ui.app import run_app

    run_app(Config(), paths, compare, verbose=verbose)


@app.command()
def scan(
    path: Annotated[Path, typer.Argument(help="Text file to search", exists=True, dir_okay=False)],
    query: Annotated[str, typer.Argument(help="Anchor characters, optionally followed by a label")],
    line: Annotated[int, typer.Option("--line", help="Caret line (0-based)")] = 0,
    column: Annotated[int, typer.Option("--column", help="Caret column (0-based)")] = 0,
    forward: Annotated[bool, typer.Option("--forward/--no-forward")] = True,
    backward: Annotated[bool, typer.Option("--backward/--no-backward")] = True,
    case_sensitive: Annotated[bool, typer.Option("--case-sensitive")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON report")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Show the labels a search for QUERY would place in PATH."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = SearchOptions(0)
    if forward:
        options |= SearchOptions.FORWARD
    if backward:
        options |= SearchOptions.BACKWARD
    if case_sensitive:
        options |= SearchOptions.CASE_SENSITIVE
    if not options & BIDIRECTIONAL:
        typer.echo("At least one of --forward/--backward is required", err=True)
        raise typer.Exit(code=2)

    text = path.read_text(encoding="utf-8", errors="replace")
    view = MemoryView(path.name, text, document_id=str(path), caret=Position(line, column))
    report = asyncio.run(run_scan(MemoryHost.single(view), options, query))

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return
    if report.jumped_to is not None:
        match = report.jumped_to
        typer.echo(f"jump {match.line + 1}:{match.column + 1}  {match.preview}")
        return
    for match in report.matches:
        typer.echo(f"{match.label:<4} {match.line + 1}:{match.column + 1}  {match.preview}")
    typer.echo(f"\n{len(report.matches)} match(es)")


@app.command()
def labels(
    count: Annotated[int, typer.Argument(help="How many labels to print", min=1)] = 26,
) -> None:
    """Print labels in allocation order."""
    allocator = LabelAllocator(Config())
    for ordinal in range(count):
        typer.echo(f"{ordinal:>5} {allocator.next(ordinal)}")


async def run_scan(
    host: MemoryHost, options: SearchOptions, query: str, config: Config | None = None
) -> ScanReport:
    """Feed ``query`` to a session one keystroke at a time and report the outcome."""
    config = config or Config()
    session = SearchSession(host, options, config=config)
    for end in range(1, len(query) + 1):
        session.update(query[:end])

    anchor = query[: config.anchor_len]
    report = ScanReport(
        query=query,
        anchor=anchor,
        discriminator=query[config.anchor_len :],
        case_sensitive=session.case_sensitive,
    )
    if session.jump_target is not None:
        await session.jump_task  # type: ignore[misc]
        report.jumped_to = _labeled(host, session.jump_target, "")
        return report

    for candidate in session.matches():
        label = session.index.lookup_label(candidate, session.label_length) or ""
        report.matches.append(_labeled(host, candidate, label))
    session.cancel()
    return report


def _labeled(host: MemoryHost, candidate: Candidate, label: str) -> LabeledMatch:
    view = host.view(candidate.view_id)
    preview = view.line_text(candidate.line).strip() if view is not None else ""
    return LabeledMatch(
        view_id=candidate.view_id,
        line=candidate.line,
        column=candidate.start_column,
        label=label,
        preview=preview,
    )
