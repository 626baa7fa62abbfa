"""mb-artists command line.

Commands map one-to-one onto `ArtistService` operations; `doctor` holds the
environment checks.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console

from adapters.json_exporter import dump_model_json, export_model_json
from adapters.musicbrainz_client import MusicBrainzClient
from cli import doctor
from cli.ui_components import build_artist_panel, build_artists_table
from core.config import AppSettings
from core.domain.errors import MusicBrainzError
from core.domain.models import Artist, ArtistList
from core.domain.query import QueryParameters
from core.logging import setup_logging
from core.services.artist_service import DEFAULT_LIMIT, DEFAULT_OFFSET, ArtistService

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Lookup, search and browse MusicBrainz artists.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

ResultT = TypeVar("ResultT", bound=BaseModel)

_LimitOption = typer.Option(DEFAULT_LIMIT, "--limit", "-l", min=1, max=100, help="Page size.")
_OffsetOption = typer.Option(DEFAULT_OFFSET, "--offset", "-o", min=0, help="Page offset.")
_IncOption = typer.Option(None, "--inc", "-i", help="Sub-entity to include (repeatable).")
_JsonOption = typer.Option(False, "--json", help="Print raw JSON instead of a table.")
_OutputOption = typer.Option(None, "--output", help="Also write the JSON result to this file.")


def parse_field(raw: str) -> tuple[str, str]:
    """Split a `key=value` CLI pair."""

    key, sep, value = raw.partition("=")
    if not sep or not key.strip() or not value.strip():
        raise typer.BadParameter(f"expected key=value, got '{raw}'")
    return key.strip(), value.strip()


def build_query(fields: list[str], excludes: list[str]) -> QueryParameters[Artist]:
    query: QueryParameters[Artist] = QueryParameters(Artist)
    try:
        for raw in fields:
            query.add(*parse_field(raw))
        for raw in excludes:
            query.add(*parse_field(raw), negate=True)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return query


def _execute(call: Callable[[ArtistService], Awaitable[ResultT]]) -> ResultT:
    async def _runner() -> ResultT:
        async with MusicBrainzClient(AppSettings()) as client:
            return await call(client.artists)

    try:
        return asyncio.run(_runner())
    except (MusicBrainzError, ValueError) as exc:
        logger.debug("Command failed", exc_info=exc)
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _emit(result: BaseModel, *, as_json: bool, output: Path | None, title: str = "Artists") -> None:
    if output is not None:
        path = export_model_json(model=result, output_path=output)
        _err_console.print(f"[green]Saved JSON to:[/green] {path}")

    if as_json:
        _console.print_json(dump_model_json(result))
    elif isinstance(result, ArtistList):
        _console.print(build_artists_table(result, title=title))
    elif isinstance(result, Artist):
        _console.print(build_artist_panel(result))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    setup_logging("DEBUG" if verbose else AppSettings().log_level, console=_err_console)


@app.command()
def lookup(
    mbid: str = typer.Argument(..., help="Artist MBID."),
    inc: Optional[List[str]] = _IncOption,
    as_json: bool = _JsonOption,
    output: Optional[Path] = _OutputOption,
) -> None:
    """Lookup one artist by MBID."""

    artist = _execute(lambda service: service.lookup(mbid, inc))
    _emit(artist, as_json=as_json, output=output)


@app.command()
def search(
    query: Optional[str] = typer.Argument(None, help="Free-text (Lucene) query."),
    field: Optional[List[str]] = typer.Option(
        None, "--field", "-f", help="Structured field, key=value (repeatable)."
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-x", help="Negated field, key=value (repeatable)."
    ),
    limit: int = _LimitOption,
    offset: int = _OffsetOption,
    as_json: bool = _JsonOption,
    output: Optional[Path] = _OutputOption,
) -> None:
    """Search artists by free text or by structured fields."""

    if field or exclude:
        if query:
            raise typer.BadParameter("use either QUERY or --field/--exclude, not both")
        parameters = build_query(field or [], exclude or [])
        result = _execute(lambda service: service.search_query(parameters, limit, offset))
    else:
        result = _execute(lambda service: service.search(query, limit, offset))
    _emit(result, as_json=as_json, output=output, title="Search results")


@app.command()
def browse(
    entity: str = typer.Argument(..., help="Related entity (area, collection, recording, release, release-group, work)."),
    mbid: str = typer.Argument(..., help="MBID of the related entity."),
    limit: int = _LimitOption,
    offset: int = _OffsetOption,
    inc: Optional[List[str]] = _IncOption,
    as_json: bool = _JsonOption,
    output: Optional[Path] = _OutputOption,
) -> None:
    """Browse artists linked to another entity."""

    result = _execute(lambda service: service.browse(entity, mbid, limit, offset, inc))
    _emit(result, as_json=as_json, output=output, title=f"Artists linked to {entity} {mbid}")


def run() -> None:
    app()
