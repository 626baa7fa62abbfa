"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en lookup, search y browse.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Artist, ArtistList


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("mb-artists", style="bold cyan")
    subtitle = Text("MusicBrainz artist lookup • search • browse", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _life_span(artist: Artist) -> str:
    span = artist.life_span
    if span is None or (not span.begin and not span.end):
        return ""
    begin = span.begin or "?"
    if span.end:
        return f"{begin} - {span.end}"
    if span.ended:
        return f"{begin} - ?"
    return f"{begin} -"


def build_artists_table(result: ArtistList, *, title: str = "Artists") -> Table:
    """Table for one page of artists, with paging info in the caption."""

    table = Table(title=title)
    table.add_column("Score", style="green", justify="right")
    table.add_column("Name", style="bold white", overflow="fold", min_width=12)
    table.add_column("Type", style="cyan")
    table.add_column("Country", style="magenta", no_wrap=True)
    table.add_column("Life span", style="white", no_wrap=True)
    table.add_column("MBID", style="dim", overflow="fold")

    for artist in result.artists:
        name = artist.name
        if artist.disambiguation:
            name = f"{name} ({artist.disambiguation})"
        table.add_row(
            "" if artist.score is None else str(artist.score),
            name,
            artist.type or "",
            artist.country or "",
            _life_span(artist),
            artist.id,
        )

    shown_to = result.offset + len(result.artists)
    table.caption = f"{result.offset + 1 if result.artists else 0}-{shown_to} of {result.count}"
    return table


def build_artist_panel(artist: Artist) -> Panel:
    """Detail panel for a single looked-up artist."""

    body = Text()
    body.append(artist.name, style="bold")
    if artist.sort_name and artist.sort_name != artist.name:
        body.append(f"  [{artist.sort_name}]", style="dim")
    body.append("\n")
    if artist.disambiguation:
        body.append(f"{artist.disambiguation}\n", style="italic")

    rows: list[tuple[str, str]] = [
        ("Type", artist.type or ""),
        ("Gender", artist.gender or ""),
        ("Country", artist.country or ""),
        ("Area", artist.area.name if artist.area else ""),
        ("Life span", _life_span(artist)),
        ("ISNI", ", ".join(artist.isnis)),
        ("Aliases", ", ".join(alias.name for alias in artist.aliases[:10])),
        ("Tags", ", ".join(tag.name for tag in artist.tags[:10])),
        ("Genres", ", ".join(genre.name for genre in artist.genres[:10])),
    ]
    for label, value in rows:
        if value:
            body.append(f"\n{label}: ", style="bold")
            body.append(value)

    extra = sorted((artist.model_extra or {}).keys())
    if extra:
        body.append(f"\n\nIncluded: {', '.join(extra)}", style="dim")

    return Panel(body, title=Text(artist.id, style="dim"), border_style="cyan")
