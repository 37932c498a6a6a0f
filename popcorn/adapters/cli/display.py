"""
Rendu Rich de l'etat de la session.

Fonctions pures : elles recoivent l'etat (classification de recherche,
detail, liste des films vus) et retournent des renderables Rich.
"""

from typing import Optional, Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from popcorn.core.entities.catalog import DetailRecord, SearchResultItem
from popcorn.core.entities.watched import Rating, WatchedEntry, WatchedSummary
from popcorn.services.detail_fetcher import (
    DetailFailed,
    DetailIdle,
    DetailLoaded,
    DetailLoading,
    DetailState,
)
from popcorn.services.search_controller import (
    Empty,
    Failed,
    Loading,
    Results,
    SearchOutcome,
)


def _or_dash(value: object) -> str:
    return "-" if value is None or value == "" else str(value)


def render_results(items: Sequence[SearchResultItem]) -> Table:
    """Table numerotee (1-based) des resultats de recherche."""
    table = Table(title=f"Trouve {len(items)} resultat(s)", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Type")
    table.add_column("Annee")
    table.add_column("ID", style="dim")
    for rank, item in enumerate(items, start=1):
        table.add_row(str(rank), item.title, item.media_type, _or_dash(item.release_year), item.id)
    return table


def render_outcome(outcome: SearchOutcome):
    """Rendu de la classification courante du controleur de recherche."""
    if isinstance(outcome, Loading):
        return Text("Chargement...", style="cyan")
    if isinstance(outcome, Failed):
        return Text(f"⛔ {outcome.reason}", style="red")
    if isinstance(outcome, Empty):
        return Text("Aucun resultat", style="yellow")
    if isinstance(outcome, Results):
        return render_results(outcome.items)
    raise TypeError(f"Classification inconnue: {outcome!r}")


def render_detail(record: DetailRecord, watched_rating: Optional[Rating] = None) -> Panel:
    """
    Panel du detail d'un titre.

    Args:
        record: Detail a afficher
        watched_rating: Note deja donnee si le titre est dans la liste
    """
    lines = [
        Text(f"{_or_dash(record.release_date)} • {_or_dash(record.runtime_minutes)} min"),
        Text(_or_dash(record.genre), style="italic"),
        Text(f"⭐ {_or_dash(record.external_rating)} IMDb rating"),
        Text(""),
        Text(_or_dash(record.plot), style="italic"),
        Text(f"Avec {_or_dash(record.actors)}"),
        Text(f"Realise par {_or_dash(record.director)}"),
    ]
    if watched_rating is not None:
        lines.append(Text(f"\nVous avez note ce film {watched_rating} ⭐", style="green"))
    title = record.title or record.id
    if record.release_year:
        title = f"{title} ({record.release_year})"
    return Panel(Group(*lines), title=f"[bold]{title}[/bold]", subtitle=record.id)


def render_detail_state(state: DetailState, watched_rating: Optional[Rating] = None):
    """Rendu de l'etat du chargeur de details."""
    if isinstance(state, DetailLoading):
        return Text("Chargement...", style="cyan")
    if isinstance(state, DetailFailed):
        return Text(f"⛔ {state.reason}", style="red")
    if isinstance(state, DetailLoaded):
        return render_detail(state.record, watched_rating)
    if isinstance(state, DetailIdle):
        return Text("")
    raise TypeError(f"Etat inconnu: {state!r}")


def render_summary(summary: WatchedSummary) -> Panel:
    """Panel de resume de la liste des films vus (moyennes a 2 decimales)."""
    text = Text.assemble(
        (f"#️⃣ {summary.count} films   ", "bold"),
        f"⭐️ {summary.avg_external_rating:.2f}   ",
        f"🌟 {summary.avg_user_rating:.2f}   ",
        f"⏳ {summary.avg_runtime_minutes:.2f} min",
    )
    return Panel(text, title="Films vus")


def render_watched(entries: Sequence[WatchedEntry]) -> Table:
    """Table des films vus dans l'ordre d'insertion."""
    table = Table(show_lines=False)
    table.add_column("ID", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("⭐️", justify="right")
    table.add_column("🌟", justify="right")
    table.add_column("⏳", justify="right")
    for entry in entries:
        table.add_row(
            entry.id,
            entry.title,
            _or_dash(entry.external_rating),
            _or_dash(entry.user_rating),
            f"{_or_dash(entry.runtime_minutes)} min",
        )
    return table
