"""
Commandes CLI Popcorn : recherche, detail, navigation interactive et
gestion de la liste des films vus.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.prompt import Prompt

from popcorn.adapters.cli import console
from popcorn.adapters.cli.display import (
    render_detail_state,
    render_outcome,
    render_summary,
    render_watched,
)
from popcorn.adapters.cli.helpers import suppress_loguru, with_container
from popcorn.core.entities.watched import Rating
from popcorn.services.browser import BrowserSession
from popcorn.services.detail_fetcher import DetailLoaded
from popcorn.services.search_controller import Failed, Results
from popcorn.services.watched_list import WatchedListError

# Note maximale donnee par l'utilisateur (echelle en etoiles)
MAX_USER_RATING = 10

BROWSE_HELP = (
    "[dim]Saisir un titre pour rechercher, 'o <numero>' pour ouvrir/fermer un resultat,\n"
    "'r <note>' pour noter le film ouvert, 'x' pour fermer le detail,\n"
    "'w' pour la liste des films vus, 'd <id>' pour en retirer un, 'q' pour quitter.[/dim]"
)

watched_app = typer.Typer(help="Gestion de la liste des films vus")


def _require_catalog(container) -> None:
    if not container.config().omdb_enabled:
        console.print("[red]Cle API OMDb non configuree (POPCORN_OMDB_API_KEY).[/red]")
        raise typer.Exit(code=1)


def parse_user_rating(raw: str) -> Optional[Rating]:
    """
    Interprete une note saisie ("8", "7.5").

    Returns:
        int si la note est entiere, float sinon, None si invalide ou hors [1, 10]
    """
    try:
        value = float(raw.replace(",", "."))
    except ValueError:
        return None
    if not 1 <= value <= MAX_USER_RATING:
        return None
    return int(value) if value.is_integer() else value


# ============================================================================
# search / show
# ============================================================================


def search(
    query: Annotated[str, typer.Argument(help="Titre a rechercher")],
) -> None:
    """Recherche des films par titre dans le catalogue."""
    asyncio.run(_search_async(query))


@with_container
async def _search_async(container, query: str) -> None:
    _require_catalog(container)
    session: BrowserSession = container.browser_session(debounce_seconds=0.0)
    try:
        handle = session.set_query(query)
        await handle.wait()
        console.print(render_outcome(session.search.state))
    finally:
        await session.aclose()

    if isinstance(session.search.state, Failed):
        raise typer.Exit(code=1)


def show(
    item_id: Annotated[str, typer.Argument(help="Identifiant IMDb (ttXXXXXXX)")],
) -> None:
    """Affiche le detail d'un film."""
    asyncio.run(_show_async(item_id))


@with_container
async def _show_async(container, item_id: str) -> None:
    _require_catalog(container)
    session: BrowserSession = container.browser_session()
    try:
        session.select(item_id)
        await session.wait_for_detail()
        state = session.details.state
        console.print(render_detail_state(state, session.watched.user_rating_for(item_id)))
    finally:
        await session.aclose()

    if not isinstance(state, DetailLoaded):
        raise typer.Exit(code=1)


# ============================================================================
# browse (boucle interactive)
# ============================================================================


def browse() -> None:
    """Navigation interactive : recherche, detail, notation."""
    asyncio.run(_browse_async())


@with_container
async def _browse_async(container) -> None:
    _require_catalog(container)
    session: BrowserSession = container.browser_session()
    console.print(BROWSE_HELP)
    try:
        with suppress_loguru():
            while True:
                raw = await asyncio.to_thread(Prompt.ask, "[bold cyan]popcorn[/bold cyan]", default="")
                if not await handle_browse_input(session, raw.strip()):
                    break
    finally:
        await session.aclose()


async def handle_browse_input(session: BrowserSession, raw: str) -> bool:
    """
    Applique une saisie de la boucle interactive a la session.

    Returns:
        False pour quitter la boucle, True sinon
    """
    if raw == "q":
        return False

    if raw == "w":
        _print_watched(session)
        return True

    if raw == "x":
        session.close_detail()
        return True

    if raw.startswith("d "):
        item_id = raw[2:].strip()
        removed = session.delete_watched(item_id)
        if removed:
            console.print(f"[green]{item_id} retire de la liste.[/green]")
        else:
            console.print(f"[yellow]{item_id} n'est pas dans la liste.[/yellow]")
        return True

    if raw.startswith("r "):
        rating = parse_user_rating(raw[2:].strip())
        if rating is None:
            console.print(f"[red]Note invalide (1 a {MAX_USER_RATING}).[/red]")
            return True
        try:
            entry = session.add_watched(rating)
        except WatchedListError as e:
            console.print(f"[red]{e}[/red]")
            return True
        console.print(f"[green]{entry.title} ajoute avec la note {entry.user_rating}.[/green]")
        _print_watched(session)
        return True

    rank_text = raw[2:].strip() if raw.startswith("o ") else ""
    if rank_text.isdigit():
        if not isinstance(session.search.state, Results):
            console.print("[yellow]Aucun resultat affiche.[/yellow]")
            return True
        items = session.search.results
        rank = int(rank_text)
        if not 1 <= rank <= len(items):
            console.print("[red]Numero invalide.[/red]")
            return True
        item_id = items[rank - 1].id
        if session.select(item_id) is None:
            _print_watched(session)
            return True
        await session.wait_for_detail()
        console.print(
            render_detail_state(session.details.state, session.watched.user_rating_for(item_id))
        )
        return True

    handle = session.set_query(raw)
    await handle.wait()
    console.print(render_outcome(session.search.state))
    return True


def _print_watched(session: BrowserSession) -> None:
    console.print(render_summary(session.summary()))
    console.print(render_watched(session.watched.entries))


# ============================================================================
# watched list / add / remove
# ============================================================================


@watched_app.command("list")
def watched_list() -> None:
    """Affiche la liste des films vus et son resume."""
    asyncio.run(_watched_list_async())


@with_container
async def _watched_list_async(container) -> None:
    watched = container.watched_list()
    console.print(render_summary(watched.summary()))
    console.print(render_watched(watched.entries))


@watched_app.command("add")
def watched_add(
    item_id: Annotated[str, typer.Argument(help="Identifiant IMDb (ttXXXXXXX)")],
    rating: Annotated[
        float,
        typer.Option("--rating", "-r", min=1, max=MAX_USER_RATING, help="Note utilisateur"),
    ],
) -> None:
    """Ajoute un film a la liste des films vus avec une note."""
    asyncio.run(_watched_add_async(item_id, rating))


@with_container
async def _watched_add_async(container, item_id: str, rating: float) -> None:
    _require_catalog(container)
    session: BrowserSession = container.browser_session()
    user_rating: Rating = int(rating) if rating.is_integer() else rating
    try:
        session.select(item_id)
        await session.wait_for_detail()
        if not isinstance(session.details.state, DetailLoaded):
            console.print(render_detail_state(session.details.state))
            raise typer.Exit(code=1)
        try:
            entry = session.add_watched(user_rating)
        except WatchedListError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(code=1)
    finally:
        await session.aclose()

    console.print(f"[green]{entry.title} ajoute avec la note {entry.user_rating}.[/green]")


@watched_app.command("remove")
def watched_remove(
    item_id: Annotated[str, typer.Argument(help="Identifiant IMDb (ttXXXXXXX)")],
) -> None:
    """Retire un film de la liste des films vus."""
    asyncio.run(_watched_remove_async(item_id))


@with_container
async def _watched_remove_async(container, item_id: str) -> None:
    removed = container.watched_list().remove(item_id)
    if removed:
        console.print(f"[green]{item_id} retire de la liste.[/green]")
    else:
        console.print(f"[yellow]{item_id} n'est pas dans la liste.[/yellow]")
