"""
Point d'entrée CLI de Popcorn.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import browse, search, show, watched_app
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="popcorn",
    help="Navigateur de films et liste des films vus",
)

app.command()(search)
app.command()(show)
app.command()(browse)

# Monter watched_app comme sous-commande
app.add_typer(watched_app, name="watched")


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    logger.info("Configuration Popcorn")
    typer.echo(f"API OMDb : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"URL OMDb : {config.omdb_base_url}")
    typer.echo(f"Longueur minimale de recherche : {config.min_query_length}")
    typer.echo(f"Stockage : {config.store_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Popcorn v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = Settings()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        file_level=settings.log_file_level,
    )

    logger.info("Démarrage de Popcorn", version=__version__)

    app()


if __name__ == "__main__":
    main()
