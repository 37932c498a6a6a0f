"""
Package CLI : couche de presentation Typer + Rich.

Affiche l'etat expose par la session de navigation et transmet les
intentions de l'utilisateur (recherche, selection, ajout, suppression).
"""

from rich.console import Console

# Console globale pour tous les affichages
console = Console()

__all__ = ["console"]
