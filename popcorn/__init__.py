"""
Popcorn - Navigateur interactif de films avec liste "vus" persistante.

Ce package fournit la recherche de films dans le catalogue OMDb, l'affichage
des details d'un film et la gestion d'une liste personnelle de films vus
avec notes utilisateur.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports)
- services/ : Couche application (controleurs de recherche, details, selection, liste)
- adapters/ : Couche infrastructure (CLI, client API)
- infrastructure/ : Persistance (stockage cle/valeur sur disque)
"""

__version__ = "0.1.0"
