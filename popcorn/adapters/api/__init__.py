"""
Clients API externes.

- OMDbClient : catalogue OMDb (recherche par titre, details par identifiant IMDb)

Le client implemente ICatalogClient defini dans core/ports/api_clients.py.
"""

from popcorn.adapters.api.omdb_client import OMDbClient

__all__ = ["OMDbClient"]
