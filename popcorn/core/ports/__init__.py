"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports client API : Contrats pour le catalogue externe
- ICatalogClient : Recherche par titre et details par identifiant
- CatalogError, CatalogTransportError, CatalogNotFoundError : Erreurs classifiees

Ports stockage : Contrats de persistance
- IKeyValueStore : Stockage durable cle -> chaine
"""

from popcorn.core.ports.api_clients import (
    CatalogError,
    CatalogNotFoundError,
    CatalogTransportError,
    ICatalogClient,
)
from popcorn.core.ports.store import IKeyValueStore

__all__ = [
    # Clients API
    "ICatalogClient",
    "CatalogError",
    "CatalogTransportError",
    "CatalogNotFoundError",
    # Stockage
    "IKeyValueStore",
]
