"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration, le client du catalogue, le stockage persistant
et les services a l'interface CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.omdb_client import OMDbClient
from .config import Settings
from .infrastructure.persistence.store import DiskKeyValueStore
from .services.browser import BrowserSession
from .services.watched_list import WatchedListManager


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        session = container.browser_session()
        watched = container.watched_list()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Stockage durable - Singleton, le gestionnaire de liste est l'unique ecrivain
    watched_store = providers.Singleton(
        DiskKeyValueStore,
        store_dir=config.provided.store_dir,
    )

    # Client catalogue - Singleton, URL et cle injectees depuis la config
    catalog_client = providers.Singleton(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        base_url=config.provided.omdb_base_url,
        timeout=config.provided.http_timeout_seconds,
    )

    # Liste des films vus - Singleton : chargee une seule fois au demarrage
    watched_list = providers.Singleton(
        WatchedListManager,
        store=watched_store,
    )

    # Session de navigation - Factory, une par boucle interactive
    browser_session = providers.Factory(
        BrowserSession,
        client=catalog_client,
        watched=watched_list,
        min_query_length=config.provided.min_query_length,
        debounce_seconds=config.provided.search_debounce_seconds,
    )
