"""
Utilitaires partages pour les commandes CLI de Popcorn.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et liberant ses ressources
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger

from popcorn.container import Container


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("popcorn")
    try:
        yield
    finally:
        loguru_logger.enable("popcorn")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Ferme le client catalogue et le stockage a la sortie.

    Usage:
        @with_container
        async def my_command(container, ...):
            config = container.config()
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        try:
            return await func(container, *args, **kwargs)
        finally:
            await container.catalog_client().close()
            container.watched_store().close()

    return wrapper
