"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration (singleton) et une fabrique de clients TheTVDB
pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.tvdb_client import TVDBClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI.

    Utilisation :
        container = Container()
        async with container.tvdb_client() as client:
            series = await client.series(81189)
    """

    config = providers.Singleton(Settings)

    # Un client par commande : il possede son client httpx et doit etre ferme
    tvdb_client = providers.Factory(TVDBClient.from_settings, settings=config)
