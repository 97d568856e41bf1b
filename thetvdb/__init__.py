"""
thetvdb - Client asynchrone type pour l'API TheTVDB v3.

Ce package fournit un client httpx asynchrone qui s'authentifie avec une
cle API, maintient un token JWT frais, et expose une methode par endpoint
de l'API avec des reponses deserialisees en modeles pydantic.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Identifiants, parametres de requete et erreurs (sans dependance HTTP)
- adapters/api/ : Client HTTP, gestion du token, modeles de reponse
- adapters/cli/ : Commandes Typer pour interroger l'API depuis le terminal

Exemple:
    async with await TVDBClient.create("YOUR_API_KEY") as client:
        results = await client.search(SearchBy.name("Planet Earth"))
"""

from thetvdb.adapters.api.tvdb_client import TVDBClient
from thetvdb.core.params import SearchBy

__version__ = "0.1.0"

__all__ = ["SearchBy", "TVDBClient", "__version__"]
