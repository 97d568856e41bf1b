"""
Client de l'API TheTVDB v3.

- TVDBClient : client asynchrone (httpx) avec gestion automatique du jeton JWT
- TokenManager : garde du jeton (login unique par expiration)
- models / movie_models : modeles pydantic des reponses
"""

from thetvdb.adapters.api.token import Credential, TokenManager
from thetvdb.adapters.api.tvdb_client import TVDBClient

__all__ = [
    "Credential",
    "TokenManager",
    "TVDBClient",
]
