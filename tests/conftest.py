"""
Fixtures pytest partagees pour les tests thetvdb.

Ce module contient les fixtures communes :
- Horloge figee et controlable pour l'expiration du jeton
- Client TheTVDB pointant sur l'URL mockee par respx
"""

import pytest
import pytest_asyncio

from thetvdb.adapters.api.tvdb_client import TVDBClient
from tests.fixtures.clock import FakeClock
from tests.fixtures.tvdb_responses import BASE_URL


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key-12345"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def client(api_key: str, clock: FakeClock):
    """Client TheTVDB non connecte, ferme en fin de test."""
    tvdb_client = TVDBClient(api_key, base_url=BASE_URL, clock=clock)
    yield tvdb_client
    await tvdb_client.close()
