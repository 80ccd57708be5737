"""API test configuration."""

import pytest
from almanac.merge import reset_data_caches
from api.dependencies import get_scoring
from api.main import create_app
from httpx import ASGITransport, AsyncClient
from stardate.services.scoring_settings import ScoringSettings


@pytest.fixture
def scoring():
    return ScoringSettings()


@pytest.fixture
def app(scoring):
    reset_data_caches()
    a = create_app()
    a.dependency_overrides[get_scoring] = lambda: scoring
    return a


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
