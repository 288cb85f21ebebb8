import pytest
from fastapi.testclient import TestClient

from specialist_search.main import create_app
from specialist_search.services.specialist_store import build_seeded_store


@pytest.fixture
def seeded_store():
    return build_seeded_store(seed=True)


@pytest.fixture
def client(seeded_store):
    with TestClient(create_app(store=seeded_store)) as test_client:
        yield test_client
