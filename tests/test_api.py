from fastapi.testclient import TestClient

from specialist_search.core.config import settings
from specialist_search.main import create_app
from specialist_search.services.specialist_store import SpecialistStore

SEARCH_PATH = f"{settings.API_PREFIX}/search"


def test_search_returns_all_specialists_as_json_array(client):
    resp = client.get(SEARCH_PATH)
    assert resp.status_code == 200

    data = resp.json()
    assert isinstance(data, list)
    assert len(data) == 8
    assert data[0] == {"id": 1, "name": "Jane Smith", "specialty": "Legal", "city": "New York"}
    assert set(data[-1]) == {"id", "name", "specialty", "city"}


def test_search_combined_filters(client):
    resp = client.get(SEARCH_PATH, params={"specialty": "Accounting", "text": "Chicago"})
    assert resp.status_code == 200
    assert [r["name"] for r in resp.json()] == ["Mark Lee", "Anna Kowalski"]


def test_search_blank_params_are_ignored(client):
    resp = client.get(SEARCH_PATH, params={"specialty": "", "text": "   "})
    assert resp.status_code == 200
    assert len(resp.json()) == 8


def test_search_no_matches_is_empty_success(client):
    resp = client.get(SEARCH_PATH, params={"specialty": "legal"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_request_headers_present(client):
    resp = client.get(SEARCH_PATH, params={"text": "york"})
    assert len(resp.json()) == 3
    assert "X-Request-ID" in resp.headers
    assert "X-Process-Time" in resp.headers


def test_meta_filters(client):
    resp = client.get(f"{settings.API_PREFIX}/meta/filters")
    assert resp.status_code == 200
    assert resp.json() == {
        "specialties": ["Accounting", "Legal", "Marketing"],
        "cities": ["Chicago", "Dallas", "Los Angeles", "Miami", "New York"],
    }


def test_health_endpoints(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/health/live").json() == {"status": "ok"}

    data = client.get("/health/ready").json()
    assert data["status"] == "ready"
    assert data["dependencies"]["store"]["status"] == "ok"


def test_injected_store_is_used():
    store = SpecialistStore()
    store.add("Grace Hopper", "Engineering", "Arlington")
    store.freeze()

    with TestClient(create_app(store=store)) as test_client:
        data = test_client.get(SEARCH_PATH, params={"specialty": "Engineering"}).json()

    assert data == [{"id": 1, "name": "Grace Hopper", "specialty": "Engineering", "city": "Arlington"}]


def test_empty_store_is_not_ready():
    store = SpecialistStore()
    store.freeze()

    with TestClient(create_app(store=store)) as test_client:
        assert test_client.get(SEARCH_PATH).json() == []
        assert test_client.get("/health/ready").json()["status"] == "not_ready"


def test_unprovisioned_store_returns_503():
    # Without the lifespan context no store is ever attached.
    test_client = TestClient(create_app())

    resp = test_client.get(SEARCH_PATH, params={"text": "york"})
    assert resp.status_code == 503
    assert resp.json() == {"detail": "Specialist store is unavailable"}
    assert "X-Request-ID" in resp.headers

    ready = test_client.get("/health/ready").json()
    assert ready["status"] == "not_ready"
    assert ready["dependencies"]["store"]["status"] == "error"


def test_lifespan_seeds_store_on_startup():
    with TestClient(create_app()) as test_client:
        assert len(test_client.get(SEARCH_PATH).json()) == 8
