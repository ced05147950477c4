import pytest
from fastapi.testclient import TestClient

from src.placemap.main import create_app
from src.placemap.data.places_repository import PlaceStoreError
from src.placemap.models.domain import Place
from src.placemap.services.map.cache import MapResultCache
from src.placemap.services.map.service import MapService


def _place(pid: str, lat: float, lon: float, category: str = "G", status: str | None = "OPERATIONAL") -> Place:
    return Place(
        id=pid,
        place_id=f"{category}-{pid}",
        name=f"Place {pid}",
        address="Jl. Jend. Sudirman",
        district="Sail",
        latitude=f"{lat}",
        longitude=f"{lon}",
        category=category,
        business_status=status,
        description="Tempat usaha.",
    )


class CountingStore:
    def __init__(self, places):
        self.places = tuple(places)
        self.calls = 0

    def current_places(self):
        self.calls += 1
        return self.places

    def describe(self):
        return "memory"


class BrokenStore:
    def __init__(self, error: Exception):
        self.error = error

    def current_places(self):
        raise self.error


PLACES = [
    _place("1", 0.5000, 101.4000, category="O"),
    _place("2", 0.5027, 101.4000, category="P"),
    _place("3", 0.5500, 101.4500, category="G"),
    _place("4", 0.4700, 101.3900, category="K"),
]
VIEWPORT = {"north": 0.56, "south": 0.44, "east": 101.48, "west": 101.36}


def _install(monkeypatch: pytest.MonkeyPatch, service: MapService) -> None:
    from src.placemap.api.routes import map_places
    from src.placemap.services.map import service as service_module

    monkeypatch.setattr(map_places, "get_map_service", lambda: service)
    monkeypatch.setattr(service_module, "get_map_service", lambda: service)


@pytest.fixture
def store() -> CountingStore:
    return CountingStore(PLACES)


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch, store: CountingStore) -> TestClient:
    _install(monkeypatch, MapService(store, cache=MapResultCache(ttl_seconds=300)))
    return TestClient(create_app())


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    assert api_client.get("/api/health").json() == {"status": "ok"}

    places_health = api_client.get("/api/health/places").json()
    assert places_health["healthy"] is True
    assert places_health["backend"] == "memory"
    assert places_health["current_places"] == len(PLACES)


def test_get_places_returns_points_and_clusters(api_client: TestClient):
    response = api_client.get("/api/map/places", params={**VIEWPORT, "zoom": 12})

    assert response.status_code == 200
    payload = response.json()
    assert isinstance(payload, list)
    clusters = [item for item in payload if item.get("isCluster")]
    points = [item for item in payload if not item.get("isCluster")]

    assert len(clusters) == 1
    cluster = clusters[0]
    assert cluster["count"] == 2 == len(cluster["memberPoints"])
    assert cluster["primaryCategory"] == "O"
    assert cluster["categories"] == ["O", "P"]
    assert cluster["latitude"] == pytest.approx(0.5)
    assert cluster["id"].startswith("cluster-")
    assert {member["id"] for member in cluster["memberPoints"]} == {"1", "2"}

    assert {point["id"] for point in points} == {"3", "4"}
    point = next(point for point in points if point["id"] == "3")
    assert point["name"] == "Place 3"
    assert point["businessStatus"] == "OPERATIONAL"
    assert point["latitude"] == pytest.approx(0.55)
    assert point["placeId"] == "G-3"
    assert "isCluster" not in point


def test_post_places_accepts_json_body(api_client: TestClient):
    response = api_client.post("/api/map/places", json={"bounds": VIEWPORT, "zoom": 19})

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == len(PLACES)
    assert not any(item.get("isCluster") for item in payload)


def test_partial_bounds_apply_no_spatial_filter(api_client: TestClient):
    response = api_client.post(
        "/api/map/places",
        json={"bounds": {"north": -6.0, "south": -7.0}, "zoom": 19},
    )

    assert response.status_code == 200
    assert len(response.json()) == len(PLACES)


def test_bounds_excluding_everything_is_empty(api_client: TestClient):
    elsewhere = {"north": -6.0, "south": -7.0, "east": 107.0, "west": 106.0}

    for zoom in (9, 15):
        response = api_client.get("/api/map/places", params={**elsewhere, "zoom": zoom})
        assert response.status_code == 200
        assert response.json() == []


def test_missing_zoom_uses_default(api_client: TestClient):
    from src.placemap.config import settings

    default_response = api_client.get("/api/map/places", params=VIEWPORT)
    explicit_response = api_client.get("/api/map/places", params={**VIEWPORT, "zoom": settings.map_default_zoom})

    assert default_response.json() == explicit_response.json()


def test_repeated_request_hits_cache(api_client: TestClient, store: CountingStore):
    first = api_client.get("/api/map/places", params={**VIEWPORT, "zoom": 14})
    second = api_client.get("/api/map/places", params={**VIEWPORT, "zoom": 14})

    assert first.json() == second.json()
    assert store.calls == 1

    stats = api_client.get("/api/map/cache").json()
    assert stats["enabled"] is True
    assert stats["hits"] == 1
    assert stats["size"] == 1

    assert api_client.delete("/api/map/cache").status_code == 204
    api_client.get("/api/map/places", params={**VIEWPORT, "zoom": 14})
    assert store.calls == 2


def test_invalid_zoom_is_rejected(api_client: TestClient):
    response = api_client.get("/api/map/places", params={"zoom": "far"})

    assert response.status_code == 422


def test_store_failure_maps_to_server_error(monkeypatch: pytest.MonkeyPatch):
    _install(monkeypatch, MapService(BrokenStore(PlaceStoreError("connection refused")), cache=MapResultCache()))
    client = TestClient(create_app())

    response = client.get("/api/map/places", params={"zoom": 14})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Database error occurred")

    health = client.get("/api/health/places").json()
    assert health["healthy"] is False
    assert "connection refused" in health["error"]


def test_unexpected_failure_maps_to_server_error(monkeypatch: pytest.MonkeyPatch):
    _install(monkeypatch, MapService(BrokenStore(RuntimeError("boom"))))
    client = TestClient(create_app())

    response = client.get("/api/map/places", params={"zoom": 14})

    assert response.status_code == 500
    assert response.json()["detail"] == "An error occurred while fetching places: boom"


def test_zoom_policy_and_categories(api_client: TestClient):
    policy = api_client.get("/api/map/zoom-policy", params={"zoom": 9}).json()
    assert policy["limit"] == 0
    assert policy["proximityThresholdKm"] == 2.0
    assert policy["clustered"] is True

    categories = api_client.get("/api/map/categories").json()
    assert len(categories) == 21
    assert categories[14] == {"code": "O", "label": "Administrasi Pemerintahan, Pertahanan Dan Jaminan Sosial Wajib"}


def test_fractional_zoom_is_truncated(api_client: TestClient):
    fractional = api_client.get("/api/map/places", params={**VIEWPORT, "zoom": 12.7})
    whole = api_client.post("/api/map/places", json={"bounds": VIEWPORT, "zoom": 12})

    assert fractional.status_code == 200
    assert fractional.json() == whole.json()


@pytest.fixture
def unavailable_supabase(monkeypatch: pytest.MonkeyPatch):
    from src.placemap.config import settings
    from src.placemap.data import places_repository
    from src.placemap.services.map import service as service_module

    monkeypatch.setattr(settings, "place_store", "supabase")
    monkeypatch.setattr(settings, "supabase_url", None)
    monkeypatch.setattr(settings, "supabase_key", None)
    monkeypatch.setattr(places_repository, "get_supabase_client", lambda: None)
    service_module.get_map_service.cache_clear()
    yield
    service_module.get_map_service.cache_clear()


def test_unavailable_store_is_reported_not_raised(unavailable_supabase):
    client = TestClient(create_app())

    health = client.get("/api/health/places")
    assert health.status_code == 200
    assert health.json()["healthy"] is False
    assert health.json()["backend"] == "supabase"
    assert "not configured" in health.json()["error"]

    for response in (client.get("/api/map/cache"), client.delete("/api/map/cache"), client.get("/api/map/places", params={"zoom": 14})):
        assert response.status_code == 500
        assert response.json()["detail"].startswith("Database error occurred")

    policy = client.get("/api/map/zoom-policy", params={"zoom": 14})
    assert policy.status_code == 200
    assert policy.json()["limit"] == 400
