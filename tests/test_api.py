import importlib

import pytest
from fastapi.testclient import TestClient

from api import routes
from config import Config
from models import Property, PropertySource


class FakeScraper:
    def __init__(self, sources, properties):
        self.sources = sources
        self.properties = properties

    async def scrape_all(self):
        return [p for p in self.properties if p.source in {s.name for s in self.sources}]


def make_property(source, index, listed_days):
    slug = source.value.lower()
    return Property(
        id=f"{slug}-1700000000000-{index}",
        title=f"{source.value} Property {index + 1}",
        location="Amsterdam",
        price=1500,
        size="N/A",
        rooms=2,
        property_type="Apartment",
        source=source,
        source_url="https://example.org",
        listed_days=listed_days,
    )


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("SCREENSHOT_DIR", str(tmp_path / "screenshots"))
    monkeypatch.setenv("LOG_FILE", "")
    from api import main as api_main
    api_main = importlib.reload(api_main)

    properties = [
        make_property(PropertySource.PARARIUS, 0, 1),
        make_property(PropertySource.FUNDA, 0, 3),
    ]
    created = []

    def factory(sources):
        scraper = FakeScraper(sources, properties)
        created.append(scraper)
        return scraper

    api_main.app.dependency_overrides[routes.get_scraper_factory] = lambda: factory
    api_main.app.dependency_overrides[routes.get_config] = lambda: Config(log_file=None)
    with TestClient(api_main.app) as test_client:
        test_client.created = created
        yield test_client
    api_main.app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_properties_use_wire_shape(client):
    response = client.get("/api/properties")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    first = body["results"][0]
    assert first["id"] == "pararius-1700000000000-0"
    assert first["type"] == "Apartment"
    assert first["sourceUrl"] == "https://example.org"
    assert first["listedDays"] == 1
    assert [s.slug for s in client.created[0].sources] == ["pararius", "funda"]


def test_properties_for_single_source(client):
    body = client.get("/api/properties", params={"source": "Funda"}).json()

    assert body["total"] == 1
    assert body["results"][0]["source"] == "Funda"


def test_unknown_source_is_404(client):
    assert client.get("/api/properties", params={"source": "zillow"}).status_code == 404


def test_sources(client):
    body = client.get("/api/sources").json()

    assert [s["slug"] for s in body] == ["pararius", "funda"]
    assert body[0]["maxListings"] == 20
