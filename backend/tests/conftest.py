"""Pytest configuration and fixtures."""

import copy
import os
from datetime import datetime, timedelta, timezone

import pytest
from azure.cosmos.exceptions import CosmosResourceExistsError, CosmosResourceNotFoundError
from fastapi.testclient import TestClient

# Tests never talk to a real account
os.environ.setdefault("SRS_PROFILE", "IIMK")
os.environ.pop("COSMOS_ENDPOINT", None)

from hifz.main import app
from hifz.repositories import AyahRepository, SessionRepository
from hifz.routers.deps import get_clock

import hifz.routers.ayahs as ayahs_module
import hifz.routers.progress as progress_module
import hifz.routers.reviews as reviews_module


class FakeContainer:
    """In-memory stand-in for a Cosmos ContainerProxy partitioned by userId.

    Understands only the queries the repositories issue.
    """

    def __init__(self):
        self.items: dict[tuple[str, str], dict] = {}

    def _not_found(self, item_id: str) -> CosmosResourceNotFoundError:
        return CosmosResourceNotFoundError(status_code=404, message=f"{item_id} not found")

    def read_item(self, item, partition_key):
        try:
            return copy.deepcopy(self.items[(partition_key, item)])
        except KeyError:
            raise self._not_found(item)

    def create_item(self, body):
        key = (body["userId"], body["id"])
        if key in self.items:
            raise CosmosResourceExistsError(status_code=409, message=f"{body['id']} exists")
        self.items[key] = copy.deepcopy(body)
        return copy.deepcopy(body)

    def replace_item(self, item, body):
        key = (body["userId"], item)
        if key not in self.items:
            raise self._not_found(item)
        self.items[key] = copy.deepcopy(body)
        return copy.deepcopy(body)

    def upsert_item(self, body):
        self.items[(body["userId"], body["id"])] = copy.deepcopy(body)
        return copy.deepcopy(body)

    def delete_item(self, item, partition_key):
        if self.items.pop((partition_key, item), None) is None:
            raise self._not_found(item)

    def query_items(self, query, parameters, partition_key):
        params = {p["name"]: p["value"] for p in parameters}
        docs = [copy.deepcopy(doc) for (pk, _), doc in self.items.items() if pk == partition_key]

        if "DISTINCT VALUE c.pageNumber" in query:
            return iter(sorted({doc["pageNumber"] for doc in docs}))
        if "@surah" in params:
            docs = [
                doc
                for doc in docs
                if doc["surahNumber"] == params["@surah"] and doc["ayahNumber"] == params["@ayah"]
            ][:1]
        elif "@startDate" in params:
            docs = [doc for doc in docs if doc["sessionDate"] >= params["@startDate"]]
            docs.sort(key=lambda doc: doc["sessionDate"], reverse=True)
        else:
            docs.sort(key=lambda doc: doc["memorizedAt"])
        return iter(docs)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int) -> None:
        self.now += timedelta(days=days)


@pytest.fixture
def ayah_repo():
    return AyahRepository(container=FakeContainer())


@pytest.fixture
def session_repo():
    return SessionRepository(container=FakeContainer())


@pytest.fixture
def fake_clock():
    return FakeClock(datetime(2025, 12, 13, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def client(monkeypatch, ayah_repo, session_repo, fake_clock):
    """Test client wired to in-memory repositories and a fixed clock."""
    for module in (ayahs_module, reviews_module, progress_module):
        monkeypatch.setattr(module, "get_ayah_repository", lambda: ayah_repo)
        monkeypatch.setattr(module, "get_session_repository", lambda: session_repo)

    app.dependency_overrides[get_clock] = lambda: fake_clock
    yield TestClient(app)
    app.dependency_overrides.clear()
