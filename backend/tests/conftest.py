import pytest
from fastapi.testclient import TestClient

from event_service.config import Settings
from event_service.main import create_app
from event_service.services.event_store import EventStore
from event_service.services.seed import create_default_events


@pytest.fixture
def store():
    return EventStore(create_default_events())


@pytest.fixture
def app(store):
    return create_app(settings=Settings(), store=store)


@pytest.fixture
def client(app):
    # 500 のレスポンス本体を検証するため、サーバ側の例外は再送出させない
    return TestClient(app, raise_server_exceptions=False)
