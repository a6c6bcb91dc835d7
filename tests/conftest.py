# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.data.database import Base, make_session_factory
from app.data.models.product import ProductModel  # noqa: F401
from app.data.seed import seed
from app.utils.settings import DEFAULT_CORS_ORIGINS, Settings


@pytest.fixture
def engine():
    """Fresh in-memory SQLite shared across threads for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def seeded_session_factory(session_factory):
    seed(session_factory)
    return session_factory


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        api_prefix="",
        cors_origins=list(DEFAULT_CORS_ORIGINS),
        seed_data=True,
    )


@pytest.fixture
def client(engine, settings):
    app = create_app(settings=settings, engine=engine)
    with TestClient(app) as c:
        yield c
