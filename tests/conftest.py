"""Pytest configuration and fixtures."""
import os

# Settings are read at import time; point them at throwaway resources first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import finplan.models  # noqa: F401
from finplan.db import Base, get_db
from finplan.dependencies import get_catalog
from finplan.main import app
from finplan.services.catalog import CatalogStore

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def catalog():
    """Empty strategy catalog."""
    store = CatalogStore()
    yield store
    store.reset()


@pytest.fixture(scope="function")
def seeded_catalog():
    """Catalog holding the built-in strategy set."""
    store = CatalogStore()
    store.seed_defaults()
    yield store
    store.reset()


@pytest.fixture(scope="function")
def client(db_session, catalog):
    """Create a test client with overridden database and catalog dependencies."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
