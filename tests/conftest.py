"""Test configuration and fixtures for the Local Library catalog.

- Record stores and responses are replaced with ``unittest.mock`` doubles
  for page tests
- Database tests get a fresh in-memory SQLite database
- Global configuration and the global database manager are reset after
  every test
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, Mock

import logfire
import pytest
from sqlalchemy.orm import Session

from local_library.config import reset_config
from local_library.database.seed import seed_sample_data
from local_library.database.session import DatabaseManager, get_db_manager, reset_db_manager

MEMORY_URL = "sqlite:///:memory:"


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: run against a real SQLite database")


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans local: nothing is printed or exported during tests."""
    logfire.configure(send_to_logfire=False, console=False)


# === Collaborator Doubles ===


def make_store(records=None, error: Exception | None = None) -> Mock:
    """Build a record store double whose queries resolve to ``records``.

    When ``error`` is given, ``find_all`` raises it instead.
    """
    store = Mock()
    query = Mock()
    query.order_by = AsyncMock(return_value=records or [])
    query.with_relation = AsyncMock(return_value=records or [])
    store.find_all.return_value = query
    if error is not None:
        store.find_all.side_effect = error
    return store


@pytest.fixture
def store_factory():
    """Factory fixture for record store doubles."""
    return make_store


@pytest.fixture
def response() -> Mock:
    """A response double whose ``status`` chains back to itself."""
    res = Mock()
    res.status.return_value = res
    return res


# === Database Fixtures ===


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """A private in-memory database with the schema created."""
    manager = DatabaseManager(MEMORY_URL)
    manager.init_database()
    yield manager
    manager.close()


@pytest.fixture
def db_session(db_manager: DatabaseManager) -> Generator[Session, None, None]:
    session = db_manager.create_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_session(db_session: Session) -> Session:
    seed_sample_data(db_session)
    db_session.commit()
    return db_session


@pytest.fixture
def global_db() -> Generator[DatabaseManager, None, None]:
    """Install an in-memory database as the global database manager."""
    reset_db_manager()
    manager = get_db_manager(MEMORY_URL)
    manager.init_database()
    yield manager
    reset_db_manager()


# === Cleanup Fixtures ===


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset global state so tests don't interfere with each other."""
    yield

    reset_config()
    reset_db_manager()

    for key in list(os.environ.keys()):
        if key.startswith("LOCAL_LIBRARY_TEST_"):
            del os.environ[key]
