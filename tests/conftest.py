"""
Shared fixtures for the authkeeper tests.

Every test gets its own pair of SQLite files under `tmp_path`:
one for the users table and one for the key-value storage.
"""

import atexit
import os
import shutil
import tempfile

import pytest

# Keep the module-level engines of authkeeper.database away from ./data
_DATA_DIR = tempfile.mkdtemp(prefix="authkeeper-tests-")
atexit.register(shutil.rmtree, _DATA_DIR, ignore_errors=True)
os.environ["AUTHKEEPER_DATA_DIR"] = _DATA_DIR
os.environ["AUTH_DATABASE_URL"] = f"sqlite:///{os.path.join(_DATA_DIR, 'auth.db')}"
os.environ["STORAGE_DATABASE_URL"] = f"sqlite:///{os.path.join(_DATA_DIR, 'storage.db')}"
os.environ["UI_ORIGINS"] = "http://localhost:8501"

from fastapi.testclient import TestClient  # noqa: E402

from authkeeper.core.credentials import CredentialStore  # noqa: E402
from authkeeper.core.flow import AuthFlow  # noqa: E402
from authkeeper.core.session import SessionFlag  # noqa: E402
from authkeeper.database import (  # noqa: E402
    create_local_engine,
    create_session_factory,
    get_db,
    get_storage,
)


@pytest.fixture
def engines(tmp_path):
    auth_engine = create_local_engine(f"sqlite:///{tmp_path / 'auth.db'}")
    storage_engine = create_local_engine(f"sqlite:///{tmp_path / 'storage.db'}")
    yield auth_engine, storage_engine
    auth_engine.dispose()
    storage_engine.dispose()


@pytest.fixture
def db(engines):
    session = create_session_factory(engines[0])()
    yield session
    session.close()


@pytest.fixture
def storage(engines):
    session = create_session_factory(engines[1])()
    yield session
    session.close()


@pytest.fixture
def store(db):
    credential_store = CredentialStore(db)
    credential_store.initialize()
    return credential_store


@pytest.fixture
def flag(storage):
    session_flag = SessionFlag(storage)
    session_flag.initialize()
    return session_flag


@pytest.fixture
def flow(store, flag):
    return AuthFlow.start(store, flag)


@pytest.fixture
def client(engines):
    """TestClient whose requests use the per-test databases."""
    from authkeeper.main import app

    db_factory = create_session_factory(engines[0])
    storage_factory = create_session_factory(engines[1])

    setup_db, setup_storage = db_factory(), storage_factory()
    CredentialStore(setup_db).initialize()
    SessionFlag(setup_storage).initialize()
    setup_db.close()
    setup_storage.close()

    def override_get_db():
        session = db_factory()
        try:
            yield session
        finally:
            session.close()

    def override_get_storage():
        session = storage_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = override_get_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
