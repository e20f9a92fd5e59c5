import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("JWT_SECRET_KEY", "tests-secret-key")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite:///{Path(tempfile.gettempdir()) / 'postboard-tests.sqlite3'}",
)

from config import Settings
from core.auth import AuthService
from database import create_db_engine, create_session_factory, init_db
from main import create_app


SECRET = "not-so-secret"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(jwt_secret=SECRET, database_url=f"sqlite:///{tmp_path / 'blog.sqlite3'}")


@pytest.fixture()
def session_factory(settings: Settings):
    engine = create_db_engine(settings.database_url)
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def auth() -> AuthService:
    return AuthService(SECRET)


@pytest.fixture()
def client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
    app.state.engine.dispose()
