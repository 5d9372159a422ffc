import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

BASE_DIR = Path(__file__).resolve().parents[1]

if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from app.core.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models.user import User  # noqa: E402


@pytest.fixture()
def db_path(tmp_path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture()
def settings(tmp_path, db_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{db_path}",
        db_username="test",
        db_password="test",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    """TestClient that runs startup (tables created) and does not follow redirects."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture()
def stored_users(db_path):
    """Return a callable reading every user row straight from the test database."""
    engine = create_engine(f"sqlite:///{db_path}")

    def _users() -> list[User]:
        with Session(engine) as session:
            return list(session.scalars(select(User).order_by(User.id)))

    yield _users
    engine.dispose()


@pytest.fixture()
def valid_form() -> dict:
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "password": "secret1",
        "gender": "F",
        "age": "30",
        "terms-and-conditions": "on",
    }
