"""
Shared fixtures: record factory, temporary database, Flask test clients.
"""
# =========================
# Imports
# =========================
import pytest

from tireshop.app import create_app
from tireshop.db import init_db, SessionLocal
from tireshop.entities import TireRecord, VehicleType, Season, Condition

CSRF = "test-csrf-token"


# -------------------------
# Fixtures: records
# -------------------------
@pytest.fixture
def make_tire():
    """Factory for TireRecords with sensible defaults."""
    def _make(**kwargs):
        values = dict(
            id=None,
            brand="Michelin",
            model="Primacy 4",
            size="205/55R16",
            vehicle_type=VehicleType.AUTO,
            price=100.0,
            stock=10,
            min_stock=5,
            season=Season.SUMMER,
            condition=Condition.NEW,
        )
        values.update(kwargs)
        return TireRecord(**values)
    return _make


# -------------------------
# Fixtures: database
# -------------------------
@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'tires.db'}"


@pytest.fixture
def session(db_url):
    init_db(db_url)
    db = SessionLocal()
    yield db
    db.close()
    SessionLocal.remove()


# -------------------------
# Fixtures: web app
# -------------------------
@pytest.fixture
def app(db_url, tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "DATABASE_URL": db_url,
        "LOCK_PATH": str(tmp_path / "tires.lock"),
        "ADMIN_USERNAME": "admin",
        "ADMIN_PASSWORD_HASH": None,
        "ADMIN_PASSWORD": "secret",
        "LANGUAGE": "en",
    })
    yield app
    SessionLocal.remove()


@pytest.fixture
def client(app):
    """Anonymous client with a known CSRF token in its session."""
    c = app.test_client()
    with c.session_transaction() as s:
        s["_csrf_token"] = CSRF
    return c


@pytest.fixture
def auth_client(client):
    """Client with a signed-in operator."""
    with client.session_transaction() as s:
        s["operator"] = "admin"
    return client


@pytest.fixture
def csrf():
    """CSRF token stored in the client fixtures' session."""
    return CSRF
