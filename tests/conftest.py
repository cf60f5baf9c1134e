import random
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marquee.database import Base, get_db
from marquee.main import app
from marquee.models.movie import Movie
from marquee.models.user import User, ADMIN_ROLE
from marquee.utils.security import hash_password, create_access_token

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Provide a clean database session for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """FastAPI test client with the database dependency overridden."""

    def override_get_db():
        test_db = TestingSessionLocal()
        try:
            yield test_db
        finally:
            test_db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_user(session, email="user@example.com", password="Password123!", nickname=None, roles=None):
    user = User(
        email=email,
        password_hash=hash_password(password),
        nickname=nickname,
        roles=roles or []
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def bearer(user):
    token = create_access_token(data={"sub": user.email, "user_id": user.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_user(db_session):
    return create_user(db_session, email="viewer@example.com", nickname="Viewer")


@pytest.fixture
def other_user(db_session):
    return create_user(db_session, email="someone@example.com")


@pytest.fixture
def admin_user(db_session):
    return create_user(db_session, email="admin@example.com", nickname="Admin", roles=[ADMIN_ROLE])


@pytest.fixture
def auth_headers(test_user):
    return bearer(test_user)


@pytest.fixture
def other_headers(other_user):
    return bearer(other_user)


@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def movies(db_session):
    """A small catalog: two Jarmusch films, one Lynch, one with no year"""
    catalog = [
        Movie(title="Mystery Train", director="Jim Jarmusch", release_year=1989),
        Movie(title="Dead Man", director="Jim Jarmusch", release_year=1995),
        Movie(title="Blue Velvet", director="David Lynch", release_year=1986),
        Movie(title="Untitled Reel", director=None, release_year=0),
    ]
    db_session.add_all(catalog)
    db_session.commit()
    for movie in catalog:
        db_session.refresh(movie)
    return catalog


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_user(db_session):
    """Factory for extra users: make_user(email, nickname=None, roles=None)"""
    def _make(email, nickname=None, roles=None):
        return create_user(db_session, email=email, nickname=nickname, roles=roles)
    return _make


@pytest.fixture
def headers_for():
    """Bearer headers for any user"""
    return bearer
