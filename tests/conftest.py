import os

# Required settings must exist before blog_api.main builds the module-level app
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_TOKEN_KEY", "test-secret-key-for-testing-only")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.auth.jwt import LOCAL_TOKEN_TTL, create_access_token
from blog_api.auth.passwords import hash_password
from blog_api.config import Settings
from blog_api.database.base import Base
from blog_api.database.engine import build_engine
from blog_api.models import Comment, Post, User

# Ensure all models are imported so they're registered with Base.metadata
__all__ = ["Comment", "Post", "User"]

# Test secret - only used in tests
TEST_SECRET = "test-secret-key-for-testing-only"
TEST_PASSWORD = "secret123"


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing.

    Uses StaticPool to ensure all connections share the same in-memory database.
    Without this, each connection would get a fresh database without tables.
    """
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def session(engine) -> Session:
    """Create a test database session."""
    TestSessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
    )
    session = TestSessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings for a development deployment with no client bundle."""
    return Settings(
        database_url="sqlite:///:memory:",
        jwt_token_key=TEST_SECRET,
        environment="development",
        client_dist_dir=str(tmp_path / "no-client"),
    )


@pytest.fixture
def app(engine, settings: Settings) -> FastAPI:
    """Application wired to the in-memory database."""
    from blog_api.database import session as session_module
    from blog_api.main import create_app

    app = create_app(settings)

    # Create session factory bound to test engine
    TestSessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )

    def override_get_db():
        db = TestSessionLocal()
        try:
            yield db
        finally:
            db.close()

    # Override the get_db function that routers use
    app.dependency_overrides[session_module.get_db] = override_get_db
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Anonymous test client (no session cookie)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_user(session: Session):
    """Factory inserting a user with a known password (``TEST_PASSWORD``)."""

    def _create_user(
        username: str = "adalovelace",
        email: str = "ada@example.com",
        password: str = TEST_PASSWORD,
        is_admin: bool = False,
    ) -> User:
        user = User(
            username=username,
            email=email,
            password=hash_password(password),
            is_admin=is_admin,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _create_user


@pytest.fixture
def login(app: FastAPI):
    """
    Factory returning a client that carries a session cookie for ``user``.

    Each call gets its own client so several users can act in one test.
    """
    clients: list[TestClient] = []

    def _login(user: User) -> TestClient:
        client = TestClient(app)
        token = create_access_token({"id": user.id}, TEST_SECRET, LOCAL_TOKEN_TTL)
        client.cookies.set("access_token", token)
        clients.append(client)
        return client

    yield _login

    for client in clients:
        client.close()


@pytest.fixture
def admin(create_user) -> User:
    return create_user(username="adminuser", email="admin@example.com", is_admin=True)


@pytest.fixture
def reader(create_user) -> User:
    return create_user(username="readeruser", email="reader@example.com")


@pytest.fixture
def sample_post(session: Session, admin: User) -> Post:
    """A post written by ``admin``."""
    post = Post(
        user_id=admin.id,
        title="Hello World",
        content="<p>First post</p>",
        slug="hello-world",
    )
    session.add(post)
    session.commit()
    session.refresh(post)
    return post


@pytest.fixture
def sample_comment(session: Session, sample_post: Post, reader: User) -> Comment:
    """A comment by ``reader`` on ``sample_post``."""
    comment = Comment(content="Nice post!", post_id=sample_post.id, user_id=reader.id)
    session.add(comment)
    session.commit()
    session.refresh(comment)
    return comment
