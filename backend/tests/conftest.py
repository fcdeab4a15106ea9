import os

# Keep the app's own engine off disk; tests use the engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database import Base, get_db
from app.main import app

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Override the dependency
def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

@pytest.fixture
def test_db():
    # Create the tables
    Base.metadata.create_all(bind=engine)
    yield
    # Drop the tables
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db(test_db):
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client(test_db):
    return TestClient(app)

def signup(client, email, password="secret"):
    response = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201
    data = response.json()
    return data["user_id"], {"Authorization": f"Bearer {data['access_token']}"}

@pytest.fixture
def alice(client):
    return signup(client, "alice@example.com")

@pytest.fixture
def bob(client):
    return signup(client, "bob@example.com")

@pytest.fixture
def carol(client):
    return signup(client, "carol@example.com")
