import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_PATH", tempfile.mkdtemp(prefix="surveyhub-logs-"))
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from surveyhub.db import Base
from surveyhub.db.session import get_db
from surveyhub.app.main import app
from surveyhub.app.core.security import issue_session_token
from surveyhub.app.schemas.session import SessionUser

# In-memory SQLite shared by every connection of a test
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

OWNER = "owner@example.com"
INTRUDER = "intruder@example.com"


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers_for():
    def _headers(email=OWNER, user_id=None):
        token = issue_session_token(SessionUser(user_id=user_id or f"uid-{email}", email=email))
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def owner_headers(headers_for):
    return headers_for(OWNER)


@pytest.fixture
def intruder_headers(headers_for):
    return headers_for(INTRUDER)


@pytest.fixture
def survey_payload():
    return {
        "title": "  Team lunch ",
        "description": "Where should we go?",
        "questions": [
            {"id": "q1", "type": "multipleChoice", "question": " Which day? ", "options": ["Tue", " ", "Wed", ""]},
            {"id": "q2", "type": "text", "question": "Dietary restrictions?"},
        ],
    }


@pytest.fixture
def make_survey(client, owner_headers, survey_payload):
    def _make(headers=None, **overrides):
        payload = survey_payload | overrides
        response = client.post("/api/surveys", json=payload, headers=headers or owner_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
