import os

# Must be set before the app modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_KEY"] = "test-admin-key"

import pytest
from fastapi.testclient import TestClient

import database
import models  # noqa: F401
from main import app
from schemas import Exam, Question


@pytest.fixture(autouse=True)
def fresh_tables():
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield


@pytest.fixture
def db():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # Entering the context runs the startup seed
    with TestClient(app) as c:
        yield c


@pytest.fixture
def two_question_exam():
    return Exam(
        code="DEMO-1",
        title="Demo",
        passing_percentage=60,
        questions=[
            Question(id=1, section="SQL", text="q1", options=["a", "b", "c"], correct_index=2, marks=1),
            Question(id=2, section="SQL", text="q2", options=["a", "b"], correct_index=0, marks=1),
        ],
    )
