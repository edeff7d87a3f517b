# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.main import create_app
from app.db import Base, get_db
from app.deps import get_extraction_client
from app.errors import ExtractionError
from app.settings import Settings


class FakeExtractionClient:
    """Stands in for the OpenAI-backed client; records every call."""
    def __init__(self, response: str = "[]", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def extract(self, image: bytes, content_type: str = "image/jpeg") -> str:
        self.calls.append((image, content_type))
        if self.error is not None:
            raise self.error
        return self.response


# --- Per-test SQLite DB file and upload dir ---
@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'cards.db'}",
        openai_api_key="test-key",
        upload_dir=tmp_path / "uploads",
        _env_file=None,
    )


@pytest.fixture
def engine(settings):
    eng = create_engine(settings.database_url, connect_args={"check_same_thread": False}, future=True)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = TestingSession()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture
def fake_extractor():
    return FakeExtractionClient()


@pytest.fixture
def app(settings, db_session, fake_extractor):
    application = create_app(settings)

    # --- Override DB and model dependencies ---
    def _get_db():
        yield db_session

    application.dependency_overrides[get_db] = _get_db
    application.dependency_overrides[get_extraction_client] = lambda: fake_extractor
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_extractor(fake_extractor):
    fake_extractor.error = ExtractionError("Business card recognition failed", "insufficient_quota")
    return fake_extractor
