import shutil
from pathlib import Path
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.hotel import Hotel

TEST_DB_URL = "sqlite:///./test_hotel_admin.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upload_dir(monkeypatch):
    root = Path("test_uploads_runtime") / uuid4().hex / "uploads"
    root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(root))
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "local")
    monkeypatch.setattr(settings, "PUBLIC_BASE_URL", "")
    yield root
    shutil.rmtree(root.parent.parent, ignore_errors=True)


@pytest.fixture
def seed_hotel(db):
    hotel = Hotel(
        name="Thendral Park Inn",
        description="Business hotel in the town centre",
        address="12 Temple Road",
        images=["https://cdn.example.com/hotel/front.png"],
    )
    db.add(hotel)
    db.commit()
    db.refresh(hotel)
    return hotel
