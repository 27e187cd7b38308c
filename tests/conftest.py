"""Shared pytest fixtures for all tests."""

import os

# 설정 로딩 전에 테스트용 환경변수 지정
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_NAME", "test")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("CONTACT_RECEIVER", "contact@example.com")
os.environ.setdefault("CONSULT_RECEIVER", "consult@example.com")
os.environ.setdefault("EMAIL_USERNAME", "noreply@example.com")

import pytest
from fastapi.testclient import TestClient

from consult_admin.core.assets import get_asset_host
from consult_admin.core.database import Base, SessionLocal, engine
from consult_admin.core.exceptions import AssetError
from consult_admin.core.mailer import get_mailer
from consult_admin.main import app


class FakeMailer:
    """Mailer that records messages instead of talking to SMTP."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, to, subject, text, html=None, reply_to=None, sender_name=None):
        if self.fail:
            return False
        self.sent.append({
            "to": to,
            "subject": subject,
            "text": text,
            "html": html,
            "reply_to": reply_to,
            "sender_name": sender_name,
        })
        return True


class FakeAssetHost:
    """Asset host that hands out predictable hosted URLs."""

    def __init__(self):
        self.uploaded = []
        self.destroyed = []
        self.missing = set()

    def upload(self, data, mime_type, folder="services"):
        name = f"img{len(self.uploaded) + 1}"
        self.uploaded.append((data, mime_type, folder))
        return {
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/v1/{folder}/{name}.png",
            "public_id": f"{folder}/{name}",
        }

    def destroy(self, public_id):
        self.destroyed.append(public_id)
        return True

    def resource(self, public_id):
        if public_id in self.missing:
            raise AssetError(f"Failed to fetch image metadata for {public_id}")
        return {
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/v1/{public_id}.png",
            "public_id": public_id,
            "format": "png",
            "width": 640,
            "height": 480,
        }


@pytest.fixture(autouse=True)
def _tables():
    """Create every table before a test and drop them afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Yield a session bound to the in-memory database."""
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def asset_host():
    return FakeAssetHost()


@pytest.fixture
def client(mailer, asset_host):
    """TestClient with the mail and image collaborators replaced by fakes."""
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_asset_host] = lambda: asset_host
    test_client = TestClient(app)
    test_client.cookies.set("token", "session-token")
    yield test_client
    app.dependency_overrides.clear()
