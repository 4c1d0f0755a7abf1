"""
Shared test configuration.

Settings are read from the environment at import time, so everything the
app requires is set before any photothing import.
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-0123456789")
os.environ.setdefault("ID_SALT", "test-id-salt")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_URL", "https://photothing.example.com")
os.environ.pop("RESEND_API_KEY", None)

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from photothing.core.security import hash_password, new_uuid
from photothing.db.base import Base
from photothing.models import User
from photothing.services.storage.s3 import S3Service

STRONG_PASSWORD = "Xk9#mQ2$vL7pWz!r"


class FakeStorage:
    """In-memory stand-in for S3Service."""

    bucket_name = "test-bucket"
    cdn_url = "cdn.example.com"
    cdn_prefix = None

    object_key = staticmethod(S3Service.object_key)

    def __init__(self):
        self.objects = set()
        self.signed = []

    def sign_upload(self, directory, filename, content_type):
        self.signed.append((directory, filename, content_type))
        return {
            "url": f"https://{self.bucket_name}.s3.amazonaws.com/{directory}/{filename}?signed",
            "directory": directory,
            "filename": filename,
            "get_url": self.resolve_public_url(directory, filename),
        }

    def resolve_public_url(self, owner_uuid, photo_uuid):
        return f"https://{self.cdn_url}/{owner_uuid}/{photo_uuid}"

    def object_exists(self, key):
        return key in self.objects

    def stats(self):
        return {"bucket": self.bucket_name, "cdn": self.cdn_url, "cdn_prefix": self.cdn_prefix}


@pytest.fixture
def engine():
    """SQLite in-memory database shared across connections, with foreign keys on."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create test database session."""
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def make_user(db_session):
    """Factory for users with a known password."""
    counter = {"n": 0}

    def _make_user(email=None, password=STRONG_PASSWORD, subscription_expires=None, admin=False):
        counter["n"] += 1
        uuid = new_uuid()
        if admin:
            uuid = ("ADMINx" + uuid)[:32]
        user = User(
            email=email or f"user{counter['n']}@example.com",
            uuid=uuid,
            password=hash_password(password),
            subscription_expires=subscription_expires,
        )
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def password():
    """Password every ``make_user`` account is created with."""
    return STRONG_PASSWORD
