from datetime import datetime, timedelta, timezone

import pytest

from photothing.models import User
from photothing.models.photo import (
    ATTR_KEY_MAX_LENGTH,
    ATTR_VALUE_MAX_LENGTH,
    InvalidAttribute,
    validate_attribute,
)


def test_attribute_key_is_lowercased():
    assert validate_attribute(" FileName ", "IMG_001.JPG") == ("filename", "IMG_001.JPG")


@pytest.mark.parametrize("key, value", [
    ("", "x"),
    ("k" * (ATTR_KEY_MAX_LENGTH + 1), "x"),
    ("filename", ""),
    ("filename", "v" * (ATTR_VALUE_MAX_LENGTH + 1)),
])
def test_invalid_attributes(key, value):
    with pytest.raises(InvalidAttribute):
        validate_attribute(key, value)


def test_admin_flag_comes_from_uuid_prefix():
    assert User(uuid="ADMINx0123456789abcdef").is_admin
    assert not User(uuid="0123456789abcdef0123456789abcdef").is_admin
    assert not User(uuid="adminx0123456789abcdef").is_admin


def test_create_user(db_session):
    user = User(email="test@example.com", uuid="a" * 32, password="hashed")
    db_session.add(user)
    db_session.commit()

    assert user.id is not None
    assert user.joined is not None
    assert user.subscription_expires is None


def test_timestamps_read_back_as_utc(db_session):
    plus_five = timezone(timedelta(hours=5))
    user = User(
        email="tz@example.com",
        uuid="b" * 32,
        password="hashed",
        joined=datetime(2026, 1, 1, 12, 0, tzinfo=plus_five),
    )
    db_session.add(user)
    db_session.commit()
    db_session.expire_all()

    reloaded = db_session.get(User, user.id)
    assert reloaded.joined == datetime(2026, 1, 1, 7, 0, tzinfo=timezone.utc)
    assert reloaded.joined.utcoffset() == timedelta(0)
    assert reloaded.updated_at.tzinfo is not None
