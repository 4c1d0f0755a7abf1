from datetime import timedelta

from jose import jwt

from photothing.core.security import (
    EMAIL_ERROR,
    PW_SHORT_ERROR,
    PW_SIMPLE_ERROR,
    create_access_token,
    decode_token,
    hash_password,
    new_uuid,
    validate_credentials,
    verify_password,
)


def test_credential_validation():
    assert validate_credentials("a@gmail.com", "hi") == PW_SHORT_ERROR
    assert validate_credentials("a@gmail.com", "12345678") == PW_SIMPLE_ERROR
    assert validate_credentials("not an email", "minimum eight chars Zq!") == EMAIL_ERROR
    assert validate_credentials("foo@gmail.com", "hàµyKµ3øã^^³½ä}A5öý9×¿aûiëP}·") is None


def test_password_containing_email_is_too_simple():
    assert validate_credentials("bobsmith@gmail.com", "bobsmith") == PW_SIMPLE_ERROR


def test_hash_and_verify():
    hashed = hash_password("s3cret-Passphrase")
    assert hashed != "s3cret-Passphrase"
    assert verify_password("s3cret-Passphrase", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_garbage_hash_is_false():
    assert verify_password("anything", "not-a-hash") is False


def test_uuid_format():
    value = new_uuid()
    assert len(value) == 32
    int(value, 16)


def test_token_roundtrip():
    token = create_access_token({"sub": "17"})
    payload = decode_token(token)
    assert payload["sub"] == "17"
    assert payload["type"] == "access"


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "17"}, expires_delta=timedelta(seconds=-10))
    assert decode_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    forged = jwt.encode({"sub": "17", "type": "access"}, "some-other-signing-key", algorithm="HS256")
    assert decode_token(forged) is None
