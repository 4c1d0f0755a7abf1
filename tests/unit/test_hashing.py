import pytest

from photothing.core.hashing import PublicIdCodec


@pytest.fixture
def codec():
    return PublicIdCodec("test-id-salt", min_length=4)


@pytest.mark.parametrize("value", [0, 1, 42, 2**31 - 1])
def test_encode_decode(codec, value):
    encoded = codec.encode(value)
    assert len(encoded) >= 4
    assert codec.decode(encoded) == value


def test_encoding_depends_on_salt(codec):
    other = PublicIdCodec("another-salt", min_length=4)
    assert codec.encode(7) != other.encode(7)


@pytest.mark.parametrize("junk", [
    "", "!!!!", "zzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzz",
    "../etc", "\x00\x01", "ÿÿÿÿ", None, 12,
])
def test_decode_junk_is_none(codec, junk):
    assert codec.decode(junk) is None


def test_decode_rejects_multiple_values(codec):
    multi = codec._hashids.encode(1, 2)
    assert codec.decode(multi) is None


def test_negative_ids_cannot_be_encoded(codec):
    with pytest.raises(ValueError):
        codec.encode(-1)


@pytest.mark.parametrize("value", [2**31, 2**40, 2**70])
def test_decode_rejects_ids_out_of_column_range(codec, value):
    oversized = codec._hashids.encode(value)
    assert codec.decode(oversized) is None
