import pytest

from redis_key_copy.exceptions import TypeQueryFailed, UnrecognizedTypeError
from redis_key_copy.types import RedisType


@pytest.mark.parametrize(
    "reply, expected",
    [
        (b"string", RedisType.STRING),
        (b"hash", RedisType.HASH),
        ("none", RedisType.NONE),
        (b"stream", RedisType.STREAM),
    ],
)
def test_from_reply(reply, expected):
    assert RedisType.from_reply(reply) is expected


def test_from_reply_unknown_tag():
    with pytest.raises(UnrecognizedTypeError) as exc_info:
        RedisType.from_reply(b"MBbloom--")
    assert isinstance(exc_info.value, TypeQueryFailed)
    assert "unrecognized redis key type: MBbloom--" in str(exc_info.value)
