import pytest
import redis

from redis_key_copy.connection import build_redis_url, get_redis_client
from redis_key_copy.exceptions import ConfigInvalid


@pytest.mark.parametrize(
    "address, url",
    [
        ("localhost:6379", "redis://localhost:6379/0"),
        ("10.0.0.5:7000/3", "redis://10.0.0.5:7000/3"),
        (" cache:6380 ", "redis://cache:6380/0"),
        ("redis://:secret@cache:6379/2", "redis://:secret@cache:6379/2"),
        ("rediss://cache:6380/0", "rediss://cache:6380/0"),
    ],
)
def test_build_redis_url(address, url):
    assert build_redis_url(address) == url


def test_get_redis_client():
    client = get_redis_client("cache:6380/4")

    assert isinstance(client, redis.Redis)
    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 4
    assert not kwargs.get("decode_responses", False)


@pytest.mark.parametrize(
    "address",
    [
        "localhost:notaport",
        "localhost:6379/abc",
        "redis://cache:6379/-1",
        "http://localhost:6379/0",
        "ftp://cache:21",
    ],
)
def test_get_redis_client_invalid(address):
    with pytest.raises(ConfigInvalid, match="get_redis_client: invalid address"):
        get_redis_client(address)


def test_get_redis_client_rejects_non_numeric_db_index():
    with pytest.raises(ConfigInvalid, match="invalid database index 'abc'"):
        get_redis_client("localhost:6379/abc")
