#!/usr/bin/env python3
"""Common test fixtures for Redis key copy tests."""

from unittest.mock import MagicMock

import pytest


def _type_of(value):
    if value is None:
        return b"none"
    if isinstance(value, bytes):
        return b"string"
    if isinstance(value, dict):
        return b"hash"
    return b"list"


def make_fake_redis(data):
    """MagicMock Redis client backed by a plain dict.

    bytes values are strings, dicts are hashes, lists are lists.
    """
    client = MagicMock()

    client.type.side_effect = lambda key: _type_of(data.get(key))
    client.get.side_effect = lambda key: data.get(key)

    def _set(key, value):
        data[key] = value
        return True

    def _hscan(key, cursor=0, count=10):
        items = sorted(data.get(key, {}).items())
        page = items[cursor : cursor + count]
        next_cursor = cursor + count if cursor + count < len(items) else 0
        return next_cursor, dict(page)

    def _execute_command(command, key, *args):
        assert command == "HMSET"
        hash_value = data.setdefault(key, {})
        hash_value.update(zip(args[::2], args[1::2]))
        return True

    client.set.side_effect = _set
    client.hscan.side_effect = _hscan
    client.execute_command.side_effect = _execute_command
    client.data = data
    return client


@pytest.fixture
def mock_source():
    """Mock source Redis client fixture."""
    return MagicMock()


@pytest.fixture
def mock_target():
    """Mock destination Redis client fixture."""
    target = MagicMock()
    target.execute_command.return_value = True
    target.set.return_value = True
    return target


@pytest.fixture
def source_data():
    return {
        "user:1": {b"name": b"alice", b"age": b"30"},
        "greeting": b"hello \x00\xff world",
        "queue": [b"a", b"b"],
    }


@pytest.fixture
def fake_source(source_data):
    return make_fake_redis(source_data)


@pytest.fixture
def fake_target():
    return make_fake_redis({})


@pytest.fixture
def fake_redis_factory():
    return make_fake_redis
