#!/usr/bin/env python3
"""
Redis Connection Factory
------------------------
Builds Redis clients from ``host:port`` style addresses.
"""

import logging
from urllib.parse import unquote, urlparse

import redis

from .config import DEFAULT_REDIS_DB
from .exceptions import ConfigInvalid

logger = logging.getLogger("redis-key-copy")


def build_redis_url(address: str) -> str:
    """Turn an address into a Redis connection URL.

    ``host:port`` maps to ``redis://host:port/0`` and ``host:port/N`` to
    ``redis://host:port/N``. Addresses that already carry a scheme are
    returned unchanged.
    """
    address = address.strip()
    if "://" in address:
        return address
    if "/" in address:
        return f"redis://{address}"
    return f"redis://{address}/{DEFAULT_REDIS_DB}"


def _check_db_index(address: str, url: str):
    """Reject a database path that is not a non-negative integer.

    redis-py ignores such a path and silently falls back to db 0.
    """
    parsed = urlparse(url)
    if parsed.scheme == "unix":
        return
    db_path = unquote(parsed.path).strip("/")
    if db_path and not (db_path.isascii() and db_path.isdigit()):
        raise ConfigInvalid(
            f"get_redis_client: invalid address {address!r}: "
            f"invalid database index {db_path!r}"
        )


def get_redis_client(address: str) -> redis.Redis:
    """Create a client for the given address.

    No command is sent; connecting happens on first use.

    Raises:
        ConfigInvalid: if the address is not a valid connection specification
    """
    url = build_redis_url(address)
    _check_db_index(address, url)
    try:
        client = redis.Redis.from_url(url, decode_responses=False)
    except ValueError as e:
        raise ConfigInvalid(
            f"get_redis_client: invalid address {address!r}: {e}"
        ) from e
    logger.debug(f"Created Redis client for {url}")
    return client
