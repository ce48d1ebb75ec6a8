#!/usr/bin/env python3
"""
Redis Key Copy Error Handling
-----------------------------
Error handling utilities for Redis key copying.
"""

import logging
from typing import Any, Callable, Type, TypeVar

import redis

from .exceptions import KeyCopyError

logger = logging.getLogger("redis-key-copy")

T = TypeVar("T")


def call_redis(
    stage: str,
    operation_desc: str,
    error_cls: Type[KeyCopyError],
    func: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T:
    """
    Helper to execute a Redis command and translate its errors.

    Args:
        stage: Name of the copy stage, used as the error message prefix
        operation_desc: Description of the operation being performed
        error_cls: Exception raised when the command fails
        func: The client method to call
        *args: Positional arguments for the call
        **kwargs: Keyword arguments for the call

    Returns:
        The result of the call

    Raises:
        KeyCopyError: ``error_cls`` wrapping the Redis error text
    """
    try:
        return func(*args, **kwargs)
    except redis.RedisError as e:
        logger.error(f"Redis error during '{operation_desc}': {e}")
        raise error_cls(f"{stage}: {e}") from e


def decode_reply(value: Any) -> str:
    """Return a Redis reply as text, whether the client decodes responses or not."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)
