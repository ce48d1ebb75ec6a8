#!/usr/bin/env python3
"""
Redis Key Copy
--------------
Copy a single string or hash key from a source Redis to a destination Redis.
"""

__version__ = "0.1.0"

from .connection import build_redis_url, get_redis_client
from .copier import RedisKeyCopier
from .exceptions import (
    ConfigInvalid,
    KeyCopyError,
    KeyNotFound,
    ReadFailed,
    ScanFailed,
    TypeMismatch,
    TypeQueryFailed,
    UnrecognizedTypeError,
    UnsupportedType,
    WriteFailed,
)
from .types import CopyConfig, RedisType

__all__ = [
    "build_redis_url",
    "get_redis_client",
    "RedisKeyCopier",
    "CopyConfig",
    "RedisType",
    "KeyCopyError",
    "ConfigInvalid",
    "KeyNotFound",
    "TypeQueryFailed",
    "UnrecognizedTypeError",
    "TypeMismatch",
    "ScanFailed",
    "ReadFailed",
    "WriteFailed",
    "UnsupportedType",
]
