#!/usr/bin/env python3
"""
Redis Key Copier
----------------
Copies one key from a source Redis to a destination Redis.

The key type is resolved once on the source, then the copy is dispatched to
the hash or string copier. Any failure raises a ``KeyCopyError`` and ends the
copy; nothing is retried or rolled back.
"""

import logging
from typing import Any, List, Optional

import redis

from .config import HSCAN_PAGE_SIZE
from .error_handling import call_redis, decode_reply
from .exceptions import (
    KeyNotFound,
    ReadFailed,
    ScanFailed,
    TypeMismatch,
    TypeQueryFailed,
    UnsupportedType,
    WriteFailed,
)
from .types import HashPayload, RedisType

logger = logging.getLogger("redis-key-copy")


class RedisKeyCopier:
    """Copies a single key between two Redis clients."""

    def __init__(self, source: redis.Redis, target: redis.Redis, key: str):
        self.source = source
        self.target = target
        self.key = key
        self.key_type: Optional[RedisType] = None

    def resolve_key_type(self) -> RedisType:
        """Query the key type on the source and cache it for the run."""
        if self.key_type is not None:
            return self.key_type

        reply = call_redis(
            "resolve_key_type",
            f"getting type for key {self.key}",
            TypeQueryFailed,
            self.source.type,
            self.key,
        )
        key_type = RedisType.from_reply(reply)
        if key_type is RedisType.NONE:
            raise KeyNotFound(f"resolve_key_type: key {self.key} does not exist")

        self.key_type = key_type
        logger.info(f"Key {self.key} has type {key_type.value}")
        return key_type

    def _require_type(self, stage: str, expected: RedisType):
        if self.key_type is not expected:
            tag = self.key_type.value if self.key_type is not None else "unknown"
            raise TypeMismatch(f"{stage}: invalid data type {tag}")

    def scan_hash(self) -> HashPayload:
        """Read every field/value pair of the source hash with HSCAN."""
        pairs: HashPayload = {}
        cursor = 0
        pages = 0
        while True:
            cursor, page = call_redis(
                "copy_hash",
                f"scanning hash {self.key} at cursor {cursor}",
                ScanFailed,
                self.source.hscan,
                self.key,
                cursor=cursor,
                count=HSCAN_PAGE_SIZE,
            )
            pages += 1
            pairs.update(page)
            logger.debug(
                f"HSCAN page {pages} of {self.key}: {len(page)} fields, next cursor {cursor}"
            )
            if int(cursor) == 0:
                break
        return pairs

    def copy_hash(self) -> int:
        """Copy a hash key. Returns the number of fields written."""
        self._require_type("copy_hash", RedisType.HASH)

        pairs = self.scan_hash()
        if not pairs:
            # Deleted or expired after TYPE was answered
            raise ScanFailed(f"copy_hash: key {self.key} vanished before read")

        args: List[Any] = []
        for field, value in pairs.items():
            args.extend((field, value))

        res = call_redis(
            "copy_hash",
            f"writing {len(pairs)} fields to target hash {self.key}",
            WriteFailed,
            self.target.execute_command,
            "HMSET",
            self.key,
            *args,
        )
        if not res:
            raise WriteFailed(
                f"copy_hash: could not save to dest, response: {decode_reply(res)}"
            )

        logger.info(f"Copied {len(pairs)} hash fields of {self.key}")
        return len(pairs)

    def copy_string(self) -> int:
        """Copy a string key. Returns the size of the value in bytes."""
        self._require_type("copy_string", RedisType.STRING)

        value = call_redis(
            "copy_string",
            f"reading string {self.key}",
            ReadFailed,
            self.source.get,
            self.key,
        )
        if value is None:
            # Deleted or expired after TYPE was answered
            raise ReadFailed(f"copy_string: key {self.key} vanished before read")

        res = call_redis(
            "copy_string",
            f"writing string {self.key} to target",
            WriteFailed,
            self.target.set,
            self.key,
            value,
        )
        if not res:
            raise WriteFailed(
                f"copy_string: could not save to dest, response: {decode_reply(res)}"
            )

        logger.info(f"Copied string {self.key} ({len(value)} bytes)")
        return len(value)

    def copy(self) -> RedisType:
        """Resolve the key type and run the matching copier.

        Returns:
            The type of the copied key

        Raises:
            KeyCopyError: the first error hit by any stage
        """
        key_type = self.resolve_key_type()
        if key_type is RedisType.HASH:
            self.copy_hash()
        elif key_type is RedisType.STRING:
            self.copy_string()
        else:
            raise UnsupportedType(
                f"copy: unsupported redis key type: {key_type.value}"
            )
        return key_type
