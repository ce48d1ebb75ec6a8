"""
Core type definitions for Redis key copying.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .error_handling import decode_reply
from .exceptions import UnrecognizedTypeError

RedisValue = bytes
HashPayload = Dict[Union[str, bytes], RedisValue]  # field -> value


class RedisType(str, Enum):
    """Type tags reported by the Redis ``TYPE`` command."""

    STRING = "string"
    LIST = "list"
    SET = "set"
    ZSET = "zset"
    HASH = "hash"
    STREAM = "stream"
    NONE = "none"

    @classmethod
    def from_reply(cls, reply: Any) -> "RedisType":
        """Decode a raw ``TYPE`` reply, rejecting tags we do not know."""
        tag = decode_reply(reply)
        try:
            return cls(tag)
        except ValueError:
            raise UnrecognizedTypeError(
                f"resolve_key_type: unrecognized redis key type: {tag}"
            ) from None


@dataclass(frozen=True)
class CopyConfig:
    """Resolved command line configuration."""

    src: str
    dest: str
    key: str
    log_level: str = "INFO"
