#!/usr/bin/env python3
"""
Redis Key Copy Configuration
----------------------------
Default parameters for copying a key between Redis instances.

Values come from the environment (optionally seeded from a ``.env`` file)
and act as defaults for the command line flags.
"""

import os
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Utility function to get environment variable with default
def get_env(key: str, default: Any) -> Any:
    return os.environ.get(key, default)


# Source / destination addresses (host:port, host:port/db or a redis:// URL)
DEFAULT_REDIS_ADDRESS = "localhost:6379"
SOURCE_REDIS_ADDRESS = get_env("REDIS_COPY_SRC", DEFAULT_REDIS_ADDRESS)
DEST_REDIS_ADDRESS = get_env("REDIS_COPY_DEST", DEFAULT_REDIS_ADDRESS)
DEFAULT_REDIS_DB = 0

# Key to copy
COPY_KEY = get_env("REDIS_COPY_KEY", "")

# HSCAN page size
HSCAN_PAGE_SIZE = 1000

# Logging Configuration
LOG_LEVEL = get_env("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = get_env(
    "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
