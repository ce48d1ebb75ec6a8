#!/usr/bin/env python3
"""
Redis Key Copy
--------------
Command line entry point.

Parses arguments, builds the source and destination clients and copies a
single key. Prints ``Done`` on success and ``ERROR: <message>`` otherwise.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from . import config
from .connection import get_redis_client
from .copier import RedisKeyCopier
from .exceptions import ConfigInvalid, KeyCopyError
from .types import CopyConfig

logger = logging.getLogger("redis-key-copy")


def get_version():
    from . import __version__

    return __version__


def setup_logging(log_level: str):
    """Configure logging based on level."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def parse_args(args: Optional[List[str]] = None) -> CopyConfig:
    parser = argparse.ArgumentParser(
        description="Copy a single key from one Redis instance to another"
    )
    parser.add_argument(
        "--src",
        default=config.SOURCE_REDIS_ADDRESS,
        help=f"redis source connection address (default: {config.SOURCE_REDIS_ADDRESS})",
    )
    parser.add_argument(
        "--dest",
        default=config.DEST_REDIS_ADDRESS,
        help=f"redis destination connection address (default: {config.DEST_REDIS_ADDRESS})",
    )
    parser.add_argument(
        "--key", default=config.COPY_KEY, help="redis key to be replicated"
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set the logging level (default: {config.LOG_LEVEL})",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s v{get_version()}"
    )

    parsed_args = parser.parse_args(args)
    return CopyConfig(
        src=parsed_args.src,
        dest=parsed_args.dest,
        key=parsed_args.key,
        log_level=parsed_args.log_level,
    )


def run(copy_config: CopyConfig) -> int:
    """Copy the configured key. Returns the process exit status."""
    source = target = None
    try:
        source = get_redis_client(copy_config.src)
        target = get_redis_client(copy_config.dest)
    except ConfigInvalid as e:
        logger.critical(f"Invalid connection configuration: {e}")
        print("ERROR:", e)
        if source is not None:
            source.close()
        return 1

    try:
        key_type = RedisKeyCopier(source, target, copy_config.key).copy()
    except KeyCopyError as e:
        logger.debug(f"Copy of key {copy_config.key!r} failed: {e}")
        print("ERROR:", e)
        return 1
    finally:
        source.close()
        target.close()

    logger.info(f"Copied {key_type.value} key {copy_config.key!r}")
    print("Done")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point with argument parsing and setup."""
    copy_config = parse_args(args)
    setup_logging(copy_config.log_level)

    js = json.dumps(asdict(copy_config), indent=2)
    logger.info(f"command_line_args: Config ({js})")

    return run(copy_config)


if __name__ == "__main__":
    sys.exit(main())
