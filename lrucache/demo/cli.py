"""Command-line demonstration driver for the LRU cache engine.

Builds a cache, replays a scripted sequence of ``put``/``get``/``print``
operations and writes the cache contents to standard output.

Usage
-----
    python -m lrucache.demo.cli
    python -m lrucache.demo.cli --config script.json --capacity 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from pydantic import ValidationError

from ..config.models import CacheSettings, DemoConfig
from ..engine import LRUCache
from ..observability import setup_logging

logger = logging.getLogger(__name__)


def run_script(config: DemoConfig, out: Optional[TextIO] = None) -> LRUCache:
    """Execute ``config.operations`` against a fresh cache.

    Parameters
    ----------
    config: DemoConfig
        Capacity and operations to replay.
    out: Optional[TextIO]
        Stream for ``print`` operations; defaults to ``sys.stdout``.

    Returns
    -------
    LRUCache
        The cache in its final state.
    """
    stream = out if out is not None else sys.stdout
    cache = LRUCache(config.capacity)
    logger.info(
        "demo.script.start",
        extra={"capacity": config.capacity, "operations": len(config.operations)},
    )
    for op in config.operations:
        if op.op == "put":
            cache.put(op.key, op.value)
        elif op.op == "get":
            result = cache.get(op.key)
            logger.debug("demo.get", extra={"key": op.key, "result": result})
        else:
            cache.print(stream)
    logger.info("demo.script.done", extra={"summary": cache.describe()})
    return cache


def _load_config(
    parser: argparse.ArgumentParser,
    config_path: Optional[str],
    capacity: Optional[int],
    settings: CacheSettings,
) -> DemoConfig:
    try:
        if config_path:
            config = DemoConfig.load(Path(config_path))
        else:
            config = DemoConfig.default(settings.capacity)
        if capacity is not None:
            config = DemoConfig(capacity=capacity, operations=config.operations)
    except (OSError, ValueError, ValidationError) as exc:
        parser.error(f"invalid demo configuration: {exc}")
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint for the demonstration driver."""
    parser = argparse.ArgumentParser(description="LRU cache demonstration")
    parser.add_argument("--config", help="Path to JSON demo script")
    parser.add_argument(
        "--capacity",
        type=int,
        help="Cache capacity (overrides config file and environment)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[
            "CRITICAL",
            "ERROR",
            "WARNING",
            "INFO",
            "DEBUG",
        ],
        help="Logging level (overrides environment)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (once sets DEBUG)",
    )
    args = parser.parse_args(argv)

    try:
        settings = CacheSettings()
    except ValidationError as exc:
        parser.error(f"invalid environment settings: {exc}")

    # Determine effective log level
    effective_level = args.log_level or (
        "DEBUG" if args.verbose > 0 else settings.log_level.upper()
    )
    setup_logging(effective_level)

    config = _load_config(parser, args.config, args.capacity, settings)
    run_script(config)


if __name__ == "__main__":
    main()
