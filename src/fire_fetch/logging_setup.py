from __future__ import annotations

import logging
import os
import sys


def configure_logging(level: str | int = "WARNING") -> None:
    if isinstance(level, str):
        level_value = getattr(logging, str(level).upper(), logging.WARNING)
    else:
        level_value = level

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)

    # stdout carries the fetched value, so logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    fmt = (
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    if os.getenv("LOG_JSON", "0") in {"1", "true", "True"}:
        fmt = (
            "{\"time\": \"%(asctime)s\", \"level\": \"%(levelname)s\", "
            "\"logger\": \"%(name)s\", \"message\": \"%(message)s\"}"
        )
    handler.setFormatter(logging.Formatter(fmt))

    # Remove existing handlers to avoid duplicates (useful in tests/reloads)
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)

    root_logger.addHandler(handler)
