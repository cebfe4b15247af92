__version__ = "0.1.0"

from .client import DatabaseReader, RealtimeDatabaseClient
from .errors import (
    ConfigError,
    EncodeError,
    FireFetchError,
    InitError,
    ReadError,
    UsageError,
)
from .fetch import FetchMode, Invocation, fetch
from .render import render_json

__all__ = [
    "__version__",
    "DatabaseReader",
    "RealtimeDatabaseClient",
    "FetchMode",
    "Invocation",
    "fetch",
    "render_json",
    "FireFetchError",
    "UsageError",
    "ConfigError",
    "InitError",
    "ReadError",
    "EncodeError",
]
