"""Fetch dispatch: key listing, shallow and deep reads."""

from __future__ import annotations

import logging
import posixpath
import re
from dataclasses import dataclass
from enum import Enum

from .client import DatabaseReader
from .errors import FireFetchError, ReadError
from .render import render_json

logger = logging.getLogger(__name__)


class FetchMode(Enum):
    KEYS = "keys"
    SHALLOW = "shallow"
    DEEP = "deep"


@dataclass(frozen=True)
class Invocation:
    path: str
    mode: FetchMode = FetchMode.DEEP
    pretty: bool = False
    prepend_path: bool = False


def _read(reader: DatabaseReader, path: str, shallow: bool):
    try:
        if shallow:
            return reader.get_shallow(path)
        return reader.get(path)
    except FireFetchError:
        raise
    except Exception as e:
        logger.debug(f"Failed to read data from path {path}: {e}")
        raise ReadError("Error reading from database", e) from e


def join_key(parent: str, key: str) -> str:
    # normpath keeps a leading "//"
    return re.sub(r"^/+", "/", posixpath.normpath(posixpath.join(parent, key)))


def key_fetch(reader: DatabaseReader, invocation: Invocation) -> str:
    data = _read(reader, invocation.path, shallow=True)
    if data is None:
        return ""
    if not isinstance(data, dict):
        raise ReadError(
            "Error reading from database",
            TypeError(f"value at {invocation.path} is a {type(data).__name__}, not an object"),
        )

    keys = sorted(data)
    if invocation.prepend_path:
        keys = [join_key(invocation.path, k) for k in keys]
    return "\n".join(keys)


def shallow_fetch(reader: DatabaseReader, invocation: Invocation) -> str:
    data = _read(reader, invocation.path, shallow=True)
    return render_json(data, invocation.pretty)


def deep_fetch(reader: DatabaseReader, invocation: Invocation) -> str:
    data = _read(reader, invocation.path, shallow=False)
    return render_json(data, invocation.pretty)


_DISPATCH = {
    FetchMode.KEYS: key_fetch,
    FetchMode.SHALLOW: shallow_fetch,
    FetchMode.DEEP: deep_fetch,
}


def fetch(reader: DatabaseReader, invocation: Invocation) -> str:
    """Run the read selected by ``invocation.mode`` and return the text to print."""
    return _DISPATCH[invocation.mode](reader, invocation)
