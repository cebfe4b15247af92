"""JSON rendering of fetched values."""

from __future__ import annotations

import json
import logging
from typing import Any

from .errors import EncodeError

logger = logging.getLogger(__name__)

INDENT = 3


def render_json(value: Any, pretty: bool = False) -> str:
    """Encode ``value`` as compact JSON, or indented by three spaces when ``pretty``.

    Keys are sorted so the output is stable between runs. If the indented
    form cannot be produced the compact form is returned instead.
    """
    try:
        compact = json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodeError("Error marshalling data", e) from e

    if not pretty:
        return compact

    try:
        return json.dumps(value, indent=INDENT, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.warning(f"Error formatting JSON, printing unindented: {e}")
        return compact
