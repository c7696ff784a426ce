from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from .models import NOT_FOUND
from .paths import split_path

logger = logging.getLogger(__name__)


def resolve(document: Any, segments: Sequence[str]) -> Any:
    """Walk `segments` through nested mappings of `document`.

    Only mappings can be stepped into, and only by an exact key. Lists,
    strings and scalars stop the walk. Returns the value at the end of the
    path, which may be a falsy value such as None or 0, or NOT_FOUND when
    some segment does not resolve.
    """
    val = document
    for key in segments:
        logger.debug("Resolving key %r in %s", key, type(val).__name__)
        if not isinstance(val, Mapping) or key not in val:
            return NOT_FOUND
        val = val[key]
    return val


def get_value_by_path(data: Any, path: str) -> Any:
    """Retrieve a value from nested data using a dot-notation path."""
    keys = split_path(path)
    logger.debug("Navigating path: %s", keys)
    return resolve(data, keys)
