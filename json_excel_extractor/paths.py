from __future__ import annotations

from typing import List

from .config import PATH_SEPARATOR


def split_path(path: str) -> List[str]:
    """Split a dot path into its literal key segments.

    Every '.' is a separator; there is no escaping, and empty segments are
    kept so that 'a..b' looks up the key '' between 'a' and 'b'.
    """
    return path.split(PATH_SEPARATOR)
