"""Canonical JSON serialization for load reports.

Sorted keys and fixed separators, so the same tile folder always
produces byte-identical report files.
"""

import json
from typing import Any


def canonical_dumps(obj: Any, indent: int | None = None) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 (non-ASCII kept as is)
    - Sorted keys
    - Stable separators ("," and ":" when compact)
    - List order is preserved; callers order lists before dumping

    Args:
        obj: JSON-compatible Python object
        indent: Pretty-print indentation, or None for the compact form

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        indent=indent,
        separators=(",", ":") if indent is None else (",", ": "),
        ensure_ascii=False,
    )
