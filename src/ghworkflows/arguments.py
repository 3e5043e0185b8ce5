# arguments.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

CustomArguments = Iterable[Tuple[str, Any]]


def args_of(
    pairs: Iterable[Tuple[str, Optional[Any]]],
    custom_arguments: CustomArguments = (),
) -> Dict[str, Any]:
    """
    Build an ordered argument map.

    Pairs whose value is None are dropped. Declaration order is kept and a
    later duplicate key overrides the earlier value (the key keeps its first
    position). Custom arguments are appended last, verbatim.
    """
    out: Dict[str, Any] = {}
    for key, value in pairs:
        if value is None:
            continue
        out[key] = value
    for key, value in custom_arguments:
        out[key] = value
    return out


def none_if_empty(value):
    """Map an empty collection to None so args_of drops it."""
    if value is None or len(value) == 0:
        return None
    return value
