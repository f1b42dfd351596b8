"""Deep-merge JSON-compatible values with delete-on-null semantics."""

from __future__ import annotations

import typing as typ

JsonValue = typ.Any


def merge_json(base: JsonValue, overlay: JsonValue) -> JsonValue:
    """Merge ``overlay`` into ``base`` and return the combined value.

    Two mappings merge key by key, recursively: an overlay value of ``None``
    removes the key, any other value is merged with whatever ``base`` holds
    under that key. Keys found only in ``base`` are kept. For every other
    combination the overlay replaces the base outright. Neither argument is
    mutated.

    Examples
    --------
    >>> merge_json({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
    {'a': 1, 'b': {'c': 2, 'd': 3}}
    >>> merge_json({"a": 1, "b": 2}, {"a": None})
    {'b': 2}
    >>> merge_json([1, 2], {"a": 1})
    {'a': 1}
    """
    if not (isinstance(base, dict) and isinstance(overlay, dict)):
        return overlay

    merged = dict(base)
    for key, value in overlay.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = merge_json(merged.get(key), value)
    return merged


__all__ = ["JsonValue", "merge_json"]
