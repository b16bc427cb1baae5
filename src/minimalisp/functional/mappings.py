"""Mapping transformations.

All functions return a new ``dict`` and keep the insertion order of their
inputs where one exists.
"""

import typing as tp

from minimalisp.core.types import K, V

__all__ = [
    "invert",
    "merge",
    "omit",
    "get",
]


def invert(mapping: tp.Mapping[K, V]) -> tp.Dict[V, K]:
    """Swap keys and values.

    When several keys share a value, the key seen last wins.

    Example:
        >>> invert({"A": 1, "B": 2})
        {1: 'A', 2: 'B'}
    """
    return {value: key for key, value in mapping.items()}


def merge(a: tp.Mapping[K, V], b: tp.Mapping[K, V]) -> tp.Dict[K, V]:
    """Merge ``b`` over ``a``.

    Keys of ``a`` keep their position, with values from ``b`` taking
    precedence; keys only present in ``b`` are appended in ``b``'s order.

    Example:
        >>> merge({"A": 1, "B": 2, "C": 3}, {"C": 10, "D": 11})
        {'A': 1, 'B': 2, 'C': 10, 'D': 11}
    """
    merged = dict(a)
    merged.update(b)
    return merged


def omit(mapping: tp.Mapping[K, V], *keys: K) -> tp.Dict[K, V]:
    """Return a copy of ``mapping`` without ``keys``. Missing keys are ignored."""
    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}


def get(
    mapping: tp.Mapping[K, V], key: K, default: tp.Optional[V] = None
) -> tp.Optional[V]:
    """Return ``mapping[key]``, or ``default`` when it is missing or ``None``."""
    value = mapping.get(key)
    return default if value is None else value
