"""Accessors for the ends of a sequence.

Absence is not an error here: empty or ``None`` input produces ``None`` (no
value) instead of raising. The one exception is :func:`rest`, which returns an
empty list for an empty sequence and only returns ``None`` for ``None`` input.
"""

import typing as tp

from pydantic import ValidationError

from minimalisp.core.types import T, COUNT_ADAPTER
from minimalisp.logger.logger import logger

__all__ = [
    "first",
    "last",
    "head",
    "tail",
    "rest",
]


def _validate_count(n: int) -> int:
    try:
        return COUNT_ADAPTER.validate_python(n)
    except ValidationError:
        logger.debug(f"Invalid item count: {n!r}")
        raise


def first(items: tp.Optional[tp.Sequence[T]]) -> tp.Optional[T]:
    """Return the first item, or ``None`` when ``items`` is empty or ``None``."""
    return items[0] if items else None


def last(items: tp.Optional[tp.Sequence[T]]) -> tp.Optional[T]:
    """Return the last item, or ``None`` when ``items`` is empty or ``None``."""
    return items[-1] if items else None


def head(items: tp.Optional[tp.Sequence[T]], n: int) -> tp.Optional[tp.List[T]]:
    """Return the first ``n`` items as a new list.

    Args:
        items: Source sequence, may be ``None``.
        n: Number of items to take, a non-negative integer.

    Returns:
        ``None`` if ``items`` is ``None``; a full copy if it holds fewer than
        ``n`` items; otherwise its first ``n`` items.

    Raises:
        pydantic.ValidationError: If ``n`` is not a non-negative integer.
    """
    n = _validate_count(n)
    if items is None:
        return None
    return list(items[:n])


def tail(items: tp.Optional[tp.Sequence[T]], n: int) -> tp.Optional[tp.List[T]]:
    """Return the last ``n`` items as a new list.

    Args:
        items: Source sequence, may be ``None``.
        n: Number of items to take, a non-negative integer.

    Returns:
        ``None`` if ``items`` is ``None``; a full copy if it holds fewer than
        ``n`` items; otherwise its last ``n`` items.

    Raises:
        pydantic.ValidationError: If ``n`` is not a non-negative integer.
    """
    n = _validate_count(n)
    if items is None:
        return None
    # items[-0:] would be the whole sequence
    if n == 0:
        return []
    return list(items[-n:])


def rest(items: tp.Optional[tp.Sequence[T]]) -> tp.Optional[tp.List[T]]:
    """Return everything after the first item.

    An empty sequence gives an empty list; ``None`` gives ``None``.
    """
    if items is None:
        return None
    return list(items[1:])
