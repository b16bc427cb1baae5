"""Sequence transformations.

Every function here takes its input sequence last, leaves it untouched, and
returns a freshly built ``list`` (or ``dict`` for :func:`group_by`).

Functions:
    - **lmap / lfilter**: eager, list-returning ``map`` and ``filter``.
    - **reduce**: left fold with no initial value; empty input is an error.
    - **distinct / compact / flatten / reverse**: reshape a single sequence.
    - **sort / sort_by**: natural order and stable keyed or comparator sorts.
    - **group_by / in_groups_of**: bucket by key or chunk by size.
    - **lzip / difference**: combine two sequences.

Examples:
    >>> sort_by(len, ["The", "Quick", "Brown", "Fox"])
    ['The', 'Fox', 'Quick', 'Brown']
    >>> group_by(len, ["The", "Quick", "Brown", "Fox"])
    {3: ['The', 'Fox'], 5: ['Quick', 'Brown']}
    >>> in_groups_of(3, list(range(1, 11)))
    [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10]]
"""

import functools
import inspect
import typing as tp

from pydantic import ValidationError

from minimalisp.core.types import T, R, K, KeyFunc, Comparator, GROUP_SIZE_ADAPTER
from minimalisp.logger.logger import logger

__all__ = [
    "lmap",
    "lfilter",
    "reduce",
    "distinct",
    "compact",
    "flatten",
    "reverse",
    "sort",
    "sort_by",
    "group_by",
    "in_groups_of",
    "lzip",
    "difference",
]


def lmap(func: tp.Callable[[T], R], items: tp.Iterable[T]) -> tp.List[R]:
    """Return a list of ``func`` applied to each item."""
    return [func(item) for item in items]


def lfilter(predicate: tp.Callable[[T], bool], items: tp.Iterable[T]) -> tp.List[T]:
    """Return a list of the items for which ``predicate`` is truthy."""
    return [item for item in items if predicate(item)]


def reduce(func: tp.Callable[[T, T], T], items: tp.Iterable[T]) -> T:
    """Fold ``items`` from the left with ``func``.

    Args:
        func: Binary accumulator, called as ``func(accumulated, item)``.
        items: Items to fold. A single item is returned as is.

    Returns:
        The accumulated value.

    Raises:
        ValueError: If ``items`` is empty, since there is nothing to return.
    """
    items = list(items)
    if not items:
        logger.debug("reduce called on an empty sequence")
        raise ValueError("Cannot reduce an empty sequence.")
    return functools.reduce(func, items)


def distinct(items: tp.Iterable[T]) -> tp.List[T]:
    """Return the unique items, keeping the order of first occurrence.

    Items must be hashable.
    """
    return list(dict.fromkeys(items))


def compact(items: tp.Iterable[tp.Optional[T]]) -> tp.List[T]:
    """Return the items that are not ``None``.

    Falsy values such as ``0``, ``""`` or ``False`` are kept.
    """
    return [item for item in items if item is not None]


def flatten(sequences: tp.Iterable[tp.Iterable[T]]) -> tp.List[T]:
    """Concatenate a sequence of sequences, one level deep."""
    return [item for sequence in sequences for item in sequence]


def reverse(items: tp.Iterable[T]) -> tp.List[T]:
    """Return the items in reverse order as a new list."""
    return list(items)[::-1]


def sort(items: tp.Iterable[T]) -> tp.List[T]:
    """Return the items sorted by their natural ordering."""
    return sorted(items)


def _is_comparator(func: tp.Callable[..., tp.Any]) -> bool:
    # Builtins without an introspectable signature are treated as key functions
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    required = [
        param
        for param in signature.parameters.values()
        if param.kind
        in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and param.default is inspect.Parameter.empty
    ]
    return len(required) == 2


def sort_by(
    func: tp.Union[KeyFunc, Comparator],
    items: tp.Iterable[T],
    comparator: tp.Optional[bool] = None,
) -> tp.List[T]:
    """Return the items sorted by a key function or a comparator.

    The sort is stable: items that compare equal keep their relative order.

    Args:
        func: Either a key function ``func(item)`` whose results are compared
            naturally, or a comparator ``func(a, b)`` returning a negative,
            zero or positive integer.
        items: Items to sort.
        comparator: Force ``func`` to be treated as a comparator (``True``) or
            as a key function (``False``). By default a callable with exactly
            two required positional parameters is treated as a comparator.

    Returns:
        A new sorted list.

    Example:
        >>> sort_by(lambda a, b: len(a) - len(b), ["over", "The", "Jumped"])
        ['The', 'over', 'Jumped']
    """
    if comparator is None:
        comparator = _is_comparator(func)
    key = functools.cmp_to_key(func) if comparator else func
    return sorted(items, key=key)


def group_by(
    func: tp.Callable[[T], K], items: tp.Iterable[T]
) -> tp.Dict[K, tp.List[T]]:
    """Group items by the result of ``func``.

    Args:
        func: Key function applied to every item.
        items: Items to group.

    Returns:
        A dict from each key to the list of items producing it. Keys appear in
        order of first occurrence and each group keeps the input order.
    """
    groups: tp.Dict[K, tp.List[T]] = {}
    for item in items:
        groups.setdefault(func(item), []).append(item)
    return groups


def in_groups_of(size: int, items: tp.Iterable[T]) -> tp.List[tp.List[T]]:
    """Split ``items`` into consecutive groups of ``size``.

    Every group holds exactly ``size`` items except possibly the last one,
    which holds the remainder. An empty input yields a single empty group,
    ``[[]]``, rather than no groups at all.

    Args:
        size: Number of items per group, a positive integer.
        items: Items to split, any iterable.

    Returns:
        A list of groups.

    Raises:
        pydantic.ValidationError: If ``size`` is not a positive integer.
    """
    try:
        size = GROUP_SIZE_ADAPTER.validate_python(size)
    except ValidationError:
        logger.debug(f"Invalid group size: {size!r}")
        raise

    items = list(items)
    if not items:
        return [[]]
    return [items[i : i + size] for i in range(0, len(items), size)]


def lzip(a: tp.Sequence[T], b: tp.Sequence[T]) -> tp.List[tp.List[tp.Optional[T]]]:
    """Pair the items of ``a`` and ``b`` by position.

    The result always has one pair per item of ``a``. When ``b`` is shorter
    its missing slots are ``None``; when ``b`` is longer its extra items are
    dropped.

    Example:
        >>> lzip(["A", "C", "E"], ["B", "D"])
        [['A', 'B'], ['C', 'D'], ['E', None]]
    """
    return [[item, b[i] if i < len(b) else None] for i, item in enumerate(a)]


def difference(a: tp.Iterable[T], b: tp.Iterable[T]) -> tp.List[T]:
    """Return the distinct items of ``a`` that are not in ``b``.

    The result is computed with sets, so its order is unspecified.
    """
    return list(set(a) - set(b))
