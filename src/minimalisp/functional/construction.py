"""Construction helpers for lists, arrays, sets and maps.

Each helper builds a fresh container either from its positional arguments or
from an existing iterable. Arrays are represented as tuples. Maps are plain
``dict`` objects and keep the insertion order of the keys they are built from.

The three map constructors cover the different ways a mapping is usually
spelled out inline:

    - :func:`map_from_pairs`: interleaved ``key, value, key, value`` arguments.
    - :func:`map_from_keys_values`: two parallel sequences of equal length.
    - :func:`map_from_entries`: an existing mapping or ``(key, value)`` pairs.

Examples:
    >>> list_of("A", "B", "C")
    ['A', 'B', 'C']
    >>> map_from_pairs("greeting", "Hey", "name", "Joe")
    {'greeting': 'Hey', 'name': 'Joe'}
    >>> map_from_keys_values(["greeting", "name"], ["Hey", "Joe"])
    {'greeting': 'Hey', 'name': 'Joe'}
"""

import typing as tp

from minimalisp.core.types import T, K, V
from minimalisp.logger.logger import logger

__all__ = [
    "list_of",
    "as_list",
    "array_of",
    "as_array",
    "set_of",
    "as_set",
    "copy",
    "lrange",
    "map_from_pairs",
    "map_from_keys_values",
    "map_from_entries",
]


def list_of(*items: T) -> tp.List[T]:
    """Return a list containing the given arguments."""
    return list(items)


def as_list(items: tp.Iterable[T]) -> tp.List[T]:
    """Return a new list containing the items of ``items``."""
    return list(items)


def array_of(*items: T) -> tp.Tuple[T, ...]:
    """Return an array (tuple) containing the given arguments."""
    return tuple(items)


def as_array(items: tp.Iterable[T]) -> tp.Tuple[T, ...]:
    """Return an array (tuple) containing the items of ``items``.

    Unlike a typed Java array there is no element type to infer, so an empty
    input simply produces an empty tuple.
    """
    return tuple(items)


def set_of(*items: T) -> tp.Set[T]:
    """Return a set of the given arguments."""
    return set(items)


def as_set(items: tp.Iterable[T]) -> tp.Set[T]:
    """Return a set of the items in ``items``."""
    return set(items)


def copy(items: tp.Iterable[T]) -> tp.List[T]:
    """Return a shallow copy of ``items`` as a new list."""
    return list(items)


def lrange(start_inclusive: int, end_exclusive: int) -> tp.List[int]:
    """Return the integers from ``start_inclusive`` up to ``end_exclusive``.

    Example:
        >>> lrange(0, 5)
        [0, 1, 2, 3, 4]
    """
    return list(range(start_inclusive, end_exclusive))


def map_from_pairs(*objects: tp.Any) -> tp.Dict[tp.Any, tp.Any]:
    """Build a map from interleaved ``key, value, key, value, ...`` arguments.

    To build from an existing flat list, unpack it: ``map_from_pairs(*items)``.

    Args:
        *objects: Keys at even positions, values at odd positions.

    Returns:
        A dict in argument order. A repeated key keeps its first position and
        takes the last value given for it.

    Raises:
        ValueError: If an odd number of arguments is given.
    """
    if len(objects) % 2 != 0:
        logger.debug(f"map_from_pairs called with {len(objects)} arguments")
        raise ValueError(
            f"Expected an even number of key/value arguments, got {len(objects)}."
        )
    return dict(zip(objects[0::2], objects[1::2]))


def map_from_keys_values(
    keys: tp.Sequence[K], values: tp.Sequence[V]
) -> tp.Dict[K, V]:
    """Build a map by pairing ``keys`` and ``values`` positionally.

    Args:
        keys: Keys of the resulting map, in order.
        values: Values for each key, same length as ``keys``.

    Returns:
        A dict in ``keys`` order. For duplicate keys the last value wins.

    Raises:
        ValueError: If ``keys`` and ``values`` differ in length.
    """
    if len(keys) != len(values):
        logger.debug(
            f"map_from_keys_values called with {len(keys)} keys "
            f"and {len(values)} values"
        )
        raise ValueError(
            f"Keys and values must have the same length, "
            f"got {len(keys)} keys and {len(values)} values."
        )
    return dict(zip(keys, values))


def map_from_entries(
    entries: tp.Union[tp.Mapping[K, V], tp.Iterable[tp.Tuple[K, V]]],
) -> tp.Dict[K, V]:
    """Build a map from an existing mapping or an iterable of ``(key, value)`` pairs.

    Raises:
        ValueError: If an entry holds other than two items.
        TypeError: If an entry is not iterable.
    """
    return dict(entries)
