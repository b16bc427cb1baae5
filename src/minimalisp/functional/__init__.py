"""Functional primitives for minimalisp.

This module provides functional programming utilities for building and
transforming lists, arrays (tuples), maps (dicts) and sets with less
ceremony. Utilities are stateless and side-effect-free: inputs are never
mutated and every call returns a freshly built container, so they compose
into pipelines.

Example:
    FizzBuzz as a single expression::

        lmap(
            lambda i: "FizzBuzz" if i % 15 == 0
            else "Fizz" if i % 3 == 0
            else "Buzz" if i % 5 == 0
            else str(i),
            lrange(1, 20),
        )
"""

from minimalisp.functional.construction import (
    list_of,
    as_list,
    array_of,
    as_array,
    set_of,
    as_set,
    copy,
    lrange,
    map_from_pairs,
    map_from_keys_values,
    map_from_entries,
)
from minimalisp.functional.accessors import first, last, head, tail, rest
from minimalisp.functional.transforms import (
    lmap,
    lfilter,
    reduce,
    distinct,
    compact,
    flatten,
    reverse,
    sort,
    sort_by,
    group_by,
    in_groups_of,
    lzip,
    difference,
)
from minimalisp.functional.mappings import invert, merge, omit, get
from minimalisp.functional.numeric import to_decimal, sum_decimals

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
    "first",
    "last",
    "head",
    "tail",
    "rest",
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
    "invert",
    "merge",
    "omit",
    "get",
    "to_decimal",
    "sum_decimals",
]
