"""Reusable type definitions for the minimalisp package.

This module provides type variables, callable aliases and constrained integer
types shared by the functional modules.

Type Aliases:
    Count: A non-negative integer, used for ``head``/``tail`` sizes.
    GroupSize: A strictly positive integer, used for chunk sizes.
    KeyFunc: A one-argument callable producing a sort or grouping key.
    Comparator: A two-argument callable returning a negative, zero or positive int.

``Count`` and ``GroupSize`` are validated through pydantic ``TypeAdapter``
instances so invalid arguments raise ``pydantic.ValidationError`` (a
``ValueError``) with a readable message.
"""

import typing as tp

import annotated_types as at
from pydantic import StrictInt, TypeAdapter

__all__ = [
    "T",
    "R",
    "K",
    "V",
    "Count",
    "GroupSize",
    "KeyFunc",
    "Comparator",
    "COUNT_ADAPTER",
    "GROUP_SIZE_ADAPTER",
]

T = tp.TypeVar("T")
R = tp.TypeVar("R")
K = tp.TypeVar("K")
V = tp.TypeVar("V")

# Number of items to take from a sequence
Count = tp.Annotated[StrictInt, at.Ge(0)]

# Number of items per chunk
GroupSize = tp.Annotated[StrictInt, at.Gt(0)]

KeyFunc = tp.Callable[[tp.Any], tp.Any]
Comparator = tp.Callable[[tp.Any, tp.Any], int]

COUNT_ADAPTER: TypeAdapter[int] = TypeAdapter(Count)
GROUP_SIZE_ADAPTER: TypeAdapter[int] = TypeAdapter(GroupSize)
