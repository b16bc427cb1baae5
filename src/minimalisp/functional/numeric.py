"""Exact decimal arithmetic over sequences.

Binary floating point cannot represent most decimal fractions, so summing
money-like values as ``float`` accumulates rounding error. :func:`sum_decimals`
sums with :class:`decimal.Decimal` instead. Floats are converted through their
shortest ``repr`` (``Decimal(str(x))``), so ``0.1`` enters the sum as exactly
``Decimal("0.1")`` rather than its binary approximation.

Example:
    >>> sum_decimals([0.1, 0.2, None])
    Decimal('0.3')
"""

import typing as tp
from decimal import MAX_PREC, Decimal, localcontext

from minimalisp.functional.transforms import compact
from minimalisp.logger.logger import logger

__all__ = [
    "to_decimal",
    "sum_decimals",
]

DecimalLike = tp.Union[Decimal, int, float, str]


def to_decimal(value: DecimalLike) -> Decimal:
    """Convert ``value`` to a ``Decimal`` without binary rounding artifacts.

    Raises:
        TypeError: If ``value`` is not a ``Decimal``, ``int``, ``float`` or ``str``.
        decimal.InvalidOperation: If a string does not parse as a number.
    """
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        logger.debug(f"Cannot convert {type(value).__name__} to Decimal")
        raise TypeError(
            f"Expected Decimal, int, float or str, got {type(value).__name__}."
        )
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def sum_decimals(items: tp.Iterable[tp.Optional[DecimalLike]]) -> Decimal:
    """Sum ``items`` exactly, ignoring ``None`` entries.

    Args:
        items: Numbers to sum; ``None`` entries are skipped.

    Returns:
        The exact sum, ``Decimal(0)`` for empty or all-``None`` input.

    Raises:
        TypeError: If an entry is not a supported number type.
    """
    total = Decimal(0)
    # The default context rounds to 28 significant digits
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        for value in compact(items):
            total += to_decimal(value)
    return total
