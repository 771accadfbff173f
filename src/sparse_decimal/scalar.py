"""Context-aware arithmetic over decimal.Decimal values.

A context of None selects exact arithmetic: the operation runs under an
unbounded context with Inexact trapped, so a result that cannot be
represented exactly raises instead of being rounded.
"""

import decimal
import numbers
import numpy as np
from decimal import Decimal
from typing import Optional, Union

Number = Union[Decimal, int, str, float]


def _exact_context() -> decimal.Context:
    return decimal.Context(
        prec=decimal.MAX_PREC,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow, decimal.Inexact],
    )


EXACT_CONTEXT = _exact_context()


def _resolve(context: Optional[decimal.Context]) -> decimal.Context:
    return EXACT_CONTEXT if context is None else context


def to_decimal(value: Number) -> Decimal:
    """Convert a scalar to Decimal.

    Floats, numpy scalars included, are converted through their shortest repr,
    so 0.1 becomes Decimal('0.1') rather than the full binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("bool is not a valid matrix value")
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, numbers.Real):
        return Decimal(str(float(value)))
    if isinstance(value, str):
        return Decimal(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")


def add(a: Decimal, b: Decimal, context: Optional[decimal.Context] = None) -> Decimal:
    return _resolve(context).add(a, b)


def subtract(a: Decimal, b: Decimal, context: Optional[decimal.Context] = None) -> Decimal:
    return _resolve(context).subtract(a, b)


def multiply(a: Decimal, b: Decimal, context: Optional[decimal.Context] = None) -> Decimal:
    return _resolve(context).multiply(a, b)


def power(base: Decimal, exponent: int, context: Optional[decimal.Context] = None) -> Decimal:
    """Raise base to a non-negative integer power.

    Any base raised to the power 0 is 1, including 0 ** 0; decimal itself signals
    InvalidOperation for 0 ** 0.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return Decimal(1)
    if context is not None:
        return context.power(base, exponent)
    # square-and-multiply keeps every intermediate exact
    result = Decimal(1)
    while exponent:
        if exponent & 1:
            result = EXACT_CONTEXT.multiply(result, base)
        exponent >>= 1
        if exponent:
            base = EXACT_CONTEXT.multiply(base, base)
    return result


def is_equal(a: Decimal, b: Decimal) -> bool:
    """Numeric equality, so Decimal('1.0') equals Decimal('1.00')."""
    return a.compare(b) == 0
