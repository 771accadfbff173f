import decimal
from typing import Optional
from dataclasses import dataclass

from .constants import RoundingMode, ROUNDING_MODES
from .matrix_errors import InvalidPrecisionError, InvalidRoundingModeError


@dataclass
class ArithmeticConfig:
    """
    Configuration for the rounding context used by matrix arithmetic.
    
    This class describes the digit precision and rounding policy applied to
    every scalar operation, and builds the matching decimal.Context.
    """
    
    precision: Optional[int] = None
    """Number of significant digits. If None, arithmetic is exact (unbounded)."""
    
    rounding: str = RoundingMode.HALF_EVEN
    """Rounding policy, one of the decimal module rounding mode names:
    - 'ROUND_HALF_EVEN': round to nearest, ties to even (banker's rounding)
    - 'ROUND_HALF_UP': round to nearest, ties away from zero
    - 'ROUND_DOWN' / 'ROUND_UP': truncate towards / away from zero
    - 'ROUND_FLOOR' / 'ROUND_CEILING': round towards -inf / +inf
    """
    
    traps_inexact: bool = False
    """Whether a rounded (inexact) result should raise decimal.Inexact instead of rounding silently."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision <= 0:
                raise InvalidPrecisionError(self.precision)
        if self.rounding not in ROUNDING_MODES:
            raise InvalidRoundingModeError(self.rounding, ROUNDING_MODES)

    def to_context(self) -> Optional[decimal.Context]:
        """Build the rounding context described by this configuration.
        
        Returns:
            A new decimal.Context, or None when precision is None (exact arithmetic).
        """
        self.validate()
        if self.precision is None:
            return None
        traps = [decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow]
        if self.traps_inexact:
            traps.append(decimal.Inexact)
        return decimal.Context(prec=self.precision, rounding=self.rounding, traps=traps)
