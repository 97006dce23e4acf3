"""
Numeric rounding used to present savings figures.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

import numpy as np

from .exceptions import InvalidNumberError

logger = logging.getLogger(__name__)

# Enough significant digits for any finite float written out in full
_MAX_FLOAT_DIGITS = 330


class MathService:
    """Rounding helpers isolated from the business logic."""

    @staticmethod
    def round_number(value: float, decimal_places: int = 2) -> float:
        """
        Round half away from zero.

        Rounding is done on the shortest decimal representation of the
        float, so ``1.005`` rounds to ``1.01`` instead of ``1.0``.

        Args:
            value: Finite number to round
            decimal_places: Number of digits after the decimal point

        Returns:
            Rounded value as float
        """
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, (int, np.integer)):
            raise ValueError(f"decimal_places must be an integer, got {decimal_places!r}")
        if decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidNumberError(value) from None
        if not np.isfinite(number):
            logger.warning("Refusing to round non-finite value %r", value)
            raise InvalidNumberError(value)

        quantum = Decimal(1).scaleb(-int(decimal_places))
        with localcontext() as ctx:
            ctx.prec = _MAX_FLOAT_DIGITS + int(decimal_places)
            rounded = Decimal(repr(number)).quantize(quantum, rounding=ROUND_HALF_UP)

        # Drop the sign of a negative zero
        return float(rounded) + 0.0
