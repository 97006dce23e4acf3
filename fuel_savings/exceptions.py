"""
Errors raised by fuel savings calculations.
"""

from typing import Any


class FuelSavingsError(Exception):
    """Base class for calculation errors. Carries the offending input."""

    kind = "FuelSavingsError"

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidTimeframeError(FuelSavingsError, ValueError):
    """Mileage timeframe is not one of week, month or year."""

    kind = "InvalidTimeframe"

    def __init__(self, value: Any):
        super().__init__(f"Unknown milesDrivenTimeframe passed: {value!r}", value)


class InvalidFuelEconomyError(FuelSavingsError, ValueError):
    """Fuel economy is zero, negative or not a number."""

    kind = "InvalidFuelEconomy"

    def __init__(self, value: Any):
        super().__init__(f"Fuel economy must be a positive number, got {value!r}", value)


class InvalidNumberError(FuelSavingsError, ValueError):
    """Rounding was requested on a non-finite value."""

    kind = "InvalidNumber"

    def __init__(self, value: Any):
        super().__init__(f"Cannot round non-finite value {value!r}", value)
