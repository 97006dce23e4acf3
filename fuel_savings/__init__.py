"""
Fuel Savings - Monthly fuel cost comparison between two vehicles.

A Python package for projecting how much a driver saves on fuel each month
by trading in their current vehicle for a new one.
"""

from .calculator import FuelSavingsCalculator
from .exceptions import (
    FuelSavingsError,
    InvalidFuelEconomyError,
    InvalidNumberError,
    InvalidTimeframeError,
)
from .loader import DataLoader
from .math_service import MathService
from .models import MilesDrivenTimeframe, SavingsBreakdown, SavingsInput, SavingsReport

__version__ = "0.1.0"
__all__ = [
    "FuelSavingsCalculator",
    "MathService",
    "DataLoader",
    "SavingsInput",
    "SavingsBreakdown",
    "SavingsReport",
    "MilesDrivenTimeframe",
    "FuelSavingsError",
    "InvalidTimeframeError",
    "InvalidFuelEconomyError",
    "InvalidNumberError",
]
