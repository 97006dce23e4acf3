"""
Data models for fuel savings calculations.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple
import pandas as pd

from . import config
from .math_service import MathService


class MilesDrivenTimeframe(str, Enum):
    """Reporting period of a mileage figure."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# Camel-case keys used by form payloads
_CAMEL_CASE_KEYS = {
    'milesDriven': 'miles_driven',
    'milesDrivenTimeframe': 'miles_driven_timeframe',
    'tradePpg': 'trade_ppg',
    'tradeMpg': 'trade_mpg',
    'newPpg': 'new_ppg',
    'newMpg': 'new_mpg',
}


@dataclass(frozen=True)
class SavingsInput:
    """Driver-reported inputs for a single savings calculation."""

    # Driving reported by the user, in miles per timeframe
    miles_driven: Optional[float] = None
    miles_driven_timeframe: Optional[str] = None  # week, month or year

    # Trade-in vehicle
    trade_ppg: Optional[float] = None
    trade_mpg: Optional[float] = None

    # New vehicle
    new_ppg: Optional[float] = None
    new_mpg: Optional[float] = None

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> 'SavingsInput':
        """
        Build an input from a form-style mapping.

        Args:
            config: Mapping keyed by camelCase names (``milesDriven``,
                ``tradePpg``, ...) or by the snake_case field names.
                Unknown keys are ignored.

        Returns:
            SavingsInput with the recognized values
        """
        names = {f.name for f in fields(cls)}
        values = {}
        for key, value in config.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in names:
                values[name] = value
        return cls(**values)

    @property
    def has_mileage(self) -> bool:
        """False for the "no data entered yet" state."""
        return bool(self.miles_driven)


@dataclass
class SavingsBreakdown:
    """Intermediate and final figures of one savings calculation."""

    monthly_miles: float = 0.0
    trade_monthly_cost: float = 0.0
    new_monthly_cost: float = 0.0
    monthly_savings: float = 0.0
    annual_savings: float = 0.0

    def summary(self) -> Dict:
        """Return summary of the comparison."""
        return {
            'Monthly Miles': self.monthly_miles,
            'Trade Monthly Cost': self.trade_monthly_cost,
            'New Monthly Cost': self.new_monthly_cost,
            'Monthly Savings': self.monthly_savings,
            'Annual Savings': self.annual_savings,
        }


@dataclass
class SavingsReport:
    """Breakdowns for a batch of inputs, in input order."""

    rows: List[Tuple[SavingsInput, SavingsBreakdown]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def total_monthly_savings(self) -> float:
        total = sum(breakdown.monthly_savings for _, breakdown in self.rows)
        return MathService.round_number(total, config.DECIMAL_PLACES)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert report to pandas DataFrame."""
        data = []
        for savings_input, breakdown in self.rows:
            row = {
                'Miles Driven': savings_input.miles_driven,
                'Timeframe': savings_input.miles_driven_timeframe,
                'Trade PPG': savings_input.trade_ppg,
                'Trade MPG': savings_input.trade_mpg,
                'New PPG': savings_input.new_ppg,
                'New MPG': savings_input.new_mpg,
            }
            row.update(breakdown.summary())
            data.append(row)
        return pd.DataFrame(data)
