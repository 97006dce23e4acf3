"""
Fuel Savings - Core calculation engine.
Projects the monthly fuel cost difference between a trade-in and a new vehicle.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

import numpy as np

from . import config
from .exceptions import InvalidFuelEconomyError, InvalidNumberError, InvalidTimeframeError
from .math_service import MathService
from .models import MilesDrivenTimeframe, SavingsBreakdown, SavingsInput, SavingsReport

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

# Precision of the headline monthly savings figure
SAVINGS_DECIMAL_PLACES = 2

InputLike = Union[SavingsInput, Mapping[str, Any]]


class FuelSavingsCalculator:
    """Calculate monthly fuel savings of switching vehicles."""

    @staticmethod
    def normalize_mileage_to_monthly(miles_driven: float, timeframe: Any) -> float:
        """
        Convert a mileage figure reported per week, month or year to miles per month.

        Args:
            miles_driven: Miles driven during one timeframe
            timeframe: 'week', 'month' or 'year'

        Returns:
            Equivalent miles per month
        """
        try:
            period = MilesDrivenTimeframe(timeframe)
        except (ValueError, TypeError):
            logger.warning("Unknown mileage timeframe %r", timeframe)
            raise InvalidTimeframeError(timeframe) from None

        miles = _as_number(miles_driven)

        if period is MilesDrivenTimeframe.WEEK:
            # Annualize first, then spread over the months
            return (miles * WEEKS_PER_YEAR) / MONTHS_PER_YEAR
        if period is MilesDrivenTimeframe.MONTH:
            return miles
        return miles / MONTHS_PER_YEAR

    @staticmethod
    def compute_monthly_fuel_cost(
        monthly_mileage: float,
        price_per_unit: float,
        economy_per_unit: float,
    ) -> float:
        """
        Calculate one vehicle's fuel cost for a month of driving.

        Args:
            monthly_mileage: Miles driven per month
            price_per_unit: Fuel price per gallon
            economy_per_unit: Fuel economy in miles per gallon

        Returns:
            Fuel cost per month
        """
        try:
            economy = float(economy_per_unit)
        except (TypeError, ValueError):
            raise InvalidFuelEconomyError(economy_per_unit) from None
        if not economy > 0:
            logger.warning("Rejecting fuel economy %r", economy_per_unit)
            raise InvalidFuelEconomyError(economy_per_unit)

        price = _as_number(price_per_unit)

        gallons_used_per_month = _as_number(monthly_mileage) / economy
        return gallons_used_per_month * price

    @staticmethod
    def compute_monthly_savings(savings_input: InputLike) -> float:
        """
        Calculate monthly savings of the new vehicle over the trade-in.

        Positive savings mean the new vehicle is cheaper to fuel. When no
        mileage has been entered the result is 0 and nothing else is checked.

        Args:
            savings_input: SavingsInput, or a mapping accepted by SavingsInput.from_dict

        Returns:
            Monthly savings rounded to 2 decimal places
        """
        savings_input = FuelSavingsCalculator._as_input(savings_input)
        if not savings_input.has_mileage:
            return 0.0

        trade_cost, new_cost, _ = FuelSavingsCalculator._monthly_costs(savings_input)
        savings_per_month = trade_cost - new_cost

        return MathService.round_number(savings_per_month, SAVINGS_DECIMAL_PLACES)

    @staticmethod
    def compute_breakdown(
        savings_input: InputLike,
        decimal_places: Optional[int] = None,
    ) -> SavingsBreakdown:
        """
        Calculate savings together with the figures they are derived from.

        Args:
            savings_input: SavingsInput, or a mapping accepted by SavingsInput.from_dict
            decimal_places: Precision of every figure (defaults to config.DECIMAL_PLACES)

        Returns:
            SavingsBreakdown, all zeros when no mileage has been entered
        """
        savings_input = FuelSavingsCalculator._as_input(savings_input)
        if not savings_input.has_mileage:
            return SavingsBreakdown()

        places = config.DECIMAL_PLACES if decimal_places is None else decimal_places
        trade_cost, new_cost, monthly_miles = FuelSavingsCalculator._monthly_costs(savings_input)
        savings_per_month = trade_cost - new_cost

        return SavingsBreakdown(
            monthly_miles=MathService.round_number(monthly_miles, places),
            trade_monthly_cost=MathService.round_number(trade_cost, places),
            new_monthly_cost=MathService.round_number(new_cost, places),
            monthly_savings=MathService.round_number(savings_per_month, places),
            annual_savings=MathService.round_number(savings_per_month * MONTHS_PER_YEAR, places),
        )

    @staticmethod
    def compute_report(inputs: Iterable[InputLike]) -> SavingsReport:
        """Calculate a breakdown for each input."""
        report = SavingsReport()
        for item in inputs:
            savings_input = FuelSavingsCalculator._as_input(item)
            report.rows.append((savings_input, FuelSavingsCalculator.compute_breakdown(savings_input)))
        logger.debug("Computed savings report with %d rows", len(report))
        return report

    @staticmethod
    def validate_input(savings_input: InputLike) -> List[str]:
        """
        Check an input without raising.

        Returns:
            List of validation errors (empty if all OK)
        """
        savings_input = FuelSavingsCalculator._as_input(savings_input)
        errors = []
        if not savings_input.has_mileage:
            return errors

        try:
            miles = float(savings_input.miles_driven)
        except (TypeError, ValueError):
            errors.append(f"Miles driven must be a number: {savings_input.miles_driven!r}")
        else:
            if not np.isfinite(miles):
                errors.append(f"Miles driven must be finite: {savings_input.miles_driven!r}")
            elif miles < 0:
                errors.append("Miles driven must not be negative")

        try:
            MilesDrivenTimeframe(savings_input.miles_driven_timeframe)
        except (ValueError, TypeError):
            errors.append(f"Unknown timeframe: {savings_input.miles_driven_timeframe!r}")

        for label, value in [
            ("Trade PPG", savings_input.trade_ppg),
            ("Trade MPG", savings_input.trade_mpg),
            ("New PPG", savings_input.new_ppg),
            ("New MPG", savings_input.new_mpg),
        ]:
            if not _is_positive(value):
                errors.append(f"{label} must be positive: {value!r}")

        return errors

    @staticmethod
    def _as_input(savings_input: InputLike) -> SavingsInput:
        if isinstance(savings_input, SavingsInput):
            return savings_input
        return SavingsInput.from_dict(savings_input)

    @staticmethod
    def _monthly_costs(savings_input: SavingsInput):
        """Return (trade cost, new cost, monthly miles) for an input with mileage."""
        monthly_miles = FuelSavingsCalculator.normalize_mileage_to_monthly(
            savings_input.miles_driven, savings_input.miles_driven_timeframe
        )
        trade_cost = FuelSavingsCalculator.compute_monthly_fuel_cost(
            monthly_miles, savings_input.trade_ppg, savings_input.trade_mpg
        )
        new_cost = FuelSavingsCalculator.compute_monthly_fuel_cost(
            monthly_miles, savings_input.new_ppg, savings_input.new_mpg
        )
        logger.debug(
            "Monthly miles %.2f: trade cost %.2f, new cost %.2f",
            monthly_miles, trade_cost, new_cost,
        )
        return trade_cost, new_cost, monthly_miles


def _is_positive(value: Any) -> bool:
    """True for finite numbers above zero."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return bool(np.isfinite(number)) and number > 0


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Rejecting non-numeric value %r", value)
        raise InvalidNumberError(value) from None
