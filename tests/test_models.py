"""
Tests for data models
"""

import dataclasses

import pytest

from fuel_savings import MilesDrivenTimeframe, SavingsBreakdown, SavingsInput, SavingsReport


class TestSavingsInput:
    """Test SavingsInput construction"""

    def test_from_camel_case(self):
        savings_input = SavingsInput.from_dict({
            'milesDriven': 300,
            'milesDrivenTimeframe': 'week',
            'tradePpg': 4.0,
            'tradeMpg': 25,
            'newPpg': 3.8,
            'newMpg': 40,
        })
        assert savings_input == SavingsInput(300, 'week', 4.0, 25, 3.8, 40)

    def test_from_snake_case_ignores_unknown_keys(self):
        savings_input = SavingsInput.from_dict({'miles_driven': 10, 'color': 'red'})
        assert savings_input.miles_driven == 10
        assert savings_input.new_mpg is None

    def test_frozen(self, monthly_input):
        with pytest.raises(dataclasses.FrozenInstanceError):
            monthly_input.miles_driven = 5

    @pytest.mark.parametrize("miles,expected", [(None, False), (0, False), (0.0, False), (1, True), (0.5, True)])
    def test_has_mileage(self, miles, expected):
        assert SavingsInput(miles_driven=miles).has_mileage is expected


class TestMilesDrivenTimeframe:
    """Test timeframe enum"""

    def test_values(self):
        assert [t.value for t in MilesDrivenTimeframe] == ['week', 'month', 'year']

    def test_compares_to_string(self):
        assert MilesDrivenTimeframe.WEEK == 'week'


class TestSavingsBreakdown:
    """Test breakdown summary"""

    def test_summary(self):
        breakdown = SavingsBreakdown(1200.0, 210.0, 140.0, 70.0, 840.0)
        assert breakdown.summary() == {
            'Monthly Miles': 1200.0,
            'Trade Monthly Cost': 210.0,
            'New Monthly Cost': 140.0,
            'Monthly Savings': 70.0,
            'Annual Savings': 840.0,
        }


class TestSavingsReport:
    """Test report totals"""

    def test_total_is_rounded(self, monkeypatch):
        from fuel_savings import config

        monkeypatch.setattr(config, "DECIMAL_PLACES", 2)
        report = SavingsReport(rows=[
            (SavingsInput(), SavingsBreakdown(monthly_savings=0.1)),
            (SavingsInput(), SavingsBreakdown(monthly_savings=0.2)),
        ])
        assert report.total_monthly_savings == 0.3

    def test_empty_total(self):
        assert SavingsReport().total_monthly_savings == 0.0
