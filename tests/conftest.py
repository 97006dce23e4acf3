import pytest

from fuel_savings import SavingsInput


@pytest.fixture
def monthly_input():
    """1200 miles/month, trade 20 MPG vs new 30 MPG at $3.50"""
    return SavingsInput(
        miles_driven=1200,
        miles_driven_timeframe='month',
        trade_ppg=3.50,
        trade_mpg=20,
        new_ppg=3.50,
        new_mpg=30,
    )


@pytest.fixture
def weekly_input():
    """300 miles/week, trade 25 MPG at $4.00 vs new 40 MPG at $3.80"""
    return SavingsInput(
        miles_driven=300,
        miles_driven_timeframe='week',
        trade_ppg=4.00,
        trade_mpg=25,
        new_ppg=3.80,
        new_mpg=40,
    )
