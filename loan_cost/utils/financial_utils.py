"""Financial utility functions for loan cost calculations."""

import numpy as np


def calculate_periodic_rate(
    annual_rate: float,
    periods_per_year: int = 12,
    compound: bool = False,
) -> float:
    """
    Convert a nominal annual rate into a per-period rate.

    The default is simple division (annual_rate / periods_per_year), which
    is what lenders quote for fixed-rate mortgages. With compound=True the
    equivalent compounded rate is returned instead.

    Args:
        annual_rate: Nominal annual interest rate (e.g., 0.035 for 3.5%).
        periods_per_year: Number of base periods in a year.
        compound: Use (1 + r)^(1/n) - 1 instead of r / n.

    Returns:
        Interest rate per base period.

    Example:
        >>> calculate_periodic_rate(0.06)
        0.005
    """
    if compound:
        return (1 + annual_rate) ** (1 / periods_per_year) - 1
    return annual_rate / periods_per_year


def calculate_annuity_payment(
    principal: float,
    periodic_rate: float,
    periods: int,
) -> float:
    """
    Calculate constant annuity payment for a loan.

    Uses the standard annuity formula:
    A = P × r × (1+r)^n / [(1+r)^n - 1]

    Args:
        principal: Loan principal amount.
        periodic_rate: Interest rate per period (e.g., 0.035 / 12).
        periods: Loan term in periods.

    Returns:
        Payment due each period.

    Example:
        >>> calculate_annuity_payment(12000, 0.0, 12)
        1000.0
    """
    if periodic_rate == 0:
        return principal / periods

    compound_factor = (1 + periodic_rate) ** periods
    return principal * periodic_rate * compound_factor / (compound_factor - 1)


def calculate_discount_factors(
    discount_factor: float,
    periods: int,
) -> np.ndarray:
    """
    Calculate x^i for periods i = 1..periods.

    Args:
        discount_factor: Per-period discount factor x.
        periods: Number of periods.

    Returns:
        Array of powers of the discount factor, one per period.

    Example:
        >>> calculate_discount_factors(0.5, 3)
        array([0.5  , 0.25 , 0.125])
    """
    exponents = np.arange(1, periods + 1)
    return discount_factor**exponents


def annualize_discount_factor(
    discount_factor: float,
    periods_per_year: int = 12,
) -> float:
    """
    Convert a per-period discount factor into an effective annual rate.

    Args:
        discount_factor: Per-period discount factor x (0 < x).
        periods_per_year: Number of base periods in a year.

    Returns:
        Effective annual rate (1/x)^periods_per_year - 1. np.inf if the
        power overflows.
    """
    with np.errstate(over="ignore"):
        growth = np.power(1 / discount_factor, periods_per_year)
    return float(growth - 1)
