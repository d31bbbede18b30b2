"""Utility functions for loan cost calculations."""

from loan_cost.utils.financial_utils import (
    annualize_discount_factor,
    calculate_annuity_payment,
    calculate_discount_factors,
    calculate_periodic_rate,
)

__all__ = [
    "annualize_discount_factor",
    "calculate_annuity_payment",
    "calculate_discount_factors",
    "calculate_periodic_rate",
]
