"""Amortization engine for fixed-installment loans."""

from typing import NamedTuple

from loan_cost.utils.financial_utils import (
    calculate_annuity_payment,
    calculate_periodic_rate,
)


class InstallmentResult(NamedTuple):
    """Periodic installment and the interest paid over the whole term."""

    installment: float
    total_interest: float


class AmortizationEngine:
    """
    Derives the fixed periodic installment of an amortizing loan.

    The annual rate is converted to a periodic rate by simple division by
    periods_per_year unless compound is set.

    Args:
        periods_per_year: Number of base periods in a year (12 for months).
        compound: Convert the annual rate with (1 + r)^(1/n) - 1.
    """

    def __init__(self, periods_per_year: int = 12, compound: bool = False) -> None:
        """Initialize amortization engine."""
        self.periods_per_year = periods_per_year
        self.compound = compound

    def compute_installment(
        self,
        principal: float,
        annual_rate: float,
        periods: int,
    ) -> InstallmentResult:
        """
        Calculate the installment and total interest of a loan.

        Args:
            principal: Amount borrowed.
            annual_rate: Nominal annual rate as a fraction.
            periods: Loan term in periods (>= 1).

        Returns:
            InstallmentResult with installment and total_interest.

        Example:
            >>> AmortizationEngine().compute_installment(12000, 0.0, 12)
            InstallmentResult(installment=1000.0, total_interest=0.0)
        """
        periodic_rate = calculate_periodic_rate(
            annual_rate, self.periods_per_year, compound=self.compound
        )

        # Zero rate would divide by zero in the annuity formula
        if periodic_rate == 0:
            return InstallmentResult(principal / periods, 0.0)

        installment = calculate_annuity_payment(principal, periodic_rate, periods)
        return InstallmentResult(installment, installment * periods - principal)
