"""Value types passed into and returned from the loan cost calculator."""

import math
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LoanTerms:
    """
    Validated numeric terms of a fixed-rate amortizing loan.

    Args:
        principal: Amount borrowed.
        annual_rate: Nominal annual interest rate as a fraction (0.035 for 3.5%).
        periods: Loan term in base periods (months unless configured otherwise).
        initial_fees: Fees paid upfront at origination.
        insurance_cost: Total insurance cost accrued over the term.

    Example:
        >>> terms = LoanTerms(
        ...     principal=200000,
        ...     annual_rate=0.035,
        ...     periods=240,
        ...     initial_fees=2500,
        ...     insurance_cost=10000,
        ... )
    """

    principal: float
    annual_rate: float
    periods: int
    initial_fees: float = 0.0
    insurance_cost: float = 0.0


@dataclass(frozen=True)
class LoanCostBreakdown:
    """
    Aggregate cost figures for a loan.

    Both effective rates are NaN when the rate solver could not converge;
    check has_effective_rate before presenting them.
    """

    periodic_installment_without_insurance: float
    full_periodic_installment: float
    total_interest: float
    total_cost_without_insurance: float
    total_cost: float
    effective_annual_rate: float
    effective_insurance_annual_rate: float

    @property
    def has_effective_rate(self) -> bool:
        """Whether the all-in effective annual rate could be determined."""
        return not math.isnan(self.effective_annual_rate)

    def to_dict(self) -> dict[str, float]:
        """Return the breakdown as a plain dictionary."""
        return asdict(self)
