"""Core loan cost components."""

from loan_cost.core.amortization_engine import AmortizationEngine, InstallmentResult
from loan_cost.core.effective_rate_solver import (
    Converged,
    EffectiveRateSolver,
    NonConvergenceReason,
    NotConverged,
)
from loan_cost.core.loan_cost_calculator import LoanCostCalculator, compute_loan_output

__all__ = [
    "AmortizationEngine",
    "InstallmentResult",
    "EffectiveRateSolver",
    "Converged",
    "NotConverged",
    "NonConvergenceReason",
    "LoanCostCalculator",
    "compute_loan_output",
]
