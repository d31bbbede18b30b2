"""Loan input and result value types."""

from loan_cost.models.loan_terms import LoanTerms, LoanCostBreakdown
from loan_cost.models.loan_input import LoanInput, LoanInputError

__all__ = [
    "LoanTerms",
    "LoanCostBreakdown",
    "LoanInput",
    "LoanInputError",
]
