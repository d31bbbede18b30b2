"""
Loan cost model for fixed-rate amortizing loans.

Computes, for a loan with upfront fees and an insurance cost:
- The periodic installment and total interest (closed-form annuity)
- Total cost with and without insurance
- The effective annual rate (TAEG/APR-style all-in rate) and the share of
  it attributable to insurance, solved with Newton-Raphson
"""

from loan_cost.core.loan_cost_calculator import LoanCostCalculator, compute_loan_output
from loan_cost.models.loan_terms import LoanCostBreakdown, LoanTerms
from loan_cost.models.loan_input import LoanInput, LoanInputError
from loan_cost.templates.period_templates import PERIOD_TEMPLATES

__version__ = "1.0.0"
__all__ = [
    "LoanCostCalculator",
    "compute_loan_output",
    "LoanCostBreakdown",
    "LoanTerms",
    "LoanInput",
    "LoanInputError",
    "PERIOD_TEMPLATES",
]
