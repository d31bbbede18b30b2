"""Main LoanCostCalculator class orchestrating all calculations."""

import logging
from typing import Any

from loan_cost.core.amortization_engine import AmortizationEngine
from loan_cost.core.effective_rate_solver import EffectiveRateSolver
from loan_cost.models.loan_terms import LoanCostBreakdown, LoanTerms
from loan_cost.templates.period_templates import PERIOD_TEMPLATES, SOLVER_DEFAULTS

logger = logging.getLogger(__name__)


class LoanCostCalculator:
    """
    Main orchestrator for loan cost calculations.

    Runs the amortization engine once and the effective rate solver twice,
    once with and once without the insurance cost, so that the share of
    the effective rate attributable to insurance can be reported.

    Args:
        period_type: Base period of LoanTerms.periods ('monthly', 'quarterly',
            'semiannual', 'annual').
        solver_config: Optional overrides for SOLVER_DEFAULTS.

    Example:
        >>> calculator = LoanCostCalculator()
        >>> terms = LoanTerms(200000, 0.035, 240, 2500, 10000)
        >>> breakdown = calculator.compute_loan_output(terms)
        >>> round(breakdown.periodic_installment_without_insurance, 2)
        1159.92
    """

    def __init__(
        self,
        period_type: str = "monthly",
        solver_config: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the calculator with a period template and solver settings."""
        if period_type not in PERIOD_TEMPLATES:
            raise ValueError(
                f"Unknown period_type '{period_type}'. "
                f"Available types: {list(PERIOD_TEMPLATES.keys())}"
            )

        self.period_type = period_type
        self.template = PERIOD_TEMPLATES[period_type]
        self.solver_config = self._apply_solver_defaults(solver_config or {})

        periods_per_year = self.template["periods_per_year"]
        self.amortization_engine = AmortizationEngine(
            periods_per_year=periods_per_year,
            compound=self.template["compound_rate_conversion"],
        )
        self.rate_solver = EffectiveRateSolver(
            periods_per_year=periods_per_year, **self.solver_config
        )

    def compute_loan_output(self, terms: LoanTerms) -> LoanCostBreakdown:
        """
        Calculate the full cost breakdown of a loan.

        Args:
            terms: Validated loan terms.

        Returns:
            LoanCostBreakdown. Effective rates are NaN when the solver does
            not converge.
        """
        installment, total_interest = self.amortization_engine.compute_installment(
            principal=terms.principal,
            annual_rate=terms.annual_rate,
            periods=terms.periods,
        )

        total_cost_without_insurance = terms.initial_fees + total_interest
        total_cost = total_cost_without_insurance + terms.insurance_cost
        full_installment = (
            terms.principal + total_interest + terms.insurance_cost
        ) / terms.periods

        all_in = self.rate_solver.solve_effective_annual_rate(
            periods=terms.periods,
            principal=terms.principal,
            initial_fees=terms.initial_fees,
            total_cost=total_cost,
        )
        without_insurance = self.rate_solver.solve_effective_annual_rate(
            periods=terms.periods,
            principal=terms.principal,
            initial_fees=terms.initial_fees,
            total_cost=total_cost_without_insurance,
        )

        # NaN on either side propagates to the insurance share
        effective_rate = all_in.rate_or_nan
        insurance_rate = effective_rate - without_insurance.rate_or_nan

        logger.debug(
            "Loan output: installment=%.2f total_interest=%.2f total_cost=%.2f "
            "effective_rate=%s",
            installment,
            total_interest,
            total_cost,
            effective_rate,
        )

        return LoanCostBreakdown(
            periodic_installment_without_insurance=installment,
            full_periodic_installment=full_installment,
            total_interest=total_interest,
            total_cost_without_insurance=total_cost_without_insurance,
            total_cost=total_cost,
            effective_annual_rate=effective_rate,
            effective_insurance_annual_rate=insurance_rate,
        )

    @staticmethod
    def _apply_solver_defaults(overrides: dict[str, Any]) -> dict[str, Any]:
        """
        Merge user overrides over SOLVER_DEFAULTS.

        Args:
            overrides: Solver settings provided by the caller.

        Returns:
            Complete solver settings.

        Raises:
            ValueError: If an override names an unknown setting.
        """
        unknown = set(overrides) - set(SOLVER_DEFAULTS)
        if unknown:
            raise ValueError(
                f"Unknown solver settings {sorted(unknown)}. "
                f"Available settings: {list(SOLVER_DEFAULTS.keys())}"
            )
        return {**SOLVER_DEFAULTS, **overrides}


_default_calculator = LoanCostCalculator()


def compute_loan_output(terms: LoanTerms) -> LoanCostBreakdown:
    """Calculate a loan cost breakdown using monthly periods and default solver settings."""
    return _default_calculator.compute_loan_output(terms)
