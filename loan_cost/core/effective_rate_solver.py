"""Effective annual rate solver based on Newton-Raphson root finding."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import numpy as np

from loan_cost.utils.financial_utils import (
    annualize_discount_factor,
    calculate_discount_factors,
)

logger = logging.getLogger(__name__)


class NonConvergenceReason(Enum):
    """Why the root finder gave up."""

    ZERO_DERIVATIVE = "zero_derivative"
    MAX_ITERATIONS = "max_iterations"
    DIVERGED = "diverged"
    NON_POSITIVE_ROOT = "non_positive_root"


class NonConvergenceError(Exception):
    """Raised by newton_raphson when no root is found."""

    def __init__(
        self,
        reason: NonConvergenceReason,
        iterations: int,
        last_estimate: float,
    ) -> None:
        self.reason = reason
        self.iterations = iterations
        self.last_estimate = last_estimate
        super().__init__(
            f"Newton-Raphson stopped after {iterations} iterations "
            f"({reason.value}, last estimate {last_estimate!r})"
        )


@dataclass(frozen=True)
class Converged:
    """Solver outcome carrying the discount factor and its annual rate."""

    discount_factor: float
    annual_rate: float
    iterations: int

    @property
    def converged(self) -> bool:
        """Always True for a solved rate."""
        return True

    @property
    def rate_or_nan(self) -> float:
        """The effective annual rate."""
        return self.annual_rate


@dataclass(frozen=True)
class NotConverged:
    """Solver outcome when no usable discount factor was found."""

    reason: NonConvergenceReason
    iterations: int
    last_estimate: float

    @property
    def converged(self) -> bool:
        """Always False when no rate was found."""
        return False

    @property
    def rate_or_nan(self) -> float:
        """NaN, since the rate is unknown."""
        return float("nan")


SolverResult = Converged | NotConverged


def newton_raphson(
    func: Callable[[float], tuple[float, float]],
    x0: float,
    tolerance: float = 1e-7,
    max_iterations: int = 100,
) -> tuple[float, int]:
    """
    Find a root of func with the Newton-Raphson method.

    Iteration stops as soon as |f(x)| < tolerance. Unlike
    scipy.optimize.newton the stopping rule is on the function value, not
    on the step size.

    Args:
        func: Returns (f(x), f'(x)) for a candidate x.
        x0: Starting estimate.
        tolerance: Threshold for both |f(x)| and the flat-derivative guard.
        max_iterations: Maximum number of function evaluations.

    Returns:
        Tuple of (root, number of Newton steps taken).

    Raises:
        NonConvergenceError: If the derivative vanishes, the estimate stops
            being finite, or max_iterations is reached.
    """
    x = x0
    for iteration in range(max_iterations):
        value, derivative = func(x)
        if abs(value) < tolerance:
            return x, iteration
        if abs(derivative) < tolerance:
            raise NonConvergenceError(
                NonConvergenceReason.ZERO_DERIVATIVE, iteration, x
            )
        x -= value / derivative
        if not math.isfinite(x):
            raise NonConvergenceError(
                NonConvergenceReason.DIVERGED, iteration + 1, x
            )
    raise NonConvergenceError(NonConvergenceReason.MAX_ITERATIONS, max_iterations, x)


class EffectiveRateSolver:
    """
    Solves for the effective annual rate of a level payment stream.

    Finds the per-period discount factor x at which the present value of
    the installments, plus the upfront fees, equals the principal:

        A × Σ x^i + fees - principal = 0,   i = 1..periods

    and annualizes it as (1/x)^periods_per_year - 1.

    Args:
        periods_per_year: Number of base periods in a year (12 for months).
        initial_guess: Starting discount factor for Newton-Raphson.
        tolerance: Convergence threshold on |g(x)| and |g'(x)|.
        max_iterations: Iteration cap.
    """

    def __init__(
        self,
        periods_per_year: int = 12,
        initial_guess: float = 0.99,
        tolerance: float = 1e-7,
        max_iterations: int = 100,
    ) -> None:
        """Initialize solver settings."""
        self.periods_per_year = periods_per_year
        self.initial_guess = initial_guess
        self.tolerance = tolerance
        self.max_iterations = max_iterations

    def solve_effective_annual_rate(
        self,
        periods: int,
        principal: float,
        initial_fees: float,
        total_cost: float,
    ) -> SolverResult:
        """
        Compute the effective annual rate of a loan.

        The installments are taken as the constant amount obtained by
        spreading principal plus all costs except the upfront fees evenly
        over the term.

        Args:
            periods: Loan term in periods (>= 1).
            principal: Amount borrowed.
            initial_fees: Fees paid at origination.
            total_cost: All disclosed costs (fees, interest, insurance, ...).

        Returns:
            Converged with the discount factor and annual rate, or
            NotConverged with the reason. Never raises for numeric failure.
        """
        total_reimbursed = total_cost + principal
        average_installment = (total_reimbursed - initial_fees) / periods
        objective = self._cash_flow_objective(
            average_installment, initial_fees - principal, periods
        )

        try:
            with np.errstate(over="ignore", invalid="ignore"):
                discount_factor, iterations = newton_raphson(
                    objective,
                    self.initial_guess,
                    tolerance=self.tolerance,
                    max_iterations=self.max_iterations,
                )
        except NonConvergenceError as e:
            logger.warning("Failed to compute effective annual rate: %s", e)
            return NotConverged(e.reason, e.iterations, e.last_estimate)

        if discount_factor <= 0:
            logger.warning(
                "Effective rate root %r is not a valid discount factor",
                discount_factor,
            )
            return NotConverged(
                NonConvergenceReason.NON_POSITIVE_ROOT, iterations, discount_factor
            )

        logger.debug(
            "Effective rate converged in %d iterations (discount factor %.10f)",
            iterations,
            discount_factor,
        )
        return Converged(
            discount_factor=discount_factor,
            annual_rate=annualize_discount_factor(
                discount_factor, self.periods_per_year
            ),
            iterations=iterations,
        )

    @staticmethod
    def _cash_flow_objective(
        average_installment: float,
        net_upfront: float,
        periods: int,
    ) -> Callable[[float], tuple[float, float]]:
        """
        Build g(x) and g'(x) for the cash-flow balance polynomial.

        Args:
            average_installment: Level payment made each period.
            net_upfront: Upfront fees minus principal.
            periods: Number of payments.

        Returns:
            Function mapping x to (g(x), g'(x)).
        """
        exponents = np.arange(1, periods + 1)

        def objective(x: float) -> tuple[float, float]:
            powers = calculate_discount_factors(x, periods)
            value = average_installment * float(np.sum(powers)) + net_upfront
            derivative = average_installment * float(
                np.sum(exponents * x ** (exponents - 1))
            )
            return value, derivative

        return objective
