"""Tests for the main LoanCostCalculator class."""

import math
from dataclasses import replace

import pytest

from loan_cost import LoanCostCalculator, LoanTerms, compute_loan_output


class TestLoanCostCalculatorInit:
    """Tests for LoanCostCalculator initialization."""

    def test_init_valid_period_type(self) -> None:
        """Test initialization with every period template."""
        expected = {"monthly": 12, "quarterly": 4, "semiannual": 2, "annual": 1}
        for period_type, periods_per_year in expected.items():
            calculator = LoanCostCalculator(period_type=period_type)
            assert calculator.period_type == period_type
            assert calculator.amortization_engine.periods_per_year == periods_per_year
            assert calculator.rate_solver.periods_per_year == periods_per_year

    def test_init_invalid_period_type(self) -> None:
        """Test initialization with invalid period type raises error."""
        with pytest.raises(ValueError, match="Unknown period_type"):
            LoanCostCalculator(period_type="weekly")

    def test_solver_defaults(self) -> None:
        """Test default solver settings are applied."""
        solver = LoanCostCalculator().rate_solver
        assert solver.initial_guess == 0.99
        assert solver.tolerance == 1e-7
        assert solver.max_iterations == 100

    def test_solver_overrides(self) -> None:
        """Test solver settings can be overridden."""
        calculator = LoanCostCalculator(solver_config={"max_iterations": 20})
        assert calculator.rate_solver.max_iterations == 20
        assert calculator.rate_solver.tolerance == 1e-7

    def test_unknown_solver_setting(self) -> None:
        """Test unknown solver setting raises error."""
        with pytest.raises(ValueError, match="Unknown solver settings"):
            LoanCostCalculator(solver_config={"method": "brentq"})


class TestLoanCostCalculatorCompute:
    """Tests for LoanCostCalculator.compute_loan_output()."""

    @pytest.fixture
    def calculator(self) -> LoanCostCalculator:
        """Create monthly LoanCostCalculator instance."""
        return LoanCostCalculator()

    @pytest.fixture
    def mortgage_terms(self) -> LoanTerms:
        """Create 200k mortgage over 20 years with fees and insurance."""
        return LoanTerms(
            principal=200000,
            annual_rate=0.035,
            periods=240,
            initial_fees=2500,
            insurance_cost=10000,
        )

    def test_mortgage_totals(
        self, calculator: LoanCostCalculator, mortgage_terms: LoanTerms
    ) -> None:
        """Test aggregate figures for the reference mortgage."""
        result = calculator.compute_loan_output(mortgage_terms)

        assert result.periodic_installment_without_insurance == pytest.approx(
            1159.92, abs=0.01
        )
        assert result.total_interest == pytest.approx(78380.67, abs=0.05)
        assert result.total_cost_without_insurance == pytest.approx(80880.67, abs=0.05)
        assert result.total_cost == pytest.approx(90880.67, abs=0.05)
        # (200000 + 78380.67 + 10000) / 240
        assert result.full_periodic_installment == pytest.approx(1201.59, abs=0.01)

    def test_mortgage_effective_rates(
        self, calculator: LoanCostCalculator, mortgage_terms: LoanTerms
    ) -> None:
        """Test effective rates exceed the nominal rate."""
        result = calculator.compute_loan_output(mortgage_terms)

        assert result.has_effective_rate
        assert result.effective_annual_rate > mortgage_terms.annual_rate
        assert result.effective_insurance_annual_rate > 0
        assert result.effective_insurance_annual_rate < result.effective_annual_rate

    def test_total_cost_ordering(self, calculator: LoanCostCalculator) -> None:
        """Test total cost without insurance never exceeds total cost."""
        for insurance_cost in [0, 1, 500, 25000]:
            terms = LoanTerms(80000, 0.04, 120, 1000, insurance_cost)
            result = calculator.compute_loan_output(terms)
            assert result.total_cost_without_insurance <= result.total_cost

    def test_zero_rate(self, calculator: LoanCostCalculator) -> None:
        """Test interest-free loan without costs."""
        result = calculator.compute_loan_output(
            LoanTerms(principal=12000, annual_rate=0, periods=12)
        )

        assert result.periodic_installment_without_insurance == 1000
        assert result.full_periodic_installment == 1000
        assert result.total_interest == 0
        assert result.total_cost == 0
        assert result.effective_annual_rate == pytest.approx(0.0, abs=1e-9)
        assert result.effective_insurance_annual_rate == 0.0

    def test_insurance_decomposition(
        self, calculator: LoanCostCalculator, mortgage_terms: LoanTerms
    ) -> None:
        """Test insurance share equals the rate difference with no insurance."""
        with_insurance = calculator.compute_loan_output(mortgage_terms)
        without_insurance = calculator.compute_loan_output(
            replace(mortgage_terms, insurance_cost=0)
        )

        assert without_insurance.effective_insurance_annual_rate == 0.0
        assert with_insurance.effective_insurance_annual_rate == pytest.approx(
            with_insurance.effective_annual_rate
            - without_insurance.effective_annual_rate,
            abs=1e-12,
        )

    def test_idempotent(
        self, calculator: LoanCostCalculator, mortgage_terms: LoanTerms
    ) -> None:
        """Test repeated calls give identical output."""
        first = calculator.compute_loan_output(mortgage_terms)
        second = calculator.compute_loan_output(mortgage_terms)
        assert first == second
        assert first == compute_loan_output(mortgage_terms)

    def test_monotonic_in_rate(self, calculator: LoanCostCalculator) -> None:
        """Test higher nominal rate increases interest and effective rate."""
        results = [
            calculator.compute_loan_output(LoanTerms(100000, rate, 180, 1000, 2000))
            for rate in [0.01, 0.02, 0.04, 0.08]
        ]
        for lower, higher in zip(results, results[1:]):
            assert higher.total_interest > lower.total_interest
            assert (
                higher.periodic_installment_without_insurance
                > lower.periodic_installment_without_insurance
            )
            assert higher.effective_annual_rate > lower.effective_annual_rate

    def test_non_convergence_propagates_nan(
        self, calculator: LoanCostCalculator
    ) -> None:
        """Test degenerate cash flows yield NaN rates instead of raising."""
        # No principal: fees are the only cash flow, installment is zero
        result = calculator.compute_loan_output(
            LoanTerms(principal=0, annual_rate=0.05, periods=12, initial_fees=100)
        )

        assert not result.has_effective_rate
        assert math.isnan(result.effective_annual_rate)
        assert math.isnan(result.effective_insurance_annual_rate)
        assert result.total_cost == 100

    def test_iteration_cap_propagates_nan(self, mortgage_terms: LoanTerms) -> None:
        """Test solver iteration cap surfaces as NaN."""
        calculator = LoanCostCalculator(solver_config={"max_iterations": 1})
        result = calculator.compute_loan_output(mortgage_terms)

        assert math.isnan(result.effective_annual_rate)
        assert math.isnan(result.effective_insurance_annual_rate)
        assert result.total_interest == pytest.approx(78380.67, abs=0.05)

    def test_single_period(self, calculator: LoanCostCalculator) -> None:
        """Test one-period loan in both engines."""
        result = calculator.compute_loan_output(LoanTerms(1000, 0.12, 1))

        assert result.periodic_installment_without_insurance == pytest.approx(1010.0)
        assert result.total_interest == pytest.approx(10.0)
        assert result.effective_annual_rate == pytest.approx(1.01**12 - 1, rel=1e-9)

    def test_to_dict(
        self, calculator: LoanCostCalculator, mortgage_terms: LoanTerms
    ) -> None:
        """Test breakdown serializes to the seven output fields."""
        result = calculator.compute_loan_output(mortgage_terms).to_dict()

        assert set(result) == {
            "periodic_installment_without_insurance",
            "full_periodic_installment",
            "total_interest",
            "total_cost_without_insurance",
            "total_cost",
            "effective_annual_rate",
            "effective_insurance_annual_rate",
        }
