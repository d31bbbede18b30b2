"""User-facing loan input and its conversion into LoanTerms."""

import math
from dataclasses import dataclass, fields
from typing import Any

from loan_cost.models.loan_terms import LoanTerms


class LoanInputError(ValueError):
    """
    Raised when user-entered loan fields fail validation.

    Attributes:
        errors: Mapping of field name to a description of the problem.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        details = "; ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid loan input ({details})")


@dataclass(frozen=True)
class LoanInput:
    """
    Loan fields as a user enters them.

    The rate is a percentage (3.5 for 3.5%) rather than a fraction. Use
    to_terms() to obtain the canonical LoanTerms for the calculator.

    Args:
        principal: Amount borrowed.
        annual_rate_percentage: Nominal annual rate in percent, 0 to 100.
        periods: Loan duration in months.
        initial_fees: Upfront fees (banking fees, etc.).
        insurance_cost: Total insurance cost over the loan duration.
    """

    principal: float
    annual_rate_percentage: float
    periods: int
    initial_fees: float = 0.0
    insurance_cost: float = 0.0

    @classmethod
    def default(cls) -> "LoanInput":
        """Return the sample loan shown when no input has been entered."""
        return cls(
            principal=200_000,
            annual_rate_percentage=3.5,
            periods=240,
            initial_fees=2500,
            insurance_cost=10_000,
        )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "LoanInput":
        """
        Build a LoanInput from raw values such as parsed form fields.

        Values may be numbers or numeric strings. Optional fields default
        to zero when absent.

        Args:
            data: Mapping of field name to raw value.

        Returns:
            Unvalidated LoanInput.

        Raises:
            LoanInputError: If a required field is missing or a value is
                not numeric.
        """
        errors: dict[str, str] = {}
        values: dict[str, float] = {}

        for field in fields(cls):
            if field.name not in data or data[field.name] in (None, ""):
                if field.name in ("initial_fees", "insurance_cost"):
                    values[field.name] = 0.0
                else:
                    errors[field.name] = "is required"
                continue
            try:
                values[field.name] = float(data[field.name])
            except (TypeError, ValueError):
                errors[field.name] = f"must be a number, got {data[field.name]!r}"

        if errors:
            raise LoanInputError(errors)

        periods = values["periods"]
        if math.isfinite(periods) and periods.is_integer():
            values["periods"] = int(periods)

        return cls(**values)

    def validate(self) -> None:
        """
        Check every field against its allowed range.

        Raises:
            LoanInputError: Listing all failing fields.
        """
        errors: dict[str, str] = {}

        for name in ("principal", "initial_fees", "insurance_cost"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                errors[name] = "must be a non-negative number"

        rate = self.annual_rate_percentage
        if not math.isfinite(rate) or not 0 <= rate <= 100:
            errors["annual_rate_percentage"] = "must be between 0 and 100"

        if (
            isinstance(self.periods, bool)
            or not isinstance(self.periods, int)
            or self.periods < 1
        ):
            errors["periods"] = "must be a positive integer"

        if errors:
            raise LoanInputError(errors)

    def to_terms(self) -> LoanTerms:
        """
        Validate and convert into canonical LoanTerms.

        Returns:
            LoanTerms with the rate expressed as a fraction.

        Raises:
            LoanInputError: If validation fails.
        """
        self.validate()
        return LoanTerms(
            principal=float(self.principal),
            annual_rate=self.annual_rate_percentage / 100,
            periods=self.periods,
            initial_fees=float(self.initial_fees),
            insurance_cost=float(self.insurance_cost),
        )
