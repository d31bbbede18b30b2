"""Period templates and solver defaults for loan cost calculations."""

from typing import Any

PERIOD_TEMPLATES: dict[str, dict[str, Any]] = {
    "monthly": {
        "periods_per_year": 12,
        "compound_rate_conversion": False,  # Lenders divide the nominal rate by 12
    },
    "quarterly": {
        "periods_per_year": 4,
        "compound_rate_conversion": False,
    },
    "semiannual": {
        "periods_per_year": 2,
        "compound_rate_conversion": False,
    },
    "annual": {
        "periods_per_year": 1,
        "compound_rate_conversion": False,
    },
}

SOLVER_DEFAULTS: dict[str, Any] = {
    "initial_guess": 0.99,  # Discount factor, i.e. roughly 1% per period
    "tolerance": 1e-7,
    "max_iterations": 100,
}
