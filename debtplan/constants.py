"""
Global constants for DebtPlan.

Purpose
-------
Centralizes default values and magic numbers used throughout the DebtPlan
codebase, so that thresholds shared by the planner, the advisor and the
CLI stay consistent.

Usage
-----
>>> from debtplan.constants import MAX_PAYOFF_MONTHS, DEFAULT_STRATEGY
>>>
>>> plan = compute_plan(debts, DEFAULT_STRATEGY, 500, month_cap=MAX_PAYOFF_MONTHS)

Categories
----------
- Planner: payoff cap, strategies
- Advisor: recommendation and insight thresholds
- Validation: interest rate bounds
- Plotting: figure sizes, line widths
"""

from typing import Tuple

__all__ = [
    # Planner
    "MAX_PAYOFF_MONTHS",
    "MONTHS_PER_YEAR",
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    # Advisor
    "AVALANCHE_RATE_THRESHOLD",
    "SNOWBALL_BALANCE_THRESHOLD",
    "HIGH_INTEREST_THRESHOLD",
    "LOW_PROGRESS_THRESHOLD",
    # Validation
    "MAX_INTEREST_RATE",
    # Plotting
    "DEFAULT_FIGSIZE",
    "DEFAULT_FIGSIZE_WIDE",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_ALPHA_BARS",
]


# =============================================================================
# Planner Defaults
# =============================================================================

MAX_PAYOFF_MONTHS: int = 600
"""Hard cap on simulated months per debt (50 years).

Stops the amortization loop when the payment never covers the interest.
"""

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (nominal APR to monthly rate conversion)."""

STRATEGIES: Tuple[str, ...] = ("avalanche", "snowball")
"""Supported repayment strategies."""

DEFAULT_STRATEGY: str = "avalanche"
"""Default repayment strategy."""


# =============================================================================
# Advisor Thresholds
# =============================================================================

AVALANCHE_RATE_THRESHOLD: float = 15.0
"""Any debt above this APR (percent) makes avalanche the recommendation."""

SNOWBALL_BALANCE_THRESHOLD: float = 1000.0
"""Any debt below this balance makes snowball the recommendation."""

HIGH_INTEREST_THRESHOLD: float = 10.0
"""APR (percent) above which a debt counts as high-interest in overviews."""

LOW_PROGRESS_THRESHOLD: float = 50.0
"""Portfolio progress (percent) below which a debt-management insight is shown."""


# =============================================================================
# Validation
# =============================================================================

MAX_INTEREST_RATE: float = 100.0
"""Upper bound for nominal annual interest rates (percent)."""


# =============================================================================
# Plotting Defaults
# =============================================================================

DEFAULT_FIGSIZE: Tuple[int, int] = (12, 6)
"""Default figure size (width, height) in inches."""

DEFAULT_FIGSIZE_WIDE: Tuple[int, int] = (14, 5)
"""Figure size for side-by-side comparison panels."""

DEFAULT_LINEWIDTH: float = 2.0
"""Line width for balance curves."""

DEFAULT_ALPHA_BARS: float = 0.8
"""Alpha (transparency) for comparison bars."""
