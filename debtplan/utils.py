"""General utilities for DebtPlan

Contents
--------
- Validation helpers
- Numeric coercion for storage/form values
- Rate conversions (nominal APR → monthly)
- Index builders (first-of-month calendars)
- Formatters (currency, month durations)
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional

import pandas as pd

from .constants import MONTHS_PER_YEAR

__all__ = [
    # Validation
    "check_non_negative",
    # Coercion
    "coerce_amount",
    # Rates
    "apr_to_monthly",
    # Index
    "month_index",
    # Formatters
    "format_currency",
    "format_duration",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict)."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative (got {value}).")


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------

def coerce_amount(value: Any, default: float = 0.0) -> float:
    """Convert a storage/form value to float, falling back to *default*.

    None, empty strings, booleans, unparsable strings, NaN and infinities
    all map to *default*.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        out = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(out):
        return default
    return out


# ---------------------------------------------------------------------------
# Rate conversions
# ---------------------------------------------------------------------------

def apr_to_monthly(apr_percent: float) -> float:
    """Convert a nominal annual percentage rate to a simple monthly rate.

    Uses: apr / 100 / 12 (no compounding, as card issuers quote APR).
    """
    return float(apr_percent) / 100.0 / MONTHS_PER_YEAR


# ---------------------------------------------------------------------------
# Index helpers
# ---------------------------------------------------------------------------

def month_index(start: Optional[date], months: int) -> pd.DatetimeIndex:
    """Construct a first-of-month DatetimeIndex for *months* periods.

    If *start* is None, uses the current month as the first period.
    """
    if months <= 0:
        return pd.DatetimeIndex([], dtype="datetime64[ns]")
    if start is None:
        today = pd.Timestamp.today().normalize()
        first = pd.Timestamp(today.year, today.month, 1)
    else:
        first = pd.Timestamp(start.year, start.month, 1)
    return pd.date_range(start=first, periods=months, freq="MS")


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def format_currency(value: float, decimals: int = 2, symbol: str = "$") -> str:
    """
    Format a monetary value with thousands separators.

    Parameters
    ----------
    value : float
        Monetary value.
    decimals : int, default 2
        Number of decimal places to display.
    symbol : str, default '$'
        Currency symbol prefix.

    Examples
    --------
    >>> format_currency(1234.5)
    '$1,234.50'
    >>> format_currency(-80, decimals=0)
    '-$80'
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_duration(months: int) -> str:
    """Render a month count as years and months, e.g. 27 → '2y 3m'."""
    months = int(months)
    return f"{months // MONTHS_PER_YEAR}y {months % MONTHS_PER_YEAR}m"
