"""
Custom exceptions for DebtPlan.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all DebtPlan modules. All exceptions inherit from DebtPlanError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
DebtPlanError (base)
├── ConfigurationError - Invalid configuration or settings
├── ValidationError - Debt input failing the validation contract
└── SerializationError - Unreadable or malformed debt/plan files

Usage
-----
>>> from debtplan.exceptions import ValidationError
>>>
>>> # Raise specific exception
>>> raise ValidationError("amount must be > 0, got -50.0")
>>>
>>> # Catch all DebtPlan exceptions
>>> try:
...     debts = load_debts(path)
... except DebtPlanError as e:
...     logger.error("Could not load debts: %s", e)
"""


class DebtPlanError(Exception):
    """
    Base exception for all DebtPlan errors.

    Examples
    --------
    >>> try:
    ...     plan = compute_plan(debts, "avalanche", 500)
    ... except DebtPlanError as e:
    ...     logger.error("Planning failed: %s", e)
    """
    pass


class ConfigurationError(DebtPlanError):
    """
    Invalid configuration or settings.

    Raised when planner or application configuration is invalid, such as:
    - Out-of-range payoff horizons (month_cap < 1)
    - Settings or plan requests that fail pydantic validation

    Examples
    --------
    >>> raise ConfigurationError(
    ...     f"month_cap must be >= 1, got {month_cap}. "
    ...     f"The default cap is 600 months (50 years)."
    ... )
    """
    pass


class ValidationError(DebtPlanError, ValueError):
    """
    Debt input failing the validation contract.

    Raised by the input layer when:
    - A repayment strategy name is unknown (also raised by the planner)
    - A debt name is blank
    - A debt amount is not strictly positive
    - An interest rate falls outside [0, 100]
    - A minimum payment is negative

    Subclasses ValueError so callers catching ValueError keep working.

    Examples
    --------
    >>> raise ValidationError(
    ...     f"interest_rate must be within [0, 100], got {rate}. "
    ...     f"Rates are nominal annual percentages (e.g. 19.99)."
    ... )
    """
    pass


class SerializationError(DebtPlanError):
    """
    Unreadable or malformed debt/plan files.

    Raised when a JSON file cannot be parsed or does not have the
    expected structure.

    Examples
    --------
    >>> raise SerializationError(
    ...     f"{path}: expected a list of debts or an object with a 'debts' key."
    ... )
    """
    pass
