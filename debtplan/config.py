"""
Configuration management module for DebtPlan.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation, and serialization. Covers debt files, planner
requests and environment-driven application settings.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: Easy conversion to/from JSON for debt files
- Environment-aware: Supports .env files and DEBTPLAN_* variables

Example
-------
>>> from debtplan.config import DebtConfig, PlannerConfig
>>> debt = DebtConfig(name="Visa", amount=2_500, interest_rate=19.99, min_payment=75)
>>> request = PlannerConfig(strategy="snowball", monthly_budget=400)
>>>
>>> # Serialize to dict/JSON
>>> request.model_dump()
{'strategy': 'snowball', 'monthly_budget': 400.0, 'month_cap': 600}
"""

from __future__ import annotations
from typing import Optional, Literal, List

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_STRATEGY, MAX_INTEREST_RATE, MAX_PAYOFF_MONTHS

__all__ = [
    "DebtConfig",
    "DebtFileConfig",
    "PlannerConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Debt Configuration
# ---------------------------------------------------------------------------

class DebtConfig(BaseModel):
    """
    Validated debt record, as read from a debt file.

    Enforces the same rules as the debt entry form: a non-blank name, a
    strictly positive amount, an APR within [0, 100] and a non-negative
    minimum payment. camelCase aliases (interestRate, minPayment,
    remainingAmount) are accepted on input.

    Examples
    --------
    >>> DebtConfig.model_validate(
    ...     {"name": "Visa", "amount": 2500, "interestRate": 19.99, "minPayment": 75}
    ... ).interest_rate
    19.99
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", populate_by_name=True, allow_inf_nan=False
    )

    id: Optional[str] = Field(
        default=None,
        description="Opaque identifier (generated from position when absent)"
    )
    name: str = Field(
        min_length=1,
        max_length=100,
        description="Display label"
    )
    amount: float = Field(
        gt=0,
        description="Outstanding principal"
    )
    interest_rate: float = Field(
        ge=0,
        le=MAX_INTEREST_RATE,
        alias="interestRate",
        description="Nominal annual percentage rate (e.g. 19.99)"
    )
    min_payment: float = Field(
        default=0.0,
        ge=0,
        alias="minPayment",
        description="Minimum monthly payment"
    )
    description: str = Field(
        default="",
        max_length=500,
        description="Free-text note"
    )
    remaining_amount: Optional[float] = Field(
        default=None,
        ge=0,
        alias="remainingAmount",
        description="Balance still owed according to storage"
    )

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v):
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("min_payment", mode="before")
    @classmethod
    def default_missing_min_payment(cls, v):
        """Treat null/empty minimum payments as 0."""
        if v is None or v == "":
            return 0.0
        return v


class DebtFileConfig(BaseModel):
    """Top-level structure of a debt file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_version: str = Field(
        default="0.1.0",
        description="Debt file schema version"
    )
    debts: List[DebtConfig] = Field(
        default_factory=list,
        description="Debts to plan"
    )


# ---------------------------------------------------------------------------
# Planner Configuration
# ---------------------------------------------------------------------------

class PlannerConfig(BaseModel):
    """
    Configuration for one planner run.

    Attributes
    ----------
    strategy : str
        "avalanche" (highest APR first) or "snowball" (smallest balance first).
    monthly_budget : float
        Total monthly payment across all debts.
    month_cap : int
        Non-convergence guard per debt (1-1200 months).

    Examples
    --------
    >>> config = PlannerConfig(strategy="avalanche", monthly_budget=500)
    >>> config.month_cap
    600
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    strategy: Literal["avalanche", "snowball"] = Field(
        default=DEFAULT_STRATEGY,
        description="Repayment strategy"
    )
    monthly_budget: float = Field(
        default=0.0,
        ge=0,
        description="Total monthly payment budget"
    )
    month_cap: int = Field(
        default=MAX_PAYOFF_MONTHS,
        ge=1,
        le=1200,
        description="Maximum simulated months per debt"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with DEBTPLAN_ (e.g., DEBTPLAN_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging)
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    default_strategy : str
        Strategy used by the CLI when --strategy is not given
    currency_symbol : str
        Symbol used when formatting amounts

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'

    # With .env file:
    # DEBTPLAN_DEFAULT_STRATEGY=snowball
    >>> settings = AppSettings(_env_file=".env")
    >>> settings.default_strategy
    'snowball'
    """

    model_config = SettingsConfigDict(
        env_prefix="DEBTPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    default_strategy: Literal["avalanche", "snowball"] = Field(
        default=DEFAULT_STRATEGY,
        description="Default repayment strategy"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol for formatted output"
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level
