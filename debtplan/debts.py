"""
Debt records and portfolio overview for DebtPlan.

Purpose
-------
Defines the immutable Debt record consumed by the planner, the upstream
input-validation contract applied before debts are stored, and the
DebtPortfolio overview used by dashboards (total debt, monthly interest
cost, high-interest count, payoff progress).

Design principles
-----------------
- Frozen dataclasses: the planner never mutates caller-owned debts
- Storage records are coerced, not rejected (missing min payment → 0)
- Validation is a separate, explicit step owned by the input layer

Example
-------
>>> from debtplan.debts import Debt, DebtPortfolio
>>> card = Debt(id="visa", name="Visa", amount=2_500, interest_rate=19.99, min_payment=75)
>>> loan = Debt.from_record({"name": "Car", "amount": "8000", "interestRate": "6.5"})
>>> DebtPortfolio([card, loan]).total_debt
10500.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .constants import HIGH_INTEREST_THRESHOLD, MAX_INTEREST_RATE
from .exceptions import ValidationError
from .utils import apr_to_monthly, check_non_negative, coerce_amount

__all__ = [
    "Debt",
    "DebtPortfolio",
    "validate_debt_input",
    "as_debts",
]


def _pick(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


@dataclass(frozen=True)
class Debt:
    """
    A single outstanding debt.

    Parameters
    ----------
    id : str
        Opaque unique identifier (storage document id).
    name : str
        Display label.
    amount : float
        Outstanding principal. Must be non-negative.
    interest_rate : float
        Nominal annual percentage rate (e.g. 19.99). Must be non-negative.
    min_payment : float, default 0.0
        Minimum required monthly payment. Must be non-negative.
    description : str, default ""
        Free-text note shown next to the debt.
    remaining_amount : float, optional
        Balance still owed according to storage; only used for progress
        metrics. None means nothing has been paid yet.

    Raises
    ------
    ValidationError
        If amount, interest_rate or min_payment is negative or not finite.
    """
    id: str
    name: str
    amount: float
    interest_rate: float
    min_payment: float = 0.0
    description: str = ""
    remaining_amount: Optional[float] = None

    def __post_init__(self) -> None:
        for field_name in ("amount", "interest_rate", "min_payment"):
            value = getattr(self, field_name)
            try:
                check_non_negative(field_name, value)
            except ValueError as e:
                raise ValidationError(str(e)) from e
            if not math.isfinite(value):
                raise ValidationError(f"{field_name} must be finite (got {value}).")

    @classmethod
    def from_record(cls, record: Mapping[str, Any], *, default_id: Optional[str] = None) -> "Debt":
        """
        Build a Debt from a storage-style record.

        Accepts camelCase (interestRate, minPayment, remainingAmount) or
        snake_case keys. Numeric fields that are missing or non-numeric
        become 0; remaining_amount stays None when absent.
        """
        name = str(record.get("name") or "")
        debt_id = record.get("id")
        if debt_id is None or debt_id == "":
            debt_id = default_id if default_id is not None else name
        remaining = _pick(record, "remainingAmount", "remaining_amount")
        return cls(
            id=str(debt_id),
            name=name,
            amount=coerce_amount(record.get("amount")),
            interest_rate=coerce_amount(_pick(record, "interestRate", "interest_rate")),
            min_payment=coerce_amount(_pick(record, "minPayment", "min_payment")),
            description=str(record.get("description") or ""),
            remaining_amount=None if remaining is None else coerce_amount(remaining),
        )

    @property
    def monthly_rate(self) -> float:
        """Simple monthly interest rate (APR / 100 / 12)."""
        return apr_to_monthly(self.interest_rate)

    @property
    def monthly_interest(self) -> float:
        """Interest accrued on the current amount over one month."""
        return self.amount * self.monthly_rate

    def to_record(self) -> Dict[str, Any]:
        """Return the storage-style (camelCase) representation."""
        record: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "interestRate": self.interest_rate,
            "minPayment": self.min_payment,
        }
        if self.description:
            record["description"] = self.description
        if self.remaining_amount is not None:
            record["remainingAmount"] = self.remaining_amount
        return record


def as_debts(debts: Iterable[Any]) -> List[Debt]:
    """Normalize an iterable of Debt objects and/or mappings into Debts."""
    out: List[Debt] = []
    for i, item in enumerate(debts):
        if isinstance(item, Debt):
            out.append(item)
        elif isinstance(item, Mapping):
            out.append(Debt.from_record(item, default_id=f"debt-{i + 1}"))
        else:
            raise TypeError(
                f"Expected Debt or mapping at position {i}, got {type(item).__name__}"
            )
    return out


def validate_debt_input(
    name: Any,
    amount: Any,
    interest_rate: Any,
    min_payment: Any = None,
) -> None:
    """
    Apply the input-validation contract for a new or updated debt.

    This runs in the input layer before a debt is stored; the planner
    assumes it has already happened and never calls it.

    Raises
    ------
    ValidationError
        If the name is blank, the amount is not > 0, the interest rate is
        missing or outside [0, 100], or the minimum payment is negative.
    """
    if not str(name or "").strip():
        raise ValidationError("Please enter a debt name")

    amount_value = coerce_amount(amount, default=float("nan"))
    if not amount_value > 0:
        raise ValidationError(f"amount must be > 0, got {amount!r}")

    rate_value = coerce_amount(interest_rate, default=float("nan"))
    if not 0 <= rate_value <= MAX_INTEREST_RATE:
        raise ValidationError(
            f"interest_rate must be within [0, {MAX_INTEREST_RATE:g}], got {interest_rate!r}"
        )

    if min_payment not in (None, ""):
        min_value = coerce_amount(min_payment, default=float("nan"))
        if not min_value >= 0:
            raise ValidationError(f"min_payment must be >= 0, got {min_payment!r}")


class DebtPortfolio:
    """
    Read-only overview of a debt list.

    Mirrors the debt dashboard cards: total debt, monthly interest cost,
    number of high-interest debts and overall payoff progress.

    Parameters
    ----------
    debts : iterable of Debt or mapping
        Debts to summarize. Mappings go through Debt.from_record.

    Examples
    --------
    >>> portfolio = DebtPortfolio([
    ...     Debt(id="a", name="Card", amount=1_000, interest_rate=24),
    ... ])
    >>> portfolio.monthly_interest
    20.0
    """

    def __init__(self, debts: Iterable[Any]):
        self.debts: List[Debt] = as_debts(debts)

    def __len__(self) -> int:
        return len(self.debts)

    @property
    def total_debt(self) -> float:
        return float(sum(d.amount for d in self.debts))

    @property
    def total_remaining(self) -> float:
        return float(sum(
            d.amount if d.remaining_amount is None else d.remaining_amount
            for d in self.debts
        ))

    @property
    def monthly_interest(self) -> float:
        return float(sum(d.monthly_interest for d in self.debts))

    @property
    def total_min_payments(self) -> float:
        return float(sum(d.min_payment for d in self.debts))

    def high_interest_debts(self, threshold: float = HIGH_INTEREST_THRESHOLD) -> List[Debt]:
        """Debts whose APR is strictly above *threshold*."""
        return [d for d in self.debts if d.interest_rate > threshold]

    @property
    def progress(self) -> float:
        """Percent of the total debt already paid off (0 when no debt)."""
        total = self.total_debt
        if total <= 0:
            return 0.0
        return (total - self.total_remaining) / total * 100.0

    def summary(self) -> Dict[str, Any]:
        return {
            "count": len(self.debts),
            "total_debt": self.total_debt,
            "total_remaining": self.total_remaining,
            "monthly_interest": self.monthly_interest,
            "total_min_payments": self.total_min_payments,
            "high_interest_count": len(self.high_interest_debts()),
            "progress": self.progress,
        }

    def __repr__(self) -> str:
        return f"DebtPortfolio(n={len(self.debts)}, total_debt={self.total_debt:,.2f})"
