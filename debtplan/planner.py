"""
Debt repayment planner for DebtPlan.

Purpose
-------
Computes a deterministic payoff schedule for a fixed set of debts under
one of two prioritization strategies, given a single monthly budget shared
across all debts.

Strategies
----------
- avalanche: highest interest rate first
- snowball:  smallest balance first

Both orderings are stable (ties keep input order) and static for the run.

Allocation model
----------------
    total_min = Σ min_payment_i
    extra     = max(0, budget - total_min)
    payment_i = min_payment_i + (extra if i is first in priority else 0)

The whole surplus stays on the first-priority debt for its entire payoff;
it is not rolled over to the next debt once the first one clears. Every
debt is then amortized independently, month by month:

    interest_t  = balance_{t-1} * APR / 100 / 12
    principal_t = payment - interest_t
    balance_t   = max(0, balance_{t-1} - principal_t)

until the balance reaches zero or the month cap (600) is hit. A debt that
hits the cap with a positive balance is reported with converged=False.

Example
-------
>>> from debtplan.planner import compute_plan
>>> plan = compute_plan(
...     [{"id": "a", "name": "Card", "amount": 1200, "interestRate": 12}],
...     strategy="avalanche",
...     monthly_budget=100,
... )
>>> plan.entries[0].months_to_payoff
13
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Iterator, List, Literal, Tuple

import pandas as pd

from .constants import MAX_PAYOFF_MONTHS, STRATEGIES
from .debts import Debt, as_debts
from .exceptions import ConfigurationError, ValidationError
from .utils import apr_to_monthly, coerce_amount

__all__ = [
    "Strategy",
    "AmortizationStep",
    "PayoffResult",
    "DebtPlanEntry",
    "RepaymentPlanSummary",
    "amortize",
    "simulate_payoff",
    "order_debts",
    "compute_plan",
    "compare_strategies",
]

logger = logging.getLogger(__name__)

Strategy = Literal["avalanche", "snowball"]


# ---------------------------------------------------------------------------
# Single-debt amortization
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AmortizationStep:
    """One simulated month of a single debt."""
    month: int
    payment: float
    interest: float
    principal: float
    balance: float


@dataclass(frozen=True)
class PayoffResult:
    """Outcome of amortizing one debt at a fixed monthly payment."""
    months: int
    total_interest: float
    remaining_balance: float

    @property
    def converged(self) -> bool:
        return self.remaining_balance <= 0


def _check_month_cap(month_cap: int) -> int:
    if month_cap < 1:
        raise ConfigurationError(
            f"month_cap must be >= 1, got {month_cap}. "
            f"The default cap is {MAX_PAYOFF_MONTHS} months."
        )
    return int(month_cap)


def amortize(
    amount: float,
    interest_rate: float,
    monthly_payment: float,
    *,
    month_cap: int = MAX_PAYOFF_MONTHS,
) -> Iterator[AmortizationStep]:
    """
    Yield the month-by-month amortization of a single balance.

    Parameters
    ----------
    amount : float
        Starting balance.
    interest_rate : float
        Nominal annual percentage rate (e.g. 12 for 12%).
    monthly_payment : float
        Fixed payment applied every month.
    month_cap : int, default 600
        Maximum number of months to simulate.

    Notes
    -----
    When the payment does not cover the interest, principal is negative and
    the balance grows; the loop then runs until month_cap.
    """
    month_cap = _check_month_cap(month_cap)
    rate = apr_to_monthly(interest_rate)
    payment = float(monthly_payment)
    balance = float(amount)
    month = 0
    while balance > 0 and month < month_cap:
        interest = balance * rate
        principal = payment - interest
        balance = max(0.0, balance - principal)
        month += 1
        yield AmortizationStep(month, payment, interest, principal, balance)


def simulate_payoff(
    amount: float,
    interest_rate: float,
    monthly_payment: float,
    *,
    month_cap: int = MAX_PAYOFF_MONTHS,
) -> PayoffResult:
    """Run `amortize` to completion and return months, interest and leftover balance."""
    months = 0
    total_interest = 0.0
    balance = float(amount)
    for step in amortize(amount, interest_rate, monthly_payment, month_cap=month_cap):
        months = step.month
        total_interest += step.interest
        balance = step.balance
    return PayoffResult(months=months, total_interest=total_interest, remaining_balance=balance)


# ---------------------------------------------------------------------------
# Plan records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DebtPlanEntry:
    """
    Planned repayment of one debt.

    Attributes
    ----------
    debt_id, name, interest_rate, amount
        Copied from the input debt.
    priority : int
        0-based position in the strategy ordering.
    monthly_payment : float
        Minimum payment, plus the whole surplus for priority 0.
    months_to_payoff : int
        Months until the balance reaches zero, capped at month_cap.
    total_interest : float
        Interest accrued over the simulated life of the debt.
    total_paid : float
        amount + total_interest.
    remaining_balance : float
        Balance left when the simulation stopped (0 when paid off).
    converged : bool
        True when the balance reached zero before the cap.
    """
    debt_id: str
    name: str
    interest_rate: float
    amount: float
    priority: int
    monthly_payment: float
    months_to_payoff: int
    total_interest: float
    total_paid: float
    remaining_balance: float
    converged: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RepaymentPlanSummary:
    """
    Aggregate result of `compute_plan`.

    `max_months` is the time until the whole portfolio is clear: since the
    budget is never reallocated, the portfolio clears when its slowest
    debt does.
    """
    strategy: str
    monthly_budget: float
    entries: Tuple[DebtPlanEntry, ...]
    total_min_payments: float
    extra_payment: float
    total_interest: float
    total_paid: float
    max_months: int

    @property
    def converged(self) -> bool:
        """True when every debt reaches zero balance (vacuously for no debts)."""
        return all(e.converged for e in self.entries)

    @property
    def total_monthly_payment(self) -> float:
        return float(sum(e.monthly_payment for e in self.entries))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "monthly_budget": self.monthly_budget,
            "total_min_payments": self.total_min_payments,
            "extra_payment": self.extra_payment,
            "total_interest": self.total_interest,
            "total_paid": self.total_paid,
            "max_months": self.max_months,
            "converged": self.converged,
            "entries": [e.to_dict() for e in self.entries],
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per debt in priority order, indexed by priority."""
        columns = list(DebtPlanEntry.__dataclass_fields__)
        if not self.entries:
            return pd.DataFrame(columns=columns).set_index("priority")
        return pd.DataFrame([e.to_dict() for e in self.entries], columns=columns).set_index("priority")

    def __repr__(self) -> str:
        return (
            f"RepaymentPlanSummary(strategy={self.strategy!r}, n={len(self.entries)}, "
            f"total_interest={self.total_interest:,.2f}, max_months={self.max_months})"
        )


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------

def _check_strategy(strategy: str) -> str:
    name = str(strategy).strip().lower()
    if name not in STRATEGIES:
        raise ValidationError(
            f"Unknown strategy {strategy!r}. Expected one of: {', '.join(STRATEGIES)}."
        )
    return name


def order_debts(debts: Iterable[Any], strategy: str) -> List[Debt]:
    """
    Return debts in repayment priority order.

    avalanche sorts by interest rate (highest first); snowball sorts by
    amount (lowest first). Python's sort is stable, so ties keep their
    input order.
    """
    strategy = _check_strategy(strategy)
    items = as_debts(debts)
    if strategy == "avalanche":
        return sorted(items, key=lambda d: -d.interest_rate)
    return sorted(items, key=lambda d: d.amount)


def compute_plan(
    debts: Iterable[Any],
    strategy: str = "avalanche",
    monthly_budget: Any = 0.0,
    *,
    month_cap: int = MAX_PAYOFF_MONTHS,
) -> RepaymentPlanSummary:
    """
    Compute a repayment plan for *debts*.

    Parameters
    ----------
    debts : iterable of Debt or mapping
        Debts to plan. Never mutated. May be empty.
    strategy : {"avalanche", "snowball"}, default "avalanche"
        Priority ordering.
    monthly_budget : float
        Total amount paid across all debts each month. Missing or
        non-numeric values count as 0. A budget below the sum of minimum
        payments is not rejected; the surplus is simply zero.
    month_cap : int, default 600
        Non-convergence guard per debt.

    Returns
    -------
    RepaymentPlanSummary

    Raises
    ------
    ValidationError
        If *strategy* is not a known strategy.
    ConfigurationError
        If month_cap < 1.

    Examples
    --------
    >>> plan = compute_plan(debts, "snowball", 400)
    >>> [e.name for e in plan.entries]
    ['Store card', 'Visa', 'Car loan']
    """
    strategy = _check_strategy(strategy)
    month_cap = _check_month_cap(month_cap)
    budget = coerce_amount(monthly_budget)
    items = as_debts(debts)

    total_min = sum(d.min_payment for d in items)
    extra = max(0.0, budget - total_min)

    entries: List[DebtPlanEntry] = []
    for index, debt in enumerate(order_debts(items, strategy)):
        payment = debt.min_payment + (extra if index == 0 else 0.0)
        result = simulate_payoff(debt.amount, debt.interest_rate, payment, month_cap=month_cap)
        if not result.converged:
            logger.warning(
                "Debt %r does not pay off within %d months at %.2f/month "
                "(remaining balance %.2f)",
                debt.name, month_cap, payment, result.remaining_balance,
            )
        entries.append(DebtPlanEntry(
            debt_id=debt.id,
            name=debt.name,
            interest_rate=debt.interest_rate,
            amount=debt.amount,
            priority=index,
            monthly_payment=payment,
            months_to_payoff=result.months,
            total_interest=result.total_interest,
            total_paid=debt.amount + result.total_interest,
            remaining_balance=result.remaining_balance,
            converged=result.converged,
        ))

    summary = RepaymentPlanSummary(
        strategy=strategy,
        monthly_budget=budget,
        entries=tuple(entries),
        total_min_payments=float(total_min),
        extra_payment=float(extra),
        total_interest=float(sum(e.total_interest for e in entries)),
        total_paid=float(sum(e.total_paid for e in entries)),
        max_months=max((e.months_to_payoff for e in entries), default=0),
    )
    logger.debug(
        "Computed %s plan for %d debts: budget=%.2f extra=%.2f max_months=%d",
        strategy, len(entries), budget, extra, summary.max_months,
    )
    return summary


def compare_strategies(
    debts: Iterable[Any],
    monthly_budget: Any = 0.0,
    *,
    month_cap: int = MAX_PAYOFF_MONTHS,
) -> Dict[str, RepaymentPlanSummary]:
    """Compute one plan per strategy on the same debts and budget."""
    items = as_debts(debts)
    return {
        strategy: compute_plan(items, strategy, monthly_budget, month_cap=month_cap)
        for strategy in STRATEGIES
    }
