"""
Amortization tables for DebtPlan.

Purpose
-------
Turns plans into month-by-month pandas tables for reporting and plotting.
Both functions replay `planner.amortize`, so the tables always agree with
the months and interest reported by `compute_plan`.

- amortization_schedule: payment/interest/principal/balance for one debt
- plan_schedule: balance of every debt in a plan, month 0..max_months

Example
-------
>>> from datetime import date
>>> plan = compute_plan(debts, "avalanche", 500)
>>> table = amortization_schedule(plan.entries[0], start=date(2025, 1, 1))
>>> balances = plan_schedule(plan)
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

import numpy as np
import pandas as pd

from .constants import MAX_PAYOFF_MONTHS
from .debts import Debt
from .planner import DebtPlanEntry, RepaymentPlanSummary, amortize
from .utils import month_index

__all__ = ["amortization_schedule", "plan_schedule"]

SCHEDULE_COLUMNS = ["month", "payment", "interest", "principal", "balance"]


def amortization_schedule(
    debt: Union[DebtPlanEntry, Debt],
    monthly_payment: Optional[float] = None,
    *,
    start: Optional[date] = None,
    month_cap: int = MAX_PAYOFF_MONTHS,
) -> pd.DataFrame:
    """
    Month-by-month amortization of a single debt.

    Parameters
    ----------
    debt : DebtPlanEntry or Debt
        Plan entry (its monthly_payment is used by default) or a raw Debt.
    monthly_payment : float, optional
        Payment override. Required when *debt* is a Debt without a plan,
        where it defaults to the debt's minimum payment.
    start : date, optional
        When given, rows are indexed by first-of-month dates starting at
        *start*; otherwise by a RangeIndex.
    month_cap : int, default 600
        Same cap as the planner.

    Returns
    -------
    pd.DataFrame
        Columns: month, payment, interest, principal, balance. One row per
        simulated month.
    """
    if monthly_payment is None:
        if isinstance(debt, DebtPlanEntry):
            monthly_payment = debt.monthly_payment
        else:
            monthly_payment = debt.min_payment

    rows = [
        (s.month, s.payment, s.interest, s.principal, s.balance)
        for s in amortize(debt.amount, debt.interest_rate, monthly_payment, month_cap=month_cap)
    ]
    df = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
    df["month"] = df["month"].astype(int)
    if start is not None:
        df.index = month_index(start, len(df))
    return df


def plan_schedule(
    plan: RepaymentPlanSummary,
    *,
    start: Optional[date] = None,
) -> pd.DataFrame:
    """
    Balance of every debt in *plan* at the end of each month.

    Row 0 holds the starting amounts; row t holds balances after month t,
    up to plan.max_months. Debts that clear earlier stay at 0, and debts
    that never clear keep their last simulated balance.

    Returns
    -------
    pd.DataFrame
        One column per debt (by name, in priority order; duplicate names
        get the debt id appended), index "month" (or first-of-month dates
        when *start* is given).
    """
    n_rows = plan.max_months + 1
    cap = max(plan.max_months, 1)
    data = {}
    for entry in plan.entries:
        balances = np.empty(n_rows, dtype=float)
        balances[0] = entry.amount
        last = entry.amount
        t = 0
        for step in amortize(entry.amount, entry.interest_rate, entry.monthly_payment, month_cap=cap):
            t = step.month
            last = step.balance
            balances[t] = last
        balances[t + 1:] = last

        label = entry.name or entry.debt_id
        if label in data:
            label = f"{label} ({entry.debt_id})"
        data[label] = balances

    df = pd.DataFrame(data, index=pd.RangeIndex(n_rows, name="month"))
    if start is not None:
        df.index = month_index(start, n_rows)
    return df
