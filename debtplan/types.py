"""
Type definitions for DebtPlan.

Purpose
-------
Provides TypedDict definitions for the dictionary shapes that cross the
library boundary: raw debt records coming from storage, and serialized
plans going out to the presentation layer or to disk.

Usage
-----
>>> from debtplan.types import DebtRecordDict
>>>
>>> record: DebtRecordDict = {
...     "id": "card-1",
...     "name": "Visa",
...     "amount": 2500.0,
...     "interestRate": 19.99,
...     "minPayment": 75.0,
... }

Type Definitions
----------------
DebtRecordDict
    Storage-style debt record (camelCase keys, numbers possibly as strings)

PlanEntryDict
    One serialized DebtPlanEntry

PlanSummaryDict
    Serialized RepaymentPlanSummary
"""

from typing import List, Union
from typing_extensions import TypedDict, NotRequired

__all__ = [
    "DebtRecordDict",
    "PlanEntryDict",
    "PlanSummaryDict",
]


class DebtRecordDict(TypedDict):
    """
    Debt record as delivered by the storage layer.

    Numeric fields may arrive as strings (form input) and are coerced by
    Debt.from_record. Snake_case aliases (interest_rate, min_payment,
    remaining_amount) are accepted as well.
    """

    name: str
    amount: Union[float, str]
    interestRate: Union[float, str]
    id: NotRequired[str]
    minPayment: NotRequired[Union[float, str, None]]
    description: NotRequired[str]
    remainingAmount: NotRequired[Union[float, str, None]]


class PlanEntryDict(TypedDict):
    """Serialized DebtPlanEntry."""

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


class PlanSummaryDict(TypedDict):
    """Serialized RepaymentPlanSummary."""

    strategy: str
    monthly_budget: float
    total_min_payments: float
    extra_payment: float
    total_interest: float
    total_paid: float
    max_months: int
    converged: bool
    entries: List[PlanEntryDict]
