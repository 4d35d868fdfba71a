"""
Strategy advisor for DebtPlan.

Purpose
-------
Rule-based recommendations shown next to a repayment plan. The advisor
inspects the debt list on its own; it does not look at computed plans.

Rules
-----
recommend_strategy:
    1. any APR > 15%            → avalanche
    2. else any balance < 1000  → snowball
    3. else                     → no preference

debt_insights:
    - any APR > 10%                          → "Prioritize High-Interest Debt"
    - payoff progress < 50% and debts exist  → "Debt Management"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from .constants import (
    AVALANCHE_RATE_THRESHOLD,
    HIGH_INTEREST_THRESHOLD,
    LOW_PROGRESS_THRESHOLD,
    SNOWBALL_BALANCE_THRESHOLD,
)
from .debts import DebtPortfolio, as_debts
from .exceptions import ValidationError

__all__ = [
    "StrategyRecommendation",
    "Insight",
    "recommend_strategy",
    "strategy_description",
    "debt_insights",
]

STRATEGY_DESCRIPTIONS = {
    "avalanche": (
        "Pay off debts with the highest interest rates first. "
        "This saves the most money on interest."
    ),
    "snowball": (
        "Pay off debts with the smallest balances first. "
        "This provides quick wins and motivation."
    ),
}


@dataclass(frozen=True)
class StrategyRecommendation:
    """Recommended strategy (None when both are viable) and its message."""
    strategy: Optional[str]
    message: str


@dataclass(frozen=True)
class Insight:
    kind: str
    title: str
    message: str


def strategy_description(strategy: str) -> str:
    """One-sentence explanation of *strategy*."""
    key = str(strategy).strip().lower()
    if key not in STRATEGY_DESCRIPTIONS:
        raise ValidationError(f"Unknown strategy {strategy!r}")
    return STRATEGY_DESCRIPTIONS[key]


def recommend_strategy(debts: Iterable[Any]) -> StrategyRecommendation:
    """Pick a strategy for *debts* from simple rate/balance thresholds."""
    items = as_debts(debts)
    if any(d.interest_rate > AVALANCHE_RATE_THRESHOLD for d in items):
        return StrategyRecommendation(
            "avalanche", "Avalanche method recommended due to high-interest debts."
        )
    if any(d.amount < SNOWBALL_BALANCE_THRESHOLD for d in items):
        return StrategyRecommendation(
            "snowball", "Snowball method recommended for quick wins and motivation."
        )
    return StrategyRecommendation(
        None, "Both methods are viable. Choose based on your preference."
    )


def debt_insights(debts: Iterable[Any]) -> List[Insight]:
    """Dashboard insights derived from the debt list."""
    portfolio = DebtPortfolio(debts)
    insights: List[Insight] = []
    if not len(portfolio):
        return insights

    high = portfolio.high_interest_debts(HIGH_INTEREST_THRESHOLD)
    if high:
        names = ", ".join(d.name for d in high)
        insights.append(Insight(
            kind="recommendation",
            title="Prioritize High-Interest Debt",
            message=(
                f"Focus on paying off debts with interest rates above "
                f"{HIGH_INTEREST_THRESHOLD:g}% first ({names})."
            ),
        ))

    if portfolio.progress < LOW_PROGRESS_THRESHOLD:
        insights.append(Insight(
            kind="warning",
            title="Debt Management",
            message=(
                "Consider focusing on paying off high-interest debts first "
                "to reduce overall debt burden."
            ),
        ))
    return insights
