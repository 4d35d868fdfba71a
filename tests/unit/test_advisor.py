"""
Unit tests for advisor.py module.
"""

import pytest

from debtplan.advisor import (
    debt_insights,
    recommend_strategy,
    strategy_description,
)
from debtplan.debts import Debt
from debtplan.exceptions import ValidationError


def _debt(amount, rate, **kwargs):
    return Debt(id=str(amount), name=f"D{amount}", amount=amount, interest_rate=rate, **kwargs)


class TestRecommendStrategy:

    def test_high_rate_means_avalanche(self):
        rec = recommend_strategy([_debt(5_000, 18), _debt(200, 3)])

        assert rec.strategy == "avalanche"
        assert "high-interest" in rec.message

    def test_rate_at_threshold_is_not_high(self):
        rec = recommend_strategy([_debt(5_000, 15)])
        assert rec.strategy is None

    def test_small_balance_means_snowball(self):
        rec = recommend_strategy([_debt(5_000, 8), _debt(999, 8)])

        assert rec.strategy == "snowball"
        assert "quick wins" in rec.message

    def test_no_preference(self):
        rec = recommend_strategy([_debt(5_000, 8), _debt(1_000, 12)])

        assert rec.strategy is None
        assert rec.message.startswith("Both methods are viable")

    def test_empty(self):
        assert recommend_strategy([]).strategy is None

    def test_accepts_records(self):
        rec = recommend_strategy([{"name": "Card", "amount": "3000", "interestRate": "24.9"}])
        assert rec.strategy == "avalanche"


class TestStrategyDescription:

    def test_descriptions(self):
        assert "highest interest" in strategy_description("avalanche")
        assert "smallest balances" in strategy_description("snowball")

    def test_unknown(self):
        with pytest.raises(ValidationError):
            strategy_description("rolling")


class TestDebtInsights:

    def test_no_debts_no_insights(self):
        assert debt_insights([]) == []

    def test_high_interest_and_low_progress(self, mixed_debts):
        titles = [i.title for i in debt_insights(mixed_debts)]
        assert titles == ["Prioritize High-Interest Debt", "Debt Management"]

    def test_insight_names_debts(self, mixed_debts):
        insight = debt_insights(mixed_debts)[0]
        assert "Visa" in insight.message
        assert "Car loan" not in insight.message

    def test_good_progress_low_rates(self):
        insights = debt_insights([_debt(1_000, 4, remaining_amount=100)])
        assert insights == []
