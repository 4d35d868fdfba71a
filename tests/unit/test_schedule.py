"""
Unit tests for schedule.py module.

Schedules replay the planner loop, so row counts and interest totals must
match the plan entries exactly.
"""

from datetime import date

import numpy as np
import pandas as pd
import pytest

from debtplan.debts import Debt
from debtplan.planner import compute_plan
from debtplan.schedule import amortization_schedule, plan_schedule


class TestAmortizationSchedule:

    def test_matches_plan_entry(self, mixed_debts):
        plan = compute_plan(mixed_debts, "avalanche", 600)
        for entry in plan.entries:
            df = amortization_schedule(entry)

            assert len(df) == entry.months_to_payoff
            assert df["interest"].sum() == pytest.approx(entry.total_interest)
            assert df["balance"].iloc[-1] == 0.0
            assert (df["payment"] == entry.monthly_payment).all()

    def test_columns(self, debt_a):
        df = amortization_schedule(debt_a)
        assert list(df.columns) == ["month", "payment", "interest", "principal", "balance"]
        assert df["month"].tolist() == list(range(1, len(df) + 1))

    def test_debt_uses_min_payment(self, debt_b):
        df = amortization_schedule(debt_b)
        assert df["payment"].iloc[0] == 50

    def test_payment_override(self, debt_b):
        slow = amortization_schedule(debt_b)
        fast = amortization_schedule(debt_b, monthly_payment=200)
        assert len(fast) < len(slow)

    def test_calendar_index(self, debt_a):
        df = amortization_schedule(debt_a, start=date(2025, 3, 15))

        assert isinstance(df.index, pd.DatetimeIndex)
        assert df.index[0] == pd.Timestamp(2025, 3, 1)
        assert df.index[1] == pd.Timestamp(2025, 4, 1)

    def test_zero_balance_empty(self):
        df = amortization_schedule(Debt(id="0", name="Done", amount=0, interest_rate=5), 10)
        assert df.empty


class TestPlanSchedule:

    def test_shape_and_start(self, mixed_debts):
        plan = compute_plan(mixed_debts, "snowball", 600)
        df = plan_schedule(plan)

        assert df.shape == (plan.max_months + 1, 3)
        assert list(df.columns) == ["Medical", "Visa", "Car loan"]
        assert df.iloc[0].tolist() == [300, 4_000, 9_000]
        assert np.allclose(df.iloc[-1].to_numpy(), 0.0)

    def test_cleared_debts_stay_at_zero(self, two_debts):
        plan = compute_plan(two_debts, "avalanche", 200)
        df = plan_schedule(plan)
        months_a = plan.entries[0].months_to_payoff

        assert (df["Store card"].iloc[months_a:] == 0).all()
        assert (df["Personal loan"].iloc[:months_a] > 0).all()

    def test_non_convergent_debt_holds_last_balance(self):
        debts = [
            Debt(id="1", name="Payday", amount=1000, interest_rate=24, min_payment=10),
        ]
        plan = compute_plan(debts, "avalanche", 0, month_cap=24)
        df = plan_schedule(plan)

        assert len(df) == 25
        assert df["Payday"].iloc[-1] == pytest.approx(plan.entries[0].remaining_balance)

    def test_duplicate_names(self):
        debts = [
            Debt(id="1", name="Card", amount=100, interest_rate=5, min_payment=50),
            Debt(id="2", name="Card", amount=200, interest_rate=5, min_payment=50),
        ]
        df = plan_schedule(compute_plan(debts, "snowball", 100))
        assert list(df.columns) == ["Card", "Card (2)"]

    def test_empty_plan(self):
        df = plan_schedule(compute_plan([], "avalanche", 0))
        assert df.shape == (1, 0)

    def test_calendar_index(self, two_debts):
        plan = compute_plan(two_debts, "avalanche", 200)
        df = plan_schedule(plan, start=date(2025, 1, 1))
        assert df.index[0] == pd.Timestamp(2025, 1, 1)
        assert len(df.index) == plan.max_months + 1
