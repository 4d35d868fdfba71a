"""
Pytest configuration and fixtures for DebtPlan test suite.

This module provides reusable debt lists and debt files for testing all
DebtPlan components.
"""

import json
from typing import List

import pytest

from debtplan.debts import Debt


# ---------------------------------------------------------------------------
# Debt Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def debt_a() -> Debt:
    """Small, high-rate debt: 500 at 20% APR, 25/month minimum."""
    return Debt(id="a", name="Store card", amount=500, interest_rate=20, min_payment=25)


@pytest.fixture
def debt_b() -> Debt:
    """Larger, lower-rate debt: 2000 at 10% APR, 50/month minimum."""
    return Debt(id="b", name="Personal loan", amount=2000, interest_rate=10, min_payment=50)


@pytest.fixture
def two_debts(debt_a, debt_b) -> List[Debt]:
    """Debts where avalanche and snowball agree on the order (A then B)."""
    return [debt_a, debt_b]


@pytest.fixture
def mixed_debts() -> List[Debt]:
    """
    Debts where avalanche and snowball disagree.

    Avalanche: Visa (22.9) → Car (6.5) → Medical (0)
    Snowball:  Medical (300) → Visa (4000) → Car (9000)
    """
    return [
        Debt(id="car", name="Car loan", amount=9_000, interest_rate=6.5, min_payment=250),
        Debt(id="visa", name="Visa", amount=4_000, interest_rate=22.9, min_payment=100),
        Debt(id="med", name="Medical", amount=300, interest_rate=0, min_payment=30),
    ]


@pytest.fixture
def debt_records() -> List[dict]:
    """Storage-style records (camelCase, string numbers, missing minPayment)."""
    return [
        {"id": "doc-1", "name": "Visa", "amount": "4000", "interestRate": "22.9", "minPayment": "100"},
        {"id": "doc-2", "name": "Medical", "amount": 300, "interestRate": 0},
    ]


# ---------------------------------------------------------------------------
# File Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def debts_file(tmp_path, mixed_debts):
    """Debt file holding `mixed_debts`."""
    path = tmp_path / "debts.json"
    data = {
        "schema_version": "0.1.0",
        "debts": [d.to_record() for d in mixed_debts],
    }
    with open(path, "w") as f:
        json.dump(data, f)
    return path
