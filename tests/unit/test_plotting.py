"""
Unit tests for plotting.py module.

Tests payoff timeline and strategy comparison charts.
"""

import pytest
from datetime import date

# Use non-interactive backend for testing
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from debtplan.planner import compare_strategies, compute_plan
from debtplan.plotting import plot_payoff_timeline, plot_strategy_comparison


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPayoffTimeline:

    def test_one_line_per_debt_plus_total(self, mixed_debts):
        plan = compute_plan(mixed_debts, "avalanche", 600)
        fig, ax = plot_payoff_timeline(plan)

        labels = [line.get_label() for line in ax.get_lines()]
        assert labels == ["Visa", "Car loan", "Medical", "Total"]
        assert ax.get_title() == "Avalanche payoff timeline"
        assert ax.get_xlabel() == "Month"

    def test_uses_given_axes(self, two_debts):
        fig, ax = plt.subplots()
        plan = compute_plan(two_debts, "snowball", 200)

        out_fig, out_ax = plot_payoff_timeline(plan, ax=ax, title="Custom")
        assert out_ax is ax
        assert out_fig is fig
        assert ax.get_title() == "Custom"

    def test_calendar_axis(self, two_debts):
        plan = compute_plan(two_debts, "avalanche", 200)
        _, ax = plot_payoff_timeline(plan, start=date(2025, 1, 1))
        assert ax.get_xlabel() == "Date"

    def test_currency_symbol(self, two_debts):
        plan = compute_plan(two_debts, "avalanche", 200)
        _, ax = plot_payoff_timeline(plan, currency_symbol="€")

        formatter = ax.yaxis.get_major_formatter()
        assert formatter(1500, 0) == "€1,500"

    def test_empty_plan(self):
        _, ax = plot_payoff_timeline(compute_plan([], "avalanche", 0))
        assert len(ax.get_lines()) == 0


class TestStrategyComparison:

    def test_bars(self, mixed_debts):
        plans = compare_strategies(mixed_debts, 600)
        fig, axes = plot_strategy_comparison(plans)

        assert len(axes) == 2
        assert axes[0].yaxis.get_major_formatter()(1000, 0) == "$1,000"
        heights = [p.get_height() for p in axes[0].patches]
        assert heights == pytest.approx([plans["avalanche"].total_interest, plans["snowball"].total_interest])
        months = [p.get_height() for p in axes[1].patches]
        assert months == [plans["avalanche"].max_months, plans["snowball"].max_months]

    def test_currency_symbol(self, mixed_debts):
        _, axes = plot_strategy_comparison(compare_strategies(mixed_debts, 600), currency_symbol="£")
        assert axes[0].yaxis.get_major_formatter()(250, 0) == "£250"

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="empty"):
            plot_strategy_comparison({})
