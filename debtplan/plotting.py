"""
Plotting utilities for DebtPlan.

Purpose
-------
Matplotlib charts for repayment plans:

- plot_payoff_timeline: remaining balance of each debt over time
- plot_strategy_comparison: total interest and months to debt-free per strategy

Both functions draw on a provided Axes (or create a new figure) and
return ``(fig, ax)`` so callers can save or further customize them.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import FuncFormatter

from .constants import (
    DEFAULT_ALPHA_BARS,
    DEFAULT_FIGSIZE,
    DEFAULT_FIGSIZE_WIDE,
    DEFAULT_LINEWIDTH,
)
from .planner import RepaymentPlanSummary
from .schedule import plan_schedule
from .utils import format_currency

__all__ = ["plot_payoff_timeline", "plot_strategy_comparison"]


def _currency_formatter(symbol: str) -> FuncFormatter:
    return FuncFormatter(lambda x, pos: format_currency(x, decimals=0, symbol=symbol))


def plot_payoff_timeline(
    plan: RepaymentPlanSummary,
    *,
    start: Optional[date] = None,
    ax=None,
    title: Optional[str] = None,
    currency_symbol: str = "$",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot the balance of each debt month by month.

    Parameters
    ----------
    plan : RepaymentPlanSummary
        Plan to draw.
    start : date, optional
        Calendar start; when given the x axis shows dates instead of months.
    ax : matplotlib Axes, optional
        Axes to draw on. A new figure is created when omitted.
    title : str, optional
        Defaults to "<Strategy> payoff timeline".
    currency_symbol : str, default "$"
        Prefix for the balance axis labels.

    Returns
    -------
    (fig, ax)
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE)
    else:
        fig = ax.figure

    balances = plan_schedule(plan, start=start)
    for column in balances.columns:
        ax.plot(balances.index, balances[column], linewidth=DEFAULT_LINEWIDTH, label=column)

    if len(balances.columns):
        ax.plot(
            balances.index, balances.sum(axis=1),
            linewidth=DEFAULT_LINEWIDTH, linestyle="--", color="black", label="Total",
        )
        ax.legend(loc="upper right")

    ax.set_title(title or f"{plan.strategy.title()} payoff timeline")
    ax.set_xlabel("Date" if start is not None else "Month")
    ax.set_ylabel("Remaining balance")
    ax.yaxis.set_major_formatter(_currency_formatter(currency_symbol))
    ax.grid(True, alpha=0.3)
    return fig, ax


def plot_strategy_comparison(
    plans: Mapping[str, RepaymentPlanSummary],
    *,
    axes=None,
    currency_symbol: str = "$",
) -> Tuple[plt.Figure, np.ndarray]:
    """
    Side-by-side bars of total interest and months to debt-free.

    Parameters
    ----------
    plans : mapping of strategy name to RepaymentPlanSummary
        Typically the output of `compare_strategies`.
    axes : array of two Axes, optional
        Axes to draw on. A new 1x2 figure is created when omitted.
    currency_symbol : str, default "$"
        Prefix for the interest axis labels.

    Returns
    -------
    (fig, axes)
    """
    if not plans:
        raise ValueError("plans must not be empty")

    if axes is None:
        fig, axes = plt.subplots(1, 2, figsize=DEFAULT_FIGSIZE_WIDE)
    else:
        fig = axes[0].figure

    names = list(plans)
    x = np.arange(len(names))
    interest = [plans[n].total_interest for n in names]
    months = [plans[n].max_months for n in names]

    ax_interest, ax_months = axes[0], axes[1]
    ax_interest.bar(x, interest, color="tab:red", alpha=DEFAULT_ALPHA_BARS)
    ax_interest.set_title("Total interest")
    ax_interest.yaxis.set_major_formatter(_currency_formatter(currency_symbol))

    ax_months.bar(x, months, color="tab:blue", alpha=DEFAULT_ALPHA_BARS)
    ax_months.set_title("Months to debt-free")

    for ax in (ax_interest, ax_months):
        ax.set_xticks(x)
        ax.set_xticklabels([n.title() for n in names])
        ax.grid(True, axis="y", alpha=0.3)

    fig.tight_layout()
    return fig, np.asarray(axes)
