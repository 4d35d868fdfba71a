"""
Command-Line Interface for DebtPlan.

Purpose
-------
Provides a CLI for planning debt repayment from a JSON debt file without
writing Python code.

Commands
--------
- plan: Compute a repayment plan for one strategy
- compare: Compare avalanche and snowball on the same budget
- recommend: Show the recommended strategy and insights
- overview: Show total debt, monthly interest and progress
- config: Validate debt files

Example Usage
-------------
    # Plan with the avalanche strategy and a 500/month budget
    $ debtplan plan --debts debts.json --strategy avalanche --budget 500

    # Compare strategies and save a chart
    $ debtplan compare -d debts.json -b 500 --plot comparison.png

    # Validate a debt file
    $ debtplan config validate debts.json

    # Show version
    $ debtplan --version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import AppSettings, PlannerConfig
from .constants import MAX_PAYOFF_MONTHS
from .debts import Debt
from .exceptions import DebtPlanError
from .utils import format_currency, format_duration

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load(debts_file: Path) -> List[Debt]:
    from .serialization import load_debts

    try:
        debts = load_debts(debts_file)
    except (DebtPlanError, OSError) as e:
        logger.debug("Loading %s failed", debts_file, exc_info=True)
        _fail(f"could not load debts: {e}")
    logger.info("Loaded %d debts from %s", len(debts), debts_file)
    return debts


def _planner_config(strategy: str, budget: float, month_cap: int) -> PlannerConfig:
    try:
        return PlannerConfig(strategy=strategy, monthly_budget=budget, month_cap=month_cap)
    except PydanticValidationError as e:
        _fail(f"invalid plan request: {e}")


debts_option = click.option(
    "--debts", "-d", "debts_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to debt file (JSON)"
)

month_cap_option = click.option(
    "--month-cap",
    type=int,
    default=MAX_PAYOFF_MONTHS,
    show_default=True,
    help="Maximum simulated months per debt"
)


@click.group()
@click.version_option(version=__version__, prog_name="debtplan")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: DEBTPLAN_LOG_LEVEL or WARNING)"
)
@click.pass_context
def main(ctx: click.Context, quiet: bool, log_level: Optional[str]) -> None:
    """
    DebtPlan - Debt repayment planner.

    Builds avalanche or snowball payoff schedules for a list of debts
    and a fixed monthly budget.

    Use 'debtplan COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    level = (log_level or settings.effective_log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("debtplan").setLevel(level)
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()


@main.command()
@debts_option
@click.option(
    "--strategy", "-s",
    type=click.Choice(["avalanche", "snowball"]),
    default=None,
    help="Repayment strategy (default: DEBTPLAN_DEFAULT_STRATEGY or avalanche)"
)
@click.option(
    "--budget", "-b",
    type=float,
    default=0.0,
    help="Total monthly payment across all debts (default: 0)"
)
@month_cap_option
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the plan to this JSON file"
)
@click.option(
    "--schedule",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write month-by-month balances to this CSV file"
)
@click.option(
    "--plot",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Save a payoff timeline chart to this image file"
)
@click.pass_context
def plan(
    ctx: click.Context,
    debts_file: Path,
    strategy: Optional[str],
    budget: float,
    month_cap: int,
    output: Optional[Path],
    schedule: Optional[Path],
    plot: Optional[Path],
) -> None:
    """
    Compute a repayment plan.

    Example:
        debtplan plan -d debts.json -s snowball -b 450
    """
    console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    settings = ctx.obj["settings"]

    from .planner import compute_plan
    from .serialization import save_plan

    debts = _load(debts_file)
    request = _planner_config(strategy or settings.default_strategy, budget, month_cap)
    result = compute_plan(
        debts, request.strategy, request.monthly_budget, month_cap=request.month_cap
    )
    symbol = settings.currency_symbol

    if quiet:
        click.echo(f"Total Interest: {format_currency(result.total_interest, symbol=symbol)}")
        click.echo(f"Total Paid: {format_currency(result.total_paid, symbol=symbol)}")
        click.echo(f"Time to Payoff: {format_duration(result.max_months)}")
    else:
        table = Table(title=f"{result.strategy.title()} Repayment Plan", show_header=True)
        table.add_column("#", justify="right")
        table.add_column("Debt", style="cyan")
        table.add_column("APR", justify="right")
        table.add_column("Payment", style="green", justify="right")
        table.add_column("Payoff", justify="right")
        table.add_column("Interest", justify="right")
        table.add_column("Total Paid", justify="right")
        for entry in result.entries:
            payoff = format_duration(entry.months_to_payoff)
            if not entry.converged:
                payoff = f"[red]not paid off ({payoff})[/red]"
            table.add_row(
                str(entry.priority + 1),
                entry.name,
                f"{entry.interest_rate:.2f}%",
                f"{format_currency(entry.monthly_payment, symbol=symbol)}/month",
                payoff,
                format_currency(entry.total_interest, symbol=symbol),
                format_currency(entry.total_paid, symbol=symbol),
            )
        console.print(table)
        console.print(Panel(
            f"Minimum payments: {format_currency(result.total_min_payments, symbol=symbol)}\n"
            f"Extra payment: {format_currency(result.extra_payment, symbol=symbol)}\n"
            f"Total interest: {format_currency(result.total_interest, symbol=symbol)}\n"
            f"Total paid: {format_currency(result.total_paid, symbol=symbol)}\n"
            f"Time to payoff: {format_duration(result.max_months)}",
            title="Summary",
        ))

    if output:
        save_plan(result, output)
        if not quiet:
            click.echo(f"Plan saved to {output}")

    if schedule:
        from .schedule import plan_schedule

        schedule.parent.mkdir(parents=True, exist_ok=True)
        plan_schedule(result).to_csv(schedule)
        if not quiet:
            click.echo(f"Schedule saved to {schedule}")

    if plot:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from .plotting import plot_payoff_timeline

        fig, _ = plot_payoff_timeline(result, currency_symbol=symbol)
        plot.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(plot)
        plt.close(fig)
        if not quiet:
            click.echo(f"Chart saved to {plot}")


@main.command()
@debts_option
@click.option(
    "--budget", "-b",
    type=float,
    required=True,
    help="Total monthly payment across all debts"
)
@click.option(
    "--plot",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Save a comparison chart to this image file"
)
@month_cap_option
@click.pass_context
def compare(
    ctx: click.Context,
    debts_file: Path,
    budget: float,
    plot: Optional[Path],
    month_cap: int,
) -> None:
    """
    Compare avalanche and snowball on the same budget.

    Example:
        debtplan compare -d debts.json -b 450
    """
    console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    symbol = ctx.obj["settings"].currency_symbol

    from .planner import compare_strategies

    debts = _load(debts_file)
    request = _planner_config("avalanche", budget, month_cap)
    plans = compare_strategies(debts, request.monthly_budget, month_cap=request.month_cap)

    if quiet:
        for name, p in plans.items():
            click.echo(
                f"{name}: interest {format_currency(p.total_interest, symbol=symbol)}, "
                f"payoff {format_duration(p.max_months)}"
            )
    else:
        table = Table(title="Strategy Comparison", show_header=True)
        table.add_column("Strategy", style="cyan")
        table.add_column("First Priority")
        table.add_column("Total Interest", justify="right")
        table.add_column("Total Paid", justify="right")
        table.add_column("Time to Payoff", justify="right")
        for name, p in plans.items():
            table.add_row(
                name.title(),
                p.entries[0].name if p.entries else "-",
                format_currency(p.total_interest, symbol=symbol),
                format_currency(p.total_paid, symbol=symbol),
                format_duration(p.max_months),
            )
        console.print(table)

    if plot:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from .plotting import plot_strategy_comparison

        fig, _ = plot_strategy_comparison(plans, currency_symbol=symbol)
        plot.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(plot)
        plt.close(fig)
        if not quiet:
            click.echo(f"Chart saved to {plot}")


@main.command()
@debts_option
@click.pass_context
def recommend(ctx: click.Context, debts_file: Path) -> None:
    """
    Recommend a repayment strategy.

    Example:
        debtplan recommend -d debts.json
    """
    console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]

    from .advisor import debt_insights, recommend_strategy, strategy_description

    debts = _load(debts_file)
    rec = recommend_strategy(debts)

    click.echo(rec.message)
    if rec.strategy and not quiet:
        click.echo(strategy_description(rec.strategy))
    if not quiet:
        for insight in debt_insights(debts):
            console.print(f"[bold]{insight.title}:[/bold] {insight.message}")


@main.command()
@debts_option
@click.pass_context
def overview(ctx: click.Context, debts_file: Path) -> None:
    """
    Show totals for a debt file.

    Example:
        debtplan overview -d debts.json
    """
    console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    symbol = ctx.obj["settings"].currency_symbol

    from .debts import DebtPortfolio

    summary = DebtPortfolio(_load(debts_file)).summary()
    rows = [
        ("Debts", str(summary["count"])),
        ("Total Debt", format_currency(summary["total_debt"], symbol=symbol)),
        ("Monthly Interest", format_currency(summary["monthly_interest"], symbol=symbol)),
        ("Minimum Payments", format_currency(summary["total_min_payments"], symbol=symbol)),
        ("High Interest Debts", str(summary["high_interest_count"])),
        ("Progress", f"{summary['progress']:.1f}%"),
    ]
    if quiet:
        for label, value in rows:
            click.echo(f"{label}: {value}")
        return

    table = Table(title="Debt Overview", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for label, value in rows:
        table.add_row(label, value)
    console.print(table)


@main.group()
def config() -> None:
    """
    Configuration management commands.

    Validate debt files.
    """
    pass


@config.command("validate")
@click.argument("debts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def config_validate(ctx: click.Context, debts_file: Path) -> None:
    """
    Validate a debt file.

    Checks that the file is valid JSON and that every debt passes the
    input-validation rules.

    Example:
        debtplan config validate debts.json
    """
    quiet = ctx.obj["quiet"]
    debts = _load(debts_file)
    if not quiet:
        click.echo(f"Debt file valid: {len(debts)} debts")
        for d in debts:
            click.echo(f"  - {d.name}: {d.amount:,.2f} at {d.interest_rate:.2f}% APR")


if __name__ == "__main__":
    main()
