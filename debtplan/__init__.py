"""
DebtPlan - Debt Repayment Planner

Computes avalanche and snowball payoff schedules for a list of debts
under a fixed monthly budget.

Modules
-------
- debts         : Debt records, input validation, portfolio overview
- planner       : Repayment plan computation (avalanche / snowball)
- schedule      : Month-by-month amortization tables
- advisor       : Strategy recommendation and insights
- serialization : JSON debt files and saved plans
- utils         : Shared utilities (coercion, rates, formatting)

"""

__version__ = "0.1.0"

from .debts import Debt, DebtPortfolio, validate_debt_input
from .planner import (
    DebtPlanEntry,
    RepaymentPlanSummary,
    compute_plan,
    compare_strategies,
    simulate_payoff,
)
from .advisor import recommend_strategy
from . import utils
