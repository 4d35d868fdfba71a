"""
Serialization module for DebtPlan.

Purpose
-------
Provides JSON serialization and deserialization for debt lists and
computed repayment plans, so the CLI and other front ends can read debts
exported from storage and write plans for later rendering.

Design Principles
-----------------
- Type-safe: debt records are validated through DebtConfig
- Human-readable: indented JSON
- Versioned: files carry a schema_version; mismatches warn, not fail

Example
-------
>>> from pathlib import Path
>>> from debtplan.serialization import load_debts, save_plan
>>> from debtplan.planner import compute_plan
>>>
>>> debts = load_debts(Path("debts.json"))
>>> save_plan(compute_plan(debts, "avalanche", 500), Path("plan.json"))
"""

from __future__ import annotations
from typing import Dict, Any, Iterable, List
from pathlib import Path
import json
import warnings

from pydantic import ValidationError as PydanticValidationError

from .config import DebtConfig
from .debts import Debt, as_debts
from .exceptions import SerializationError, ValidationError
from .planner import RepaymentPlanSummary

__all__ = [
    "SCHEMA_VERSION",
    "debt_to_dict",
    "debt_from_dict",
    "save_debts",
    "load_debts",
    "plan_to_dict",
    "save_plan",
    "load_plan",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


def _check_schema_version(data: Dict[str, Any], path: Path) -> None:
    schema_version = data.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"{path}: schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SerializationError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise SerializationError(f"{path}: not a UTF-8 text file ({e})") from e


def _write_json(data: Any, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


# ---------------------------------------------------------------------------
# Debt Serialization
# ---------------------------------------------------------------------------

def debt_to_dict(debt: Debt) -> Dict[str, Any]:
    """
    Convert Debt to its file representation (camelCase, like storage).

    Parameters
    ----------
    debt : Debt
        Debt instance to serialize

    Returns
    -------
    dict
        Dictionary with debt fields
    """
    return debt.to_record()


def debt_from_dict(data: Dict[str, Any], *, default_id: str = "") -> Debt:
    """
    Create Debt from its file representation.

    Parameters
    ----------
    data : dict
        Debt record (camelCase or snake_case keys)
    default_id : str
        Identifier used when the record has none

    Returns
    -------
    Debt

    Raises
    ------
    ValidationError
        If the record breaks the input-validation contract
    """
    try:
        config = DebtConfig.model_validate(data)
    except PydanticValidationError as e:
        name = data.get("name", "<unnamed>") if isinstance(data, dict) else "<invalid>"
        raise ValidationError(f"Invalid debt {name!r}: {e}") from e

    return Debt(
        id=config.id or default_id or config.name,
        name=config.name,
        amount=config.amount,
        interest_rate=config.interest_rate,
        min_payment=config.min_payment,
        description=config.description,
        remaining_amount=config.remaining_amount,
    )


def save_debts(debts: Iterable[Any], path: Path) -> None:
    """
    Save debts to a JSON file.

    Examples
    --------
    >>> save_debts([Debt(id="a", name="Visa", amount=2500, interest_rate=19.99)],
    ...            Path("debts.json"))
    """
    data = {
        "schema_version": SCHEMA_VERSION,
        "debts": [debt_to_dict(d) for d in as_debts(debts)],
    }
    _write_json(data, path)


def load_debts(path: Path) -> List[Debt]:
    """
    Load debts from a JSON file.

    Accepts either ``{"schema_version": ..., "debts": [...]}`` or a bare
    list of debt records (as exported from storage).

    Raises
    ------
    SerializationError
        If the file is not valid JSON or has an unexpected structure
    ValidationError
        If any debt record breaks the input-validation contract
    """
    path = Path(path)
    data = _read_json(path)

    if isinstance(data, dict):
        if "debts" not in data:
            raise SerializationError(f"{path}: missing 'debts' key")
        _check_schema_version(data, path)
        records = data["debts"]
    else:
        records = data

    if not isinstance(records, list):
        raise SerializationError(
            f"{path}: expected a list of debts or an object with a 'debts' key"
        )
    return [debt_from_dict(r, default_id=f"debt-{i + 1}") for i, r in enumerate(records)]


# ---------------------------------------------------------------------------
# Plan Serialization
# ---------------------------------------------------------------------------

def plan_to_dict(plan: RepaymentPlanSummary) -> Dict[str, Any]:
    """Serialize a plan, tagging it with the schema version."""
    return {"schema_version": SCHEMA_VERSION, **plan.to_dict()}


def save_plan(plan: RepaymentPlanSummary, path: Path) -> None:
    """
    Save a computed plan to JSON.

    Parameters
    ----------
    plan : RepaymentPlanSummary
        Result of compute_plan
    path : Path
        Output file path
    """
    _write_json(plan_to_dict(plan), path)


def load_plan(path: Path) -> Dict[str, Any]:
    """
    Load a plan saved by `save_plan`.

    Plans are derived data, so they are returned as a dictionary rather
    than rebuilt; recompute with `compute_plan` for a live object.
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict) or "entries" not in data:
        raise SerializationError(f"{path}: not a repayment plan file")
    _check_schema_version(data, path)
    return data
