"""
Unit tests for config.py Pydantic models.

Tests validation, defaults, and serialization of configuration classes.
"""

import pytest

from debtplan.config import (
    AppSettings,
    DebtConfig,
    DebtFileConfig,
    PlannerConfig,
)


class TestDebtConfig:
    """Tests for DebtConfig validation."""

    def test_camel_case_aliases(self):
        config = DebtConfig.model_validate(
            {"name": "Visa", "amount": 2500, "interestRate": 19.99, "minPayment": 75}
        )

        assert config.interest_rate == 19.99
        assert config.min_payment == 75
        assert config.id is None

    def test_field_names(self):
        config = DebtConfig(name="Loan", amount=1000, interest_rate=6)
        assert config.min_payment == 0.0

    def test_null_min_payment(self):
        config = DebtConfig.model_validate(
            {"name": "Loan", "amount": 1000, "interestRate": 6, "minPayment": None}
        )
        assert config.min_payment == 0.0

    def test_name_stripped(self):
        assert DebtConfig(name="  Visa ", amount=1, interest_rate=1).name == "Visa"

    def test_blank_name(self):
        with pytest.raises(ValueError, match="blank"):
            DebtConfig(name="   ", amount=100, interest_rate=5)

    @pytest.mark.parametrize("amount", [0, -5])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValueError):
            DebtConfig(name="Visa", amount=amount, interest_rate=5)

    @pytest.mark.parametrize("rate", [-1, 100.01])
    def test_rate_bounds(self, rate):
        with pytest.raises(ValueError):
            DebtConfig(name="Visa", amount=100, interest_rate=rate)

    @pytest.mark.parametrize("field", ["amount", "interest_rate", "min_payment"])
    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_non_finite_rejected(self, field, value):
        kwargs = dict(name="Visa", amount=100, interest_rate=5, min_payment=10)
        kwargs[field] = value
        with pytest.raises(ValueError):
            DebtConfig(**kwargs)

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            DebtConfig.model_validate(
                {"name": "Visa", "amount": 100, "interestRate": 5, "color": "#EF4444"}
            )

    def test_immutable(self):
        config = DebtConfig(name="Visa", amount=100, interest_rate=5)
        with pytest.raises(Exception):
            config.amount = 50


class TestDebtFileConfig:

    def test_defaults(self):
        config = DebtFileConfig()
        assert config.schema_version == "0.1.0"
        assert config.debts == []

    def test_nested(self):
        config = DebtFileConfig.model_validate({
            "debts": [{"name": "Visa", "amount": 100, "interestRate": 5}]
        })
        assert config.debts[0].name == "Visa"


class TestPlannerConfig:
    """Tests for PlannerConfig validation."""

    def test_defaults(self):
        config = PlannerConfig()

        assert config.strategy == "avalanche"
        assert config.monthly_budget == 0.0
        assert config.month_cap == 600

    def test_strategy_validation(self):
        for strategy in ["avalanche", "snowball"]:
            assert PlannerConfig(strategy=strategy).strategy == strategy

        with pytest.raises(ValueError):
            PlannerConfig(strategy="rolling")

    def test_negative_budget(self):
        with pytest.raises(ValueError):
            PlannerConfig(monthly_budget=-1)

    @pytest.mark.parametrize("cap", [0, 1201])
    def test_month_cap_bounds(self, cap):
        with pytest.raises(ValueError):
            PlannerConfig(month_cap=cap)

    def test_infinite_budget(self):
        with pytest.raises(ValueError):
            PlannerConfig(monthly_budget=float("inf"))

    def test_serialization(self):
        config = PlannerConfig(strategy="snowball", monthly_budget=400)

        data = config.model_dump()
        assert data == {"strategy": "snowball", "monthly_budget": 400.0, "month_cap": 600}

        restored = PlannerConfig.model_validate(data)
        assert restored == config


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, monkeypatch):
        for var in ["DEBTPLAN_DEBUG", "DEBTPLAN_LOG_LEVEL", "DEBTPLAN_DEFAULT_STRATEGY"]:
            monkeypatch.delenv(var, raising=False)
        settings = AppSettings(_env_file=None)

        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.default_strategy == "avalanche"
        assert settings.currency_symbol == "$"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEBTPLAN_DEFAULT_STRATEGY", "snowball")
        monkeypatch.setenv("DEBTPLAN_LOG_LEVEL", "INFO")
        settings = AppSettings(_env_file=None)

        assert settings.default_strategy == "snowball"
        assert settings.log_level == "INFO"

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("DEBTPLAN_DEBUG", "true")
        settings = AppSettings(_env_file=None)
        assert settings.effective_log_level == "DEBUG"

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DEBTPLAN_CURRENCY_SYMBOL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("DEBTPLAN_CURRENCY_SYMBOL=€\n", encoding="utf-8")

        settings = AppSettings(_env_file=env_file)
        assert settings.currency_symbol == "€"
