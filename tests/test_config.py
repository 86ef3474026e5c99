"""Tests for config module."""
import pytest

from tycoon.config import GameConfig
from tycoon.units import ProductionMode


def test_defaults():
    config = GameConfig()
    assert config.company_name == "Maratron Inc."
    assert config.starting_cash == 0.0
    assert config.bonus_amount == 1.0
    assert config.production_mode is ProductionMode.QUANTIZED
    assert config.validate() == []


def test_blank_name():
    errors = GameConfig(company_name="  ").validate()
    assert any("company_name" in e for e in errors)


def test_negative_starting_cash():
    errors = GameConfig(starting_cash=-5).validate()
    assert any("starting_cash" in e for e in errors)


def test_non_positive_bonus():
    errors = GameConfig(bonus_amount=0).validate()
    assert any("bonus_amount" in e for e in errors)


def test_unknown_mode():
    errors = GameConfig(production_mode="fast").validate()
    assert any("production_mode" in e for e in errors)


def test_check_raises_with_all_errors():
    config = GameConfig(company_name="", bonus_amount=-1)
    with pytest.raises(ValueError, match="Invalid GameConfig") as excinfo:
        config.check()
    assert "company_name" in str(excinfo.value)
    assert "bonus_amount" in str(excinfo.value)
