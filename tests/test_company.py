"""Tests for company module."""
import logging

import pytest

from tycoon.company import Company, HireResult
from tycoon.config import GameConfig
from tycoon.units import ProductionMode, UnitKind, cost_for_count


def _make_company(cash: float = 0.0, **kwargs) -> Company:
    return Company(GameConfig(starting_cash=cash, **kwargs))


def test_initialization():
    company = Company()
    assert company.name == "Maratron Inc."
    assert company.cash == 0.0
    assert list(company.owned) == list(UnitKind)
    assert all(count == 0 for count in company.owned.values())
    assert company.time_elapsed == 0.0


def test_custom_name_and_cash():
    company = Company(GameConfig(company_name="Acme", starting_cash=50))
    assert company.name == "Acme"
    assert company.cash == 50


def test_invalid_config():
    with pytest.raises(ValueError, match="Invalid GameConfig"):
        Company(GameConfig(starting_cash=-1))


def test_newbie_scenario():
    company = Company()
    assert cost_for_count(UnitKind.NEWBIE, 1) == 10
    assert not company.can_hire(UnitKind.NEWBIE, 1)

    for _ in range(10):
        company.inject_cash(1.0)
    assert company.cash == pytest.approx(10.0)
    assert company.can_hire(UnitKind.NEWBIE, 1)

    result = company.hire(UnitKind.NEWBIE)
    assert result.success
    assert company.cash == pytest.approx(0.0)
    assert company.owned[UnitKind.NEWBIE] == 1
    assert company.next_cost(UnitKind.NEWBIE) == 12


def test_can_hire_has_no_side_effects():
    company = _make_company(20)
    before = (company.cash, dict(company.owned))
    company.can_hire(UnitKind.PROFESSIONAL, 1)
    assert (company.cash, dict(company.owned)) == before


def test_hire_deducts_next_cost():
    company = _make_company(1000)
    for expected_count in range(1, 6):
        old_cash = company.cash
        cost = cost_for_count(UnitKind.NEWBIE, expected_count)
        result = company.hire(UnitKind.NEWBIE)
        assert result == HireResult(
            success=True, kind=UnitKind.NEWBIE, cost=cost, new_count=expected_count
        )
        assert company.cash == pytest.approx(old_cash - cost)
        assert company.owned[UnitKind.NEWBIE] == expected_count


def test_hire_leaves_other_kinds_untouched():
    company = _make_company(1000)
    company.hire(UnitKind.EXPERT)
    assert company.owned[UnitKind.EXPERT] == 1
    assert company.owned[UnitKind.NEWBIE] == 0
    assert company.owned[UnitKind.PROFESSIONAL] == 0
    assert company.owned[UnitKind.NINJA] == 0


def test_hire_insufficient_funds():
    company = _make_company(24)
    result = company.hire(UnitKind.PROFESSIONAL)
    assert not result.success
    assert result.reason == "Insufficient funds"
    assert result.cost == 25
    assert result.new_count == 0
    assert company.cash == 24
    assert company.owned[UnitKind.PROFESSIONAL] == 0


def test_hire_logs(caplog):
    caplog.set_level(logging.INFO, logger="tycoon.company")
    company = _make_company(10)
    company.hire(UnitKind.NEWBIE)
    assert "hired Newbie #1 for $10" in caplog.text


def test_tick_three_newbies():
    company = _make_company(1000)
    for _ in range(3):
        company.hire(UnitKind.NEWBIE)
    before = company.cash
    company.tick(1.0)
    assert company.cash - before == pytest.approx(3.0)


def test_tick_without_units():
    company = _make_company(5)
    company.tick(1.0)
    assert company.cash == 5


def test_tick_zero_delta():
    company = _make_company(1000)
    company.hire(UnitKind.NINJA)
    before = company.cash
    company.tick(0)
    assert company.cash == before
    assert company.time_elapsed == 0.0


def test_tick_sums_all_kinds():
    company = _make_company(10_000)
    company.hire(UnitKind.NEWBIE)
    company.hire(UnitKind.NINJA)
    company.hire(UnitKind.NINJA)
    before = company.cash
    company.tick(0.5)
    # (1 + 2 * 50) * 1/2
    assert company.cash - before == pytest.approx(50.5)


def test_split_ticks_differ_from_merged_tick():
    split = _make_company(10)
    split.hire(UnitKind.NEWBIE)
    split.tick(0.25)
    split.tick(0.75)

    merged = _make_company(10)
    merged.hire(UnitKind.NEWBIE)
    merged.tick(1.0)

    # 1/4 + 1/2 versus 1
    assert split.cash == pytest.approx(0.75)
    assert merged.cash == pytest.approx(1.0)
    assert split.time_elapsed == pytest.approx(merged.time_elapsed)


def test_smooth_mode_tick():
    company = _make_company(10, production_mode=ProductionMode.SMOOTH)
    company.hire(UnitKind.NEWBIE)
    company.tick(0.25)
    company.tick(0.75)
    assert company.cash == pytest.approx(1.0)


def test_tick_tracks_earnings():
    company = _make_company(10)
    company.hire(UnitKind.NEWBIE)
    company.tick(1.0)
    company.tick(1.0)
    assert company.total_earned == pytest.approx(2.0)
    assert company.time_elapsed == pytest.approx(2.0)


def test_inject_cash():
    company = Company()
    company.inject_cash(2.5)
    company.inject_cash(1.0)
    assert company.cash == pytest.approx(3.5)


def test_income_per_second():
    company = _make_company(10_000)
    assert company.income_per_second() == 0.0
    for _ in range(3):
        company.hire(UnitKind.NEWBIE)
    company.hire(UnitKind.NINJA)
    assert company.income_per_second() == pytest.approx(53.0)
    assert company.income_per_second() == company.income_per_second()


def test_income_ignores_quantization():
    company = _make_company(10)
    company.hire(UnitKind.NEWBIE)
    company.tick(0.4)
    # Quantized frame earns 1/3, nominal rate is still 1/s
    assert company.cash == pytest.approx(1 / 3)
    assert company.income_per_second() == pytest.approx(1.0)
