"""Tests for session module."""
import logging

import pytest

from tycoon.config import GameConfig
from tycoon.session import BONUS_REGION, CompanyView, GameSession, UnitView
from tycoon.units import UnitKind


def _make_session(cash: float = 0.0) -> GameSession:
    return GameSession(GameConfig(starting_cash=cash))


def test_default_session():
    session = GameSession()
    assert session.company.name == "Maratron Inc."
    assert session.last_update_time is None


def test_first_update_has_no_baseline():
    session = _make_session(10)
    session.on_pointer_up(UnitKind.NEWBIE)
    session.update(100.0)
    assert session.company.cash == pytest.approx(0.0)
    assert session.last_update_time == 100.0

    session.update(101.0)
    assert session.company.cash == pytest.approx(1.0)


def test_update_uses_delta_between_frames():
    session = _make_session(10)
    session.on_pointer_up(UnitKind.NEWBIE)
    session.update(0.0)
    session.update(0.5)
    session.update(1.0)
    assert session.company.cash == pytest.approx(1.0)


def test_update_going_backwards_earns_nothing():
    session = _make_session(10)
    session.on_pointer_up(UnitKind.NEWBIE)
    session.update(5.0)
    session.update(4.0)
    assert session.company.cash == pytest.approx(0.0)


def test_on_frame_ticks_company():
    session = _make_session(1000)
    session.on_pointer_up(UnitKind.NINJA)
    session.on_frame(1.0)
    assert session.company.cash == pytest.approx(50.0)


def test_pointer_miss():
    session = _make_session(100)
    assert not session.on_pointer_up(None)
    assert session.company.cash == 100


def test_bonus_region():
    session = GameSession()
    assert session.on_pointer_up(BONUS_REGION)
    assert session.company.cash == pytest.approx(1.0)


def test_bonus_amount_from_config():
    session = GameSession(GameConfig(bonus_amount=5.0))
    session.on_pointer_up(BONUS_REGION)
    assert session.company.cash == pytest.approx(5.0)


def test_unaffordable_unit_is_ignored(caplog):
    caplog.set_level(logging.INFO, logger="tycoon.session")
    session = _make_session(9)
    assert not session.on_pointer_up(UnitKind.NEWBIE)
    assert session.company.cash == 9
    assert session.company.owned[UnitKind.NEWBIE] == 0
    assert "Can't buy that!" in caplog.text


def test_affordable_unit_is_hired():
    session = _make_session(25)
    assert session.on_pointer_up(UnitKind.PROFESSIONAL)
    assert session.company.owned[UnitKind.PROFESSIONAL] == 1
    assert session.company.cash == pytest.approx(0.0)


def test_click_ten_times_then_hire():
    session = GameSession()
    for _ in range(10):
        session.on_pointer_up(BONUS_REGION)
    assert session.on_pointer_up(UnitKind.NEWBIE)
    assert not session.on_pointer_up(UnitKind.NEWBIE)
    assert session.company.owned[UnitKind.NEWBIE] == 1


def test_snapshot():
    session = _make_session(30)
    session.on_pointer_up(UnitKind.NEWBIE)
    view = session.snapshot()
    assert isinstance(view, CompanyView)
    assert view.name == "Maratron Inc."
    assert view.cash == pytest.approx(20.0)
    assert view.income_per_second == pytest.approx(1.0)
    assert [u.kind for u in view.units] == list(UnitKind)

    newbie = view.unit(UnitKind.NEWBIE)
    assert newbie == UnitView(
        kind=UnitKind.NEWBIE,
        display_name="Newbie",
        owned=1,
        production=1,
        next_cost=12,
        affordable=True,
    )
    pro = view.unit(UnitKind.PROFESSIONAL)
    assert pro.next_cost == 25
    assert not pro.affordable
    assert [u.kind for u in view.affordable()] == [UnitKind.NEWBIE]


def test_snapshot_is_detached():
    session = _make_session(100)
    view = session.snapshot()
    session.on_pointer_up(UnitKind.NEWBIE)
    assert view.cash == 100
    assert view.unit(UnitKind.NEWBIE).owned == 0
