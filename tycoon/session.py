from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tycoon.company import Company
from tycoon.config import GameConfig
from tycoon.units import UnitKind

logger = logging.getLogger(__name__)


class Region(Enum):
    """Clickable regions that are not a unit kind."""

    BONUS = "bonus"


BONUS_REGION = Region.BONUS

PointerHit = UnitKind | Region | None


@dataclass(frozen=True)
class UnitView:
    """Read-only snapshot of one unit kind for display binding."""

    kind: UnitKind
    display_name: str
    owned: int
    production: float
    next_cost: int
    affordable: bool


@dataclass(frozen=True)
class CompanyView:
    """Read-only snapshot of the company for display binding."""

    name: str
    cash: float
    income_per_second: float
    time_elapsed: float
    units: tuple[UnitView, ...]

    def unit(self, kind: UnitKind) -> UnitView:
        for view in self.units:
            if view.kind is kind:
                return view
        raise KeyError(kind)

    def affordable(self) -> list[UnitView]:
        return [u for u in self.units if u.affordable]


class GameSession:
    """Frame and pointer driver around the session's single Company."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.company = Company(self.config)
        self.last_update_time: float | None = None

    # ── Frame input ──────────────────────────────────────────────────

    def update(self, current_time: float) -> None:
        """Advance to the absolute frame timestamp *current_time*."""
        if self.last_update_time is None:
            delta = 0.0
        else:
            delta = current_time - self.last_update_time
        self.on_frame(delta)
        self.last_update_time = current_time

    def on_frame(self, delta: float) -> None:
        self.company.tick(delta)

    # ── Pointer input ────────────────────────────────────────────────

    def on_pointer_up(self, hit: PointerHit) -> bool:
        """Route a click to the ledger. Returns True if the state changed."""
        if hit is None:
            return False

        if hit is BONUS_REGION:
            self.company.inject_cash(self.config.bonus_amount)
            return True

        count = self.company.owned[hit]
        if not self.company.can_hire(hit, count + 1):
            logger.info("Can't buy that! (%s)", hit.display_name)
            return False
        return self.company.hire(hit).success

    # ── Display binding ──────────────────────────────────────────────

    def snapshot(self) -> CompanyView:
        company = self.company
        units = tuple(
            UnitView(
                kind=kind,
                display_name=kind.display_name,
                owned=count,
                production=kind.production,
                next_cost=company.next_cost(kind),
                affordable=company.can_hire(kind, count + 1),
            )
            for kind, count in company.owned.items()
        )
        return CompanyView(
            name=company.name,
            cash=company.cash,
            income_per_second=company.income_per_second(),
            time_elapsed=company.time_elapsed,
            units=units,
        )
