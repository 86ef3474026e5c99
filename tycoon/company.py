from __future__ import annotations

import logging
from dataclasses import dataclass

from tycoon.config import GameConfig
from tycoon.units import UnitKind, cost_for_count, production_for_interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HireResult:
    """Outcome of a hire attempt."""

    success: bool
    kind: UnitKind
    cost: int
    new_count: int
    reason: str = ""


class Company:
    """Mutable ledger for the single company of a session."""

    def __init__(self, config: GameConfig | None = None) -> None:
        config = config if config is not None else GameConfig()
        config.check()

        self.config = config
        self.name: str = config.company_name
        self.cash: float = config.starting_cash
        self.owned: dict[UnitKind, int] = {kind: 0 for kind in UnitKind}
        self.time_elapsed: float = 0.0
        self.total_earned: float = 0.0

    # ── Queries ──────────────────────────────────────────────────────

    def can_hire(self, kind: UnitKind, target_count: int) -> bool:
        """Whether cash covers the unit that would become *target_count*."""
        return self.cash >= cost_for_count(kind, target_count)

    def next_cost(self, kind: UnitKind) -> int:
        return cost_for_count(kind, self.owned[kind] + 1)

    def income_per_second(self) -> float:
        """Nominal production rate, ignoring frame quantization."""
        return sum(kind.production * count for kind, count in self.owned.items())

    # ── Mutations ────────────────────────────────────────────────────

    def hire(self, kind: UnitKind) -> HireResult:
        """Hire one more unit of *kind* if the company can pay for it."""
        count = self.owned[kind]
        cost = cost_for_count(kind, count + 1)
        if not self.can_hire(kind, count + 1):
            logger.debug(
                "%s cannot afford %s: cost %d, cash %.2f",
                self.name, kind.display_name, cost, self.cash,
            )
            return HireResult(
                success=False,
                kind=kind,
                cost=cost,
                new_count=count,
                reason="Insufficient funds",
            )

        self.cash -= cost
        self.owned[kind] = count + 1
        logger.info(
            "%s hired %s #%d for $%d", self.name, kind.display_name, count + 1, cost
        )
        return HireResult(success=True, kind=kind, cost=cost, new_count=count + 1)

    def tick(self, delta: float) -> None:
        """Accrue production for a frame of *delta* seconds."""
        earned = 0.0
        for kind, count in self.owned.items():
            if count <= 0:
                continue
            earned += count * production_for_interval(
                kind, delta, self.config.production_mode
            )
        self.cash += earned
        self.total_earned += earned
        if delta > 0:
            self.time_elapsed += delta

    def inject_cash(self, amount: float) -> None:
        self.cash += amount
