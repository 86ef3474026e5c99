from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tycoon.company import Company
    from tycoon.units import UnitKind

# Tolerance for float accumulation of frame lengths
TIME_EPSILON = 1e-9


@dataclass
class CashSnapshot:
    time: float
    cash: float
    income_per_second: float
    total_earned: float
    owned: dict[str, int] = field(default_factory=dict)


@dataclass
class HireEvent:
    time: float
    unit: str
    cost: int
    new_count: int
    cash_after: float


@dataclass
class BonusEvent:
    time: float
    clicks: int
    amount: float


class MetricsCollector:
    """Collects simulation metrics at configurable intervals."""

    def __init__(self, snapshot_interval: float = 1.0) -> None:
        self.snapshot_interval = snapshot_interval
        self._last_snapshot_time: float | None = None

        self.snapshots: list[CashSnapshot] = []
        self.hires: list[HireEvent] = []
        self.bonuses: list[BonusEvent] = []

    def record_tick(self, company: Company) -> None:
        """Record a snapshot if enough time has passed. The first call always records."""
        if (
            self._last_snapshot_time is None
            or company.time_elapsed - self._last_snapshot_time
            >= self.snapshot_interval - TIME_EPSILON
        ):
            self._take_snapshot(company)
            self._last_snapshot_time = company.time_elapsed

    def record_hire(self, company: Company, kind: UnitKind, cost: int) -> None:
        self.hires.append(
            HireEvent(
                time=company.time_elapsed,
                unit=kind.name,
                cost=cost,
                new_count=company.owned[kind],
                cash_after=company.cash,
            )
        )

    def record_bonus(self, company: Company, clicks: int, amount: float) -> None:
        self.bonuses.append(
            BonusEvent(time=company.time_elapsed, clicks=clicks, amount=amount)
        )

    def _take_snapshot(self, company: Company) -> None:
        self.snapshots.append(
            CashSnapshot(
                time=company.time_elapsed,
                cash=company.cash,
                income_per_second=company.income_per_second(),
                total_earned=company.total_earned,
                owned={kind.name: count for kind, count in company.owned.items()},
            )
        )
