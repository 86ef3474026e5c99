from __future__ import annotations

import logging

from tycoon.config import GameConfig
from tycoon.metrics import TIME_EPSILON, MetricsCollector
from tycoon.report import SimulationReport, build_report
from tycoon.session import BONUS_REGION, GameSession
from tycoon.strategy import Strategy

logger = logging.getLogger(__name__)

MAX_TICKS = 10_000_000


class Simulation:
    """Orchestrates a headless fixed-step playthrough of a session."""

    def __init__(
        self,
        strategy: Strategy,
        config: GameConfig | None = None,
        duration: float = 3600.0,
        tick_resolution: float = 1.0,
    ) -> None:
        if tick_resolution <= 0:
            raise ValueError(f"tick_resolution must be > 0, got {tick_resolution}")
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")

        self.strategy = strategy
        self.duration = duration
        self.tick_resolution = tick_resolution

        self.session = GameSession(config)
        self.collector = MetricsCollector(snapshot_interval=tick_resolution)

    def run(self) -> SimulationReport:
        company = self.session.company
        tick_count = 0
        self.strategy.reset()
        logger.info(
            "Simulating %s for %.1fs with %s",
            company.name, self.duration, self.strategy.describe(),
        )

        self.collector.record_tick(company)
        while company.time_elapsed < self.duration - TIME_EPSILON:
            tick_count += 1
            if tick_count > MAX_TICKS:
                return self._build_report("Max ticks reached")

            # 1. Advance one frame
            self.session.on_frame(self.tick_resolution)

            # 2. Bonus clicks
            clicks = self.strategy.get_clicks(self.tick_resolution)
            if clicks > 0:
                for _ in range(clicks):
                    self.session.on_pointer_up(BONUS_REGION)
                self.collector.record_bonus(
                    company, clicks, clicks * self.session.config.bonus_amount
                )

            # 3. Hires
            for kind in self.strategy.decide_hires(self.session.snapshot()):
                cost = company.next_cost(kind)
                if self.session.on_pointer_up(kind):
                    self.collector.record_hire(company, kind, cost)

            # 4. Record metrics
            self.collector.record_tick(company)

        return self._build_report("Duration reached")

    def _build_report(self, outcome: str) -> SimulationReport:
        company = self.session.company
        return build_report(
            collector=self.collector,
            company_name=company.name,
            strategy_description=self.strategy.describe(),
            outcome=outcome,
            total_time=company.time_elapsed,
            final_cash=company.cash,
            final_income=company.income_per_second(),
            total_earned=company.total_earned,
            final_owned={kind.name: count for kind, count in company.owned.items()},
        )
