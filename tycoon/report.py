from __future__ import annotations

from dataclasses import dataclass, field

from tycoon.metrics import BonusEvent, CashSnapshot, HireEvent, MetricsCollector


@dataclass
class SimulationReport:
    """Container for simulation results and derived metrics."""

    company_name: str = ""
    strategy_description: str = ""
    outcome: str = ""
    total_time: float = 0.0

    # Raw metrics
    snapshots: list[CashSnapshot] = field(default_factory=list)
    hires: list[HireEvent] = field(default_factory=list)
    bonuses: list[BonusEvent] = field(default_factory=list)

    # Derived metrics
    final_cash: float = 0.0
    final_income: float = 0.0
    total_earned: float = 0.0
    bonus_earned: float = 0.0
    final_owned: dict[str, int] = field(default_factory=dict)
    hire_gaps: list[float] = field(default_factory=list)
    max_hire_gap: float = 0.0
    mean_hire_gap: float = 0.0
    hires_per_minute: float = 0.0

    def first_hire_time(self, unit: str) -> float | None:
        for h in self.hires:
            if h.unit == unit:
                return h.time
        return None

    def cash_series(self) -> list[tuple[float, float]]:
        """Return (time, cash) series."""
        return [(s.time, s.cash) for s in self.snapshots]

    def income_series(self) -> list[tuple[float, float]]:
        """Return (time, income per second) series."""
        return [(s.time, s.income_per_second) for s in self.snapshots]


def build_report(
    collector: MetricsCollector,
    company_name: str,
    strategy_description: str,
    outcome: str,
    total_time: float,
    final_cash: float,
    final_income: float,
    total_earned: float,
    final_owned: dict[str, int],
) -> SimulationReport:
    """Build a SimulationReport from collected metrics."""
    hire_gaps: list[float] = []
    hire_times = sorted(h.time for h in collector.hires)
    if hire_times:
        hire_gaps.append(hire_times[0])  # gap from t=0 to first hire
        for i in range(1, len(hire_times)):
            hire_gaps.append(hire_times[i] - hire_times[i - 1])

    max_gap = max(hire_gaps) if hire_gaps else 0.0
    mean_gap = (sum(hire_gaps) / len(hire_gaps)) if hire_gaps else 0.0
    hpm = (len(collector.hires) / total_time * 60.0) if total_time > 0 else 0.0

    return SimulationReport(
        company_name=company_name,
        strategy_description=strategy_description,
        outcome=outcome,
        total_time=total_time,
        snapshots=collector.snapshots,
        hires=collector.hires,
        bonuses=collector.bonuses,
        final_cash=final_cash,
        final_income=final_income,
        total_earned=total_earned,
        bonus_earned=sum(b.amount for b in collector.bonuses),
        final_owned=final_owned,
        hire_gaps=hire_gaps,
        max_hire_gap=max_gap,
        mean_hire_gap=mean_gap,
        hires_per_minute=hpm,
    )
