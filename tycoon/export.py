from __future__ import annotations

import csv
import json
from pathlib import Path

from tycoon.report import SimulationReport


def export_csv(report: SimulationReport, path: str | Path) -> None:
    """Export simulation data as CSV files.

    Creates two files:
      - {path}_cash.csv
      - {path}_hires.csv
    """
    base = str(path)

    with open(f"{base}_cash.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "cash", "income_per_second", "total_earned", "owned_json"])
        for s in report.snapshots:
            writer.writerow([
                s.time,
                s.cash,
                s.income_per_second,
                s.total_earned,
                json.dumps(s.owned),
            ])

    with open(f"{base}_hires.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "unit", "cost", "new_count", "cash_after"])
        for h in report.hires:
            writer.writerow([h.time, h.unit, h.cost, h.new_count, h.cash_after])


def export_json(report: SimulationReport, path: str | Path) -> None:
    """Export full simulation report as JSON."""
    data = {
        "company": report.company_name,
        "strategy": report.strategy_description,
        "outcome": report.outcome,
        "total_time": report.total_time,
        "final_cash": report.final_cash,
        "final_income": report.final_income,
        "total_earned": report.total_earned,
        "bonus_earned": report.bonus_earned,
        "final_owned": report.final_owned,
        "hire_count": len(report.hires),
        "hires_per_minute": report.hires_per_minute,
        "max_hire_gap": report.max_hire_gap,
        "mean_hire_gap": report.mean_hire_gap,
        "hires": [
            {"time": h.time, "unit": h.unit, "cost": h.cost, "new_count": h.new_count}
            for h in report.hires
        ],
    }
    with open(str(path), "w") as f:
        json.dump(data, f, indent=2)
