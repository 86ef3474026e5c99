from __future__ import annotations

from tycoon.report import SimulationReport
from tycoon.session import CompanyView, UnitView


def format_money_label(view: CompanyView) -> str:
    """Text of the cash line under the company name."""
    return f"Money: ${view.cash:.2f} - (${float(view.income_per_second)} / second)"


def format_unit_label(unit: UnitView) -> str:
    """Text of a unit's hire button."""
    return (
        f"{unit.display_name} - (+${float(unit.production)}/s)"
        f" - ${float(unit.next_cost)}"
    )


def format_text_report(report: SimulationReport) -> str:
    """Format a simulation report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " Tycoon Simulation Report " + "=" * 30)
    lines.append(f"Company: {report.company_name}")
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Result: {report.outcome} at {report.total_time:.1f}s")
    lines.append("")

    lines.append("ECONOMY:")
    lines.append(f"  Cash: ${report.final_cash:.2f}")
    lines.append(f"  Income: ${report.final_income:.1f} / second")
    lines.append(f"  Earned by staff: ${report.total_earned:.2f}")
    lines.append(f"  Earned by bonus: ${report.bonus_earned:.2f}")
    lines.append("")

    lines.append("STAFF:")
    for unit, count in report.final_owned.items():
        first = report.first_hire_time(unit)
        first_str = f"first at {first:.1f}s" if first is not None else "never hired"
        lines.append(f"  {unit:.<20s} {count:>5d}  ({first_str})")
    lines.append("")

    lines.append("HIRES:")
    lines.append(f"  Total: {len(report.hires)}")
    lines.append(f"  Rate: {report.hires_per_minute:.1f}/min")
    lines.append(f"  Max gap: {report.max_hire_gap:.1f}s")
    lines.append(f"  Mean gap: {report.mean_hire_gap:.1f}s")

    return "\n".join(lines)
