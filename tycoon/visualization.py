from __future__ import annotations

from tycoon.report import SimulationReport


def plot_simulation(
    report: SimulationReport,
    output_path: str | None = None,
) -> None:
    """Generate a 3-panel matplotlib visualization of simulation results.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install tycoon[viz]"
        )

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle(
        f"{report.company_name} - {report.strategy_description}",
        fontsize=14,
    )

    # 1. Cash over time
    ax1 = axes[0]
    series = report.cash_series()
    if series:
        times, values = zip(*series)
        ax1.plot(times, values, label="cash")
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("Cash ($)")
    ax1.set_title("Cash")
    ax1.grid(True, alpha=0.3)

    # 2. Income per second
    ax2 = axes[1]
    series = report.income_series()
    if series:
        times, rates = zip(*series)
        ax2.step(times, rates, where="post")
    ax2.set_xlabel("Time (s)")
    ax2.set_ylabel("Income ($/s)")
    ax2.set_title("Income")
    ax2.grid(True, alpha=0.3)

    # 3. Hire timeline
    ax3 = axes[2]
    if report.hires:
        units = list(report.final_owned) or sorted({h.unit for h in report.hires})
        y_map = {u: i for i, u in enumerate(units)}
        ax3.scatter(
            [h.time for h in report.hires],
            [y_map[h.unit] for h in report.hires],
            s=10,
            alpha=0.6,
        )
        ax3.set_yticks(range(len(units)))
        ax3.set_yticklabels(units, fontsize=8)
    ax3.set_xlabel("Time (s)")
    ax3.set_title("Hire Timeline")
    ax3.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()
