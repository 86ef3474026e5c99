from __future__ import annotations

import argparse
import logging
import sys

from tycoon.config import GameConfig
from tycoon.formatting import format_text_report
from tycoon.simulation import Simulation
from tycoon.strategy import STRATEGY_REGISTRY, ClickProfile, Strategy
from tycoon.units import ProductionMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tycoon",
        description="Tycoon - Idle Company Simulation CLI",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Run a headless playthrough")
    sim.add_argument(
        "--strategy",
        default="greedy_cheapest",
        choices=sorted(STRATEGY_REGISTRY),
        help="Strategy to use (default: greedy_cheapest)",
    )
    sim.add_argument("--cps", type=float, default=0.0, help="Bonus clicks per second")
    sim.add_argument(
        "--duration", type=float, default=3600, help="Simulated time (s)"
    )
    sim.add_argument(
        "--tick-resolution", type=float, default=1.0, help="Seconds per frame"
    )
    sim.add_argument(
        "--mode",
        default="quantized",
        choices=["quantized", "smooth"],
        help="Production accrual mode",
    )
    sim.add_argument("--company-name", default=None, help="Company name")
    sim.add_argument("--export-csv", default=None, help="CSV export path prefix")
    sim.add_argument("--export-json", default=None, help="JSON export path")
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")

    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig(production_mode=ProductionMode[args.mode.upper()])
    if args.company_name is not None:
        config.company_name = args.company_name
    return config


def build_strategy(name: str, cps: float) -> Strategy:
    click_profile = ClickProfile(bonus_cps=cps) if cps > 0 else None
    strategy_cls = STRATEGY_REGISTRY.get(name, STRATEGY_REGISTRY["greedy_cheapest"])
    return strategy_cls(click_profile=click_profile)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "simulate":
        config = build_config(args)
        errors = config.validate()
        if errors:
            for e in errors:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        try:
            sim = Simulation(
                strategy=build_strategy(args.strategy, args.cps),
                config=config,
                duration=args.duration,
                tick_resolution=args.tick_resolution,
            )
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)

        report = sim.run()
        print(format_text_report(report))

        if args.export_csv:
            from tycoon.export import export_csv
            export_csv(report, args.export_csv)
            print(f"\nCSV exported to {args.export_csv}_*.csv")

        if args.export_json:
            from tycoon.export import export_json
            export_json(report, args.export_json)
            print(f"\nJSON exported to {args.export_json}")

        if args.plot:
            from tycoon.visualization import plot_simulation
            plot_simulation(report, args.plot)
            print(f"\nPlot saved to {args.plot}")


if __name__ == "__main__":
    main()
