# tycoon - Idle Company Game Core & Headless Playtest Simulation

from tycoon.units import (
    ProductionMode,
    UnitKind,
    UnitSpec,
    UNIT_SPECS,
    cost_for_count,
    production_for_interval,
    validate_catalog,
)
from tycoon.config import GameConfig
from tycoon.company import Company, HireResult
from tycoon.session import (
    BONUS_REGION,
    CompanyView,
    GameSession,
    Region,
    UnitView,
)
from tycoon.strategy import (
    Strategy,
    ClickProfile,
    GreedyCheapest,
    GreedyROI,
    SaveForBest,
    PriorityList,
)
from tycoon.metrics import MetricsCollector
from tycoon.simulation import Simulation
from tycoon.report import SimulationReport, build_report
from tycoon.formatting import format_money_label, format_unit_label, format_text_report

__all__ = [
    # Catalog
    "ProductionMode",
    "UnitKind",
    "UnitSpec",
    "UNIT_SPECS",
    "cost_for_count",
    "production_for_interval",
    "validate_catalog",
    # Config
    "GameConfig",
    # Ledger
    "Company",
    "HireResult",
    # Session
    "BONUS_REGION",
    "CompanyView",
    "GameSession",
    "Region",
    "UnitView",
    # Strategy
    "Strategy",
    "ClickProfile",
    "GreedyCheapest",
    "GreedyROI",
    "SaveForBest",
    "PriorityList",
    # Simulation
    "MetricsCollector",
    "Simulation",
    "SimulationReport",
    "build_report",
    # Formatting
    "format_money_label",
    "format_unit_label",
    "format_text_report",
]
