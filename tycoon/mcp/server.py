"""MCP server wrapping a GameSession for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from tycoon.config import GameConfig
from tycoon.formatting import format_money_label, format_unit_label
from tycoon.session import BONUS_REGION, GameSession
from tycoon.units import UnitKind

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum clicks per ask_for_money() call
_MAX_CLICKS = 1000


@dataclass
class _SessionHolder:
    """Holds the active session and the frame length used by wait()."""

    config: GameConfig
    session: GameSession
    frame_seconds: float = 1.0

    def __post_init__(self) -> None:
        if self.frame_seconds <= 0:
            raise ValueError(f"frame_seconds must be > 0, got {self.frame_seconds}")


def _lookup_unit(unit: str) -> UnitKind | None:
    try:
        return UnitKind[unit.strip().upper()]
    except KeyError:
        return None


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_company_state(holder: _SessionHolder) -> dict[str, Any]:
    view = holder.session.snapshot()
    return {
        "name": view.name,
        "cash": round(view.cash, 2),
        "income_per_second": view.income_per_second,
        "time_elapsed": round(view.time_elapsed, 2),
        "owned": {u.kind.name: u.owned for u in view.units},
        "money_label": format_money_label(view),
    }


def _tool_get_hire_options(holder: _SessionHolder) -> dict[str, Any]:
    view = holder.session.snapshot()
    options = []
    for u in view.units:
        entry: dict[str, Any] = {
            "unit": u.kind.name,
            "display_name": u.display_name,
            "owned": u.owned,
            "production": u.production,
            "next_cost": u.next_cost,
            "affordable": u.affordable,
            "label": format_unit_label(u),
        }
        if u.affordable:
            entry["time_to_afford"] = 0.0
        elif view.income_per_second > 0:
            needed = u.next_cost - view.cash
            entry["time_to_afford"] = round(needed / view.income_per_second, 2)
        else:
            entry["time_to_afford"] = None
        options.append(entry)
    return {"options": options}


def _tool_hire(holder: _SessionHolder, unit: str) -> dict[str, Any]:
    kind = _lookup_unit(unit)
    if kind is None:
        return {"error": f"Unknown unit: {unit!r}"}

    company = holder.session.company
    cost = company.next_cost(kind)
    if not holder.session.on_pointer_up(kind):
        return {
            "success": False,
            "reason": "Insufficient funds",
            "cost": cost,
            "cash": round(company.cash, 2),
        }
    return {
        "success": True,
        "unit": kind.name,
        "cost": cost,
        "new_count": company.owned[kind],
        "cash": round(company.cash, 2),
    }


def _tool_ask_for_money(holder: _SessionHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    for _ in range(count):
        holder.session.on_pointer_up(BONUS_REGION)
    return {
        "clicks": count,
        "total_earned": round(count * holder.config.bonus_amount, 2),
        "new_balance": round(holder.session.company.cash, 2),
    }


def _tool_wait(holder: _SessionHolder, seconds: float) -> dict[str, Any]:
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    company = holder.session.company
    cash_before = company.cash

    # Subdivide into frames
    remaining = seconds
    while remaining > 0:
        dt = min(holder.frame_seconds, remaining)
        holder.session.on_frame(dt)
        remaining -= dt

    return {
        "waited": seconds,
        "time_elapsed": round(company.time_elapsed, 2),
        "earned": round(company.cash - cash_before, 2),
        "cash": round(company.cash, 2),
    }


def _tool_new_game(holder: _SessionHolder) -> dict[str, Any]:
    holder.session = GameSession(holder.config)
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(config: GameConfig | None = None, frame_seconds: float = 1.0) -> FastMCP:
    """Create an MCP server wrapping a GameSession for the given config."""
    config = config if config is not None else GameConfig()
    holder = _SessionHolder(
        config=config,
        session=GameSession(config),
        frame_seconds=frame_seconds,
    )

    mcp = FastMCP(
        name=f"Tycoon: {config.company_name}",
    )

    @mcp.tool()
    def get_company_state() -> dict[str, Any]:
        """Get the company snapshot: cash, income per second, staff counts, time."""
        return _tool_get_company_state(holder)

    @mcp.tool()
    def get_hire_options() -> dict[str, Any]:
        """Get every unit kind with its next cost, affordability and time-to-afford."""
        return _tool_get_hire_options(holder)

    @mcp.tool()
    def hire(unit: str) -> dict[str, Any]:
        """Hire one unit (NEWBIE, PROFESSIONAL, EXPERT or NINJA). Fails if unaffordable."""
        return _tool_hire(holder, unit)

    @mcp.tool()
    def ask_for_money(count: int = 1) -> dict[str, Any]:
        """Press the bonus button N times (max 1000)."""
        return _tool_ask_for_money(holder, count)

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance game time by the given seconds (max 86400), one frame at a time."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the company to its initial state."""
        return _tool_new_game(holder)

    return mcp
