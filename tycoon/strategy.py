from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from tycoon.session import CompanyView
from tycoon.units import UnitKind


@dataclass
class ClickProfile:
    """Configures how often a strategy presses the bonus button."""

    bonus_cps: float = 0.0
    _carry: float = field(default=0.0, init=False, repr=False)

    def get_clicks(self, duration: float) -> int:
        """Return the number of bonus clicks during *duration* seconds.

        Fractional clicks carry over to the next call so low rates at small
        frame lengths still click.
        """
        if self.bonus_cps <= 0 or duration <= 0:
            return 0
        self._carry += self.bonus_cps * duration
        clicks = int(self._carry)
        self._carry -= clicks
        return clicks

    def reset(self) -> None:
        self._carry = 0.0


class Strategy(ABC):
    """Base class for simulation strategies."""

    def __init__(self, click_profile: ClickProfile | None = None) -> None:
        self.click_profile = click_profile

    @abstractmethod
    def decide_hires(self, view: CompanyView) -> list[UnitKind]:
        """Return ordered list of unit kinds to try hiring this frame."""
        ...

    def get_clicks(self, duration: float) -> int:
        """Return bonus clicks during this frame. Override or use click_profile."""
        if self.click_profile:
            return self.click_profile.get_clicks(duration)
        return 0

    def reset(self) -> None:
        """Clear per-run state before a new playthrough."""
        if self.click_profile:
            self.click_profile.reset()

    @abstractmethod
    def describe(self) -> str: ...

    def _describe_clicks(self) -> str:
        if self.click_profile and self.click_profile.bonus_cps > 0:
            return f" ({self.click_profile.bonus_cps} CPS)"
        return ""


class GreedyCheapest(Strategy):
    """Hire the cheapest affordable unit first."""

    def decide_hires(self, view: CompanyView) -> list[UnitKind]:
        affordable = sorted(view.affordable(), key=lambda u: u.next_cost)
        return [u.kind for u in affordable]

    def describe(self) -> str:
        return "GreedyCheapest" + self._describe_clicks()


class GreedyROI(Strategy):
    """Hire the affordable unit with the best production per unit of cost."""

    def decide_hires(self, view: CompanyView) -> list[UnitKind]:
        scored = sorted(
            view.affordable(), key=lambda u: -(u.production / u.next_cost)
        )
        return [u.kind for u in scored]

    def describe(self) -> str:
        return "GreedyROI" + self._describe_clicks()


class SaveForBest(Strategy):
    """Save up for the best-ROI unit instead of buying whatever is affordable."""

    def __init__(self, click_profile: ClickProfile | None = None) -> None:
        super().__init__(click_profile)
        self._saving_for: UnitKind | None = None

    def decide_hires(self, view: CompanyView) -> list[UnitKind]:
        if self._saving_for is None:
            best = max(view.units, key=lambda u: u.production / u.next_cost)
            self._saving_for = best.kind

        target = view.unit(self._saving_for)
        if target.affordable:
            self._saving_for = None
            return [target.kind]
        return []

    def reset(self) -> None:
        super().reset()
        self._saving_for = None

    def describe(self) -> str:
        return "SaveForBest" + self._describe_clicks()


class PriorityList(Strategy):
    """Follow a designer-specified hiring order."""

    def __init__(
        self,
        priorities: list[tuple[UnitKind, int]],
        fallback: Strategy | None = None,
        click_profile: ClickProfile | None = None,
    ) -> None:
        super().__init__(click_profile)
        self.priorities = priorities  # (kind, target_count)
        self.fallback = fallback

    def decide_hires(self, view: CompanyView) -> list[UnitKind]:
        for kind, target_count in self.priorities:
            unit = view.unit(kind)
            if unit.owned < target_count:
                # Wait for this one rather than skipping ahead
                return [kind] if unit.affordable else []

        if self.fallback:
            return self.fallback.decide_hires(view)
        return []

    def reset(self) -> None:
        super().reset()
        if self.fallback:
            self.fallback.reset()

    def describe(self) -> str:
        items = ", ".join(f"{kind.display_name}x{cnt}" for kind, cnt in self.priorities)
        return f"PriorityList([{items}])" + self._describe_clicks()


STRATEGY_REGISTRY: dict[str, type[Strategy]] = {
    "greedy_cheapest": GreedyCheapest,
    "greedy_roi": GreedyROI,
    "save_for_best": SaveForBest,
}
