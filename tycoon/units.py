from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto


class ProductionMode(Enum):
    """How per-frame production is derived from the elapsed time."""

    QUANTIZED = auto()
    SMOOTH = auto()


class UnitKind(Enum):
    """Tiers of hirable programmers."""

    NEWBIE = auto()
    PROFESSIONAL = auto()
    EXPERT = auto()
    NINJA = auto()

    @property
    def spec(self) -> UnitSpec:
        return UNIT_SPECS[self]

    @property
    def display_name(self) -> str:
        return UNIT_SPECS[self].display_name

    @property
    def base_cost(self) -> float:
        return UNIT_SPECS[self].base_cost

    @property
    def production(self) -> float:
        return UNIT_SPECS[self].production

    @property
    def cost_growth_ratio(self) -> float:
        return UNIT_SPECS[self].cost_growth_ratio


@dataclass(frozen=True)
class UnitSpec:
    """Static definition of a unit kind."""

    display_name: str
    base_cost: float
    production: float
    cost_growth_ratio: float = 1.1


UNIT_SPECS: dict[UnitKind, UnitSpec] = {
    UnitKind.NEWBIE: UnitSpec("Newbie", base_cost=10, production=1),
    UnitKind.PROFESSIONAL: UnitSpec('"Pro"', base_cost=25, production=5),
    UnitKind.EXPERT: UnitSpec("Expert", base_cost=150, production=10),
    UnitKind.NINJA: UnitSpec("Ninja", base_cost=1000, production=50),
}


def cost_for_count(kind: UnitKind, count: int) -> int:
    """Price of the unit that would become the *count*-th owned one.

    The first unit costs the flat base cost; after that the price is
    ``base_cost * ratio ** count``, truncated to a whole amount.
    """
    if count <= 0:
        raise ValueError(f"count must be at least 1, got {count}")
    spec = UNIT_SPECS[kind]
    if count == 1:
        return math.floor(spec.base_cost)
    return math.floor(spec.base_cost * spec.cost_growth_ratio ** count)


def production_for_interval(
    kind: UnitKind,
    delta: float,
    mode: ProductionMode = ProductionMode.QUANTIZED,
) -> float:
    """Money one unit of *kind* earns during a frame of *delta* seconds.

    In quantized mode the frame rate implied by *delta* is rounded up to a
    whole number of ticks per second and each tick earns an even share of the
    per-second production, so jittery frames produce a stepped rate.
    """
    if delta <= 0:
        return 0.0
    production = UNIT_SPECS[kind].production
    if mode is ProductionMode.SMOOTH:
        return production * delta
    return production * (1 / math.ceil(1.0 / delta))


def validate_catalog(specs: dict[UnitKind, UnitSpec] | None = None) -> list[str]:
    """Check unit specs for broken invariants. Returns list of error messages."""
    specs = UNIT_SPECS if specs is None else specs
    errors: list[str] = []
    for kind in UnitKind:
        spec = specs.get(kind)
        if spec is None:
            errors.append(f"Unit {kind.name} has no spec")
            continue
        if spec.base_cost <= 0:
            errors.append(f"Unit {kind.name} has non-positive base_cost {spec.base_cost}")
        if spec.production <= 0:
            errors.append(f"Unit {kind.name} has non-positive production {spec.production}")
        if spec.cost_growth_ratio <= 1:
            errors.append(
                f"Unit {kind.name} has cost_growth_ratio {spec.cost_growth_ratio} (must be > 1)"
            )
    return errors
