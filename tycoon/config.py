from __future__ import annotations

from dataclasses import dataclass

from tycoon.units import ProductionMode, validate_catalog


@dataclass
class GameConfig:
    """Top-level game configuration."""

    company_name: str = "Maratron Inc."
    starting_cash: float = 0.0
    bonus_amount: float = 1.0
    production_mode: ProductionMode = ProductionMode.QUANTIZED

    def validate(self) -> list[str]:
        """Check for configuration errors. Returns list of error messages."""
        errors: list[str] = []
        if not self.company_name.strip():
            errors.append("company_name must not be blank")
        if self.starting_cash < 0:
            errors.append(f"starting_cash must be >= 0, got {self.starting_cash}")
        if self.bonus_amount <= 0:
            errors.append(f"bonus_amount must be > 0, got {self.bonus_amount}")
        if not isinstance(self.production_mode, ProductionMode):
            errors.append(f"Unknown production_mode: {self.production_mode!r}")
        errors.extend(validate_catalog())
        return errors

    def check(self) -> None:
        """Raise ValueError listing every problem found by validate()."""
        errors = self.validate()
        if errors:
            raise ValueError(
                "Invalid GameConfig:\n" + "\n".join(f"  - {e}" for e in errors)
            )
