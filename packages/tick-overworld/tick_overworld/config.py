"""Map configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_overworld.types import ConfigurationError

# Fields whose change invalidates the current map.
REGENERATING_FIELDS = frozenset({"rows", "columns", "water_pct", "grass_pct"})


@dataclass(frozen=True)
class MapConfig:
    """Immutable configuration for map generation and encounters.

    Attributes:
        rows: Grid height in cells (>= 1).
        columns: Grid width in cells (>= 1).
        water_pct: Share of cells targeted for the water zone, 0..100.
        grass_pct: Share of cells targeted for the grass zone, 0..100.
        land_pct: Informational only. Land is whatever the zones leave behind.
        encounter_rate: Chance of an encounter per move onto grass, 0..1.
        encounter_label: Prefix for encounter labels ("Pokemon 1", ...).
        autosave_encounters: Mirror the encounter log to the store on each encounter.
    """

    rows: int = 10
    columns: int = 10
    water_pct: float = 20
    grass_pct: float = 20
    land_pct: float = 60
    encounter_rate: float = 0.2
    encounter_label: str = "Pokemon"
    autosave_encounters: bool = True

    def __post_init__(self) -> None:
        for name in ("rows", "columns"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")
        for name in ("water_pct", "grass_pct", "land_pct"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ConfigurationError(f"{name} must be in [0, 100], got {value}")
        if not 0.0 <= self.encounter_rate <= 1.0:
            raise ConfigurationError(
                f"encounter_rate must be in [0, 1], got {self.encounter_rate}"
            )

    @property
    def size(self) -> int:
        return self.rows * self.columns
