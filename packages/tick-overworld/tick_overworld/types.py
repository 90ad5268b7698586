"""Terrain definitions, shared aliases, and errors for tick-overworld."""
from __future__ import annotations

from dataclasses import dataclass

Grid = list[int]
Color = tuple[int, int, int]

WATER = 0
GRASS = 1
LAND = 2


@dataclass(frozen=True)
class TerrainDef:
    """Immutable terrain type definition.

    Attributes:
        code: Integer stored in the grid and in saved games.
        name: Display name.
        color: RGB color for renderers.
        passable: Whether the cursor may enter a cell of this terrain.
        encounters: Whether entering this terrain can trigger an encounter.
    """

    code: int
    name: str
    color: Color
    passable: bool = True
    encounters: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TerrainDef name must be non-empty")


TERRAIN: dict[int, TerrainDef] = {
    WATER: TerrainDef(code=WATER, name="Water", color=(173, 216, 230), passable=False),
    GRASS: TerrainDef(code=GRASS, name="Grass", color=(0, 128, 0), encounters=True),
    LAND: TerrainDef(code=LAND, name="Land", color=(245, 222, 179)),
}


def terrain_of(code: int) -> TerrainDef:
    """Look up the TerrainDef for a code. Raises KeyError for unknown codes."""
    try:
        return TERRAIN[code]
    except KeyError:
        raise KeyError(f"Unknown terrain code: {code!r}") from None


class ConfigurationError(ValueError):
    """Raised when map configuration is out of range (dimensions, percentages, rates)."""


class PersistenceError(Exception):
    """Raised on load failures (malformed blob, unsupported version) or a missing store."""
