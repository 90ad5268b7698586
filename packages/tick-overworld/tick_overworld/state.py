"""GameState and its read-only snapshot."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tick_overworld.types import TERRAIN, Grid, terrain_of


@dataclass(frozen=True)
class MapSnapshot:
    """Read-only view of a session, handed to renderers."""

    rows: int
    columns: int
    grid: tuple[int, ...]
    cursor: int
    encounters: tuple[str, ...]

    def terrain_at(self, index: int) -> str:
        return terrain_of(self.grid[index]).name

    def cursor_cell(self) -> tuple[int, int]:
        """Cursor as (row, column)."""
        return divmod(self.cursor, self.columns)


@dataclass
class GameState:
    rows: int
    columns: int
    cursor: int
    grid: Grid
    encounters: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.grid)

    def snapshot(self) -> MapSnapshot:
        return MapSnapshot(
            rows=self.rows,
            columns=self.columns,
            grid=tuple(self.grid),
            cursor=self.cursor,
            encounters=tuple(self.encounters),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the saved-game layout (JSON-compatible)."""
        return {
            "rows": self.rows,
            "columns": self.columns,
            "cursorPosition": self.cursor,
            "mapData": list(self.grid),
            "pokemonList": list(self.encounters),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """Rebuild from the saved-game layout.

        Raises KeyError for missing fields, TypeError for wrong types and
        ValueError when the fields are inconsistent with each other.
        """
        rows = _require_int(data, "rows")
        columns = _require_int(data, "columns")
        cursor = _require_int(data, "cursorPosition")
        if rows < 1 or columns < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{columns}")

        map_data = data["mapData"]
        if not isinstance(map_data, list):
            raise TypeError(f"mapData must be a list, got {type(map_data).__name__}")
        for code in map_data:
            if type(code) is not int or code not in TERRAIN:
                raise ValueError(f"Unknown terrain code in mapData: {code!r}")
        if len(map_data) != rows * columns:
            raise ValueError(
                f"mapData has {len(map_data)} cells, expected {rows}x{columns}"
            )
        if not 0 <= cursor < len(map_data):
            raise ValueError(f"cursorPosition {cursor} outside grid of {len(map_data)}")

        encounters = data.get("pokemonList", [])
        if not isinstance(encounters, list) or not all(isinstance(e, str) for e in encounters):
            raise TypeError("pokemonList must be a list of strings")

        return cls(
            rows=rows,
            columns=columns,
            cursor=cursor,
            grid=list(map_data),
            encounters=list(encounters),
        )


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value
