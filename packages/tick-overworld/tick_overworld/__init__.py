"""tick-overworld - Procedural terrain maps, cursor navigation, and encounters."""
from __future__ import annotations

from tick_overworld.config import MapConfig
from tick_overworld.encounters import Encounter, EncounterEvaluator
from tick_overworld.mapgen import generate_map, generate_state
from tick_overworld.navigation import Direction, direction_for_key, next_position
from tick_overworld.persistence import FileStore, GameRepository, KeyValueStore, MemoryStore
from tick_overworld.session import MoveResult, Session
from tick_overworld.state import GameState, MapSnapshot
from tick_overworld.types import (
    GRASS,
    LAND,
    TERRAIN,
    WATER,
    ConfigurationError,
    PersistenceError,
    TerrainDef,
    terrain_of,
)
from tick_overworld.zones import fill_zone

__all__ = [
    "MapConfig",
    "Encounter",
    "EncounterEvaluator",
    "generate_map",
    "generate_state",
    "Direction",
    "direction_for_key",
    "next_position",
    "FileStore",
    "GameRepository",
    "KeyValueStore",
    "MemoryStore",
    "MoveResult",
    "Session",
    "GameState",
    "MapSnapshot",
    "GRASS",
    "LAND",
    "TERRAIN",
    "WATER",
    "ConfigurationError",
    "PersistenceError",
    "TerrainDef",
    "terrain_of",
    "fill_zone",
]
