"""Session - owns configuration, game state, and the random source."""
from __future__ import annotations

import dataclasses
import logging
import os
import random
from dataclasses import dataclass
from typing import Any, Callable

from tick_overworld.config import REGENERATING_FIELDS, MapConfig
from tick_overworld.encounters import Encounter, EncounterEvaluator
from tick_overworld.mapgen import generate_state
from tick_overworld.navigation import Direction, direction_for_key, next_position
from tick_overworld.persistence import GameRepository
from tick_overworld.state import GameState, MapSnapshot
from tick_overworld.types import PersistenceError

log = logging.getLogger(__name__)

EncounterHook = Callable[[Encounter, GameState], None]


@dataclass(frozen=True)
class MoveResult:
    moved: bool
    position: int
    encounter: Encounter | None = None


class Session:
    """A single player's map, cursor, and encounter log.

    Everything runs synchronously on the caller's thread. Regeneration and
    load swap in a complete new GameState in one assignment.
    """

    def __init__(
        self,
        config: MapConfig | None = None,
        *,
        seed: int | None = None,
        repository: GameRepository | None = None,
    ) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._config = config if config is not None else MapConfig()
        self._evaluator = self._make_evaluator(self._config)
        self._repository = repository
        self._encounter_hooks: list[EncounterHook] = []
        self._state = generate_state(self._config, self._rng)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def config(self) -> MapConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @staticmethod
    def _make_evaluator(config: MapConfig) -> EncounterEvaluator:
        return EncounterEvaluator(rate=config.encounter_rate, label=config.encounter_label)

    def on_encounter(self, hook: EncounterHook) -> None:
        self._encounter_hooks.append(hook)

    def configure(self, **changes: Any) -> GameState:
        """Apply config changes. Map-shaping changes regenerate the map.

        Raises ConfigurationError for out-of-range values and TypeError for
        unknown fields; the session is left untouched in both cases.
        """
        new_config = dataclasses.replace(self._config, **changes)
        changed = {
            f.name for f in dataclasses.fields(MapConfig)
            if getattr(new_config, f.name) != getattr(self._config, f.name)
        }
        self._config = new_config
        self._evaluator = self._make_evaluator(new_config)
        if changed & REGENERATING_FIELDS:
            return self.regenerate()
        return self._state

    def regenerate(self) -> GameState:
        """Build a fresh map from the current config. The encounter log carries over."""
        state = generate_state(self._config, self._rng)
        state.encounters = list(self._state.encounters)
        self._state = state
        log.info(
            "regenerated %dx%d map (water %s%%, grass %s%%)",
            self._config.rows, self._config.columns,
            self._config.water_pct, self._config.grass_pct,
        )
        return state

    def move(self, direction: Direction) -> MoveResult:
        state = self._state
        target = next_position(state.grid, state.columns, state.cursor, direction)
        if target == state.cursor:
            log.debug("move %s from %d rejected", direction.value, state.cursor)
            return MoveResult(moved=False, position=state.cursor)

        state.cursor = target
        encounter = self._evaluator.evaluate(state.grid, target, state.encounters, self._rng)
        if encounter is not None:
            self._handle_encounter(encounter)
        return MoveResult(moved=True, position=target, encounter=encounter)

    def handle_key(self, key: str) -> MoveResult | None:
        """Move for a directional key name. Any other key is ignored and returns None."""
        direction = direction_for_key(key)
        if direction is None:
            return None
        return self.move(direction)

    def _handle_encounter(self, encounter: Encounter) -> None:
        log.info("encounter %r at %d", encounter.label, encounter.position)
        if self._repository is not None and self._config.autosave_encounters:
            try:
                self._repository.save_encounters(self._state.encounters)
            except PersistenceError as exc:
                # The move stands even when the mirror write fails.
                log.warning("encounter autosave failed: %s", exc)
        for hook in self._encounter_hooks:
            hook(encounter, self._state)

    def save(self) -> None:
        """Save the current state. Raises PersistenceError if the store fails."""
        repository = self._require_repository()
        repository.save(self._state)
        log.info("saved game (%d encounters)", len(self._state.encounters))

    def load(self) -> bool:
        """Replace the current state with the saved one.

        Returns False, leaving the session untouched, when nothing is saved.
        Raises PersistenceError if the saved data is unreadable.
        """
        repository = self._require_repository()
        loaded = repository.load()
        if loaded is None:
            log.info("no saved game to load")
            return False
        self._config = dataclasses.replace(
            self._config, rows=loaded.rows, columns=loaded.columns
        )
        self._state = loaded
        log.info("loaded %dx%d game", loaded.rows, loaded.columns)
        return True

    def snapshot(self) -> MapSnapshot:
        return self._state.snapshot()

    def _require_repository(self) -> GameRepository:
        if self._repository is None:
            raise PersistenceError("Session has no repository attached")
        return self._repository
