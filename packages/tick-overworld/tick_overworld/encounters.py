"""Random encounters on encounter-bearing terrain."""
from __future__ import annotations

import random
from dataclasses import dataclass

from tick_overworld.types import Grid, terrain_of

DEFAULT_RATE = 0.2


@dataclass(frozen=True)
class Encounter:
    label: str
    position: int
    number: int


class EncounterEvaluator:
    """Rolls for an encounter each time the cursor lands on grass.

    No cooldown: every successful move onto an encounter-bearing cell rolls
    again, including repeat visits to the same cell.
    """

    def __init__(self, rate: float = DEFAULT_RATE, label: str = "Pokemon") -> None:
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"rate must be in [0, 1], got {rate}")
        self._rate = rate
        self._label = label

    @property
    def rate(self) -> float:
        return self._rate

    def evaluate(
        self,
        grid: Grid,
        cursor: int,
        encounters: list[str],
        rng: random.Random,
    ) -> Encounter | None:
        """Roll at ``cursor``. On success appends the new label to ``encounters``.

        Cells that cannot produce encounters do not consume a random draw.
        """
        if not terrain_of(grid[cursor]).encounters:
            return None
        if rng.random() >= self._rate:
            return None
        number = len(encounters) + 1
        label = f"{self._label} {number}"
        encounters.append(label)
        return Encounter(label=label, position=cursor, number=number)
