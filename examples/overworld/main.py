"""Overworld - procedural map explorer with random encounters.

Walk the cursor around a generated map. Water blocks movement; every step
onto grass has a chance to capture a creature. Map settings regenerate the
map immediately.

Controls:
  Arrows/WASD  Move the cursor
  1 / 2        Rows -/+
  3 / 4        Columns -/+
  5 / 6        Water % -/+
  7 / 8        Grass % -/+
  9 / 0        Land % -/+ (informational)
  F5           Save game
  F9           Load game
  Escape       Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_overworld import (
    ConfigurationError,
    Encounter,
    FileStore,
    GameRepository,
    GameState,
    MapConfig,
    PersistenceError,
    Session,
)
from ui.constants import (
    COLOR_BG, COLOR_ERROR, COLOR_OK, COLOR_WARN, FPS, MAX_SIZE, MIN_SIZE, PCT_STEP,
    SCREEN_H, SCREEN_W,
)
from ui.log_panel import draw_encounter_log
from ui.renderer import draw_map
from ui.sidebar import draw_sidebar
from ui.status import StatusBar

# key -> (config field, delta)
SETTING_KEYS: dict[int, tuple[str, int]] = {
    pygame.K_1: ("rows", -1),
    pygame.K_2: ("rows", 1),
    pygame.K_3: ("columns", -1),
    pygame.K_4: ("columns", 1),
    pygame.K_5: ("water_pct", -PCT_STEP),
    pygame.K_6: ("water_pct", PCT_STEP),
    pygame.K_7: ("grass_pct", -PCT_STEP),
    pygame.K_8: ("grass_pct", PCT_STEP),
    pygame.K_9: ("land_pct", -PCT_STEP),
    pygame.K_0: ("land_pct", PCT_STEP),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Overworld - tick-overworld visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--rows", type=int, default=10, help="Map rows (3-40, default: 10)")
    p.add_argument("--columns", type=int, default=10, help="Map columns (3-40, default: 10)")
    p.add_argument("--water", type=int, default=20, help="Water percentage (default: 20)")
    p.add_argument("--grass", type=int, default=20, help="Grass percentage (default: 20)")
    p.add_argument("--land", type=int, default=60, help="Land percentage (default: 60)")
    p.add_argument("--save-dir", type=str, default=".overworld",
                   metavar="DIR", help="Directory for save files (default: .overworld)")
    args = p.parse_args()
    args.rows = max(MIN_SIZE, min(MAX_SIZE, args.rows))
    args.columns = max(MIN_SIZE, min(MAX_SIZE, args.columns))
    return args


def adjusted(config: MapConfig, field: str, delta: int) -> int:
    """Step a setting, clamped to what the input layer allows."""
    value = getattr(config, field) + delta
    if field in ("rows", "columns"):
        return max(MIN_SIZE, min(MAX_SIZE, value))
    return max(0, min(100, value))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    args = parse_args()

    try:
        config = MapConfig(
            rows=args.rows, columns=args.columns,
            water_pct=args.water, grass_pct=args.grass, land_pct=args.land,
        )
    except ConfigurationError as exc:
        sys.exit(f"Invalid settings: {exc}")

    session = Session(
        config,
        seed=args.seed,
        repository=GameRepository(FileStore(args.save_dir)),
    )
    status = StatusBar()
    status.set(f"Seed {session.seed}")

    def _on_encounter(encounter: Encounter, state: GameState) -> None:
        status.set(f"A wild creature has been caught! ({encounter.label})", COLOR_OK)

    session.on_encounter(_on_encounter)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Overworld - tick-overworld demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_F5:
                    try:
                        session.save()
                        status.set("Game saved", COLOR_OK)
                    except PersistenceError as exc:
                        status.set(f"Save failed: {exc}", COLOR_ERROR)
                elif event.key == pygame.K_F9:
                    try:
                        if session.load():
                            status.set("Game loaded", COLOR_OK)
                        else:
                            status.set("No saved game", COLOR_WARN)
                    except PersistenceError as exc:
                        status.set(f"Load failed: {exc}", COLOR_ERROR)
                elif event.key in SETTING_KEYS:
                    field, delta = SETTING_KEYS[event.key]
                    value = adjusted(session.config, field, delta)
                    try:
                        session.configure(**{field: value})
                    except ConfigurationError as exc:
                        status.set(str(exc), COLOR_ERROR)
                else:
                    result = session.handle_key(pygame.key.name(event.key))
                    if result is not None and not result.moved:
                        status.set("Blocked", COLOR_WARN)

        # --- Render ---
        snap = session.snapshot()
        screen.fill(COLOR_BG)
        draw_map(screen, snap)
        draw_sidebar(screen, font, session.config, snap)
        draw_encounter_log(screen, font, snap.encounters)
        status.draw(screen, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
