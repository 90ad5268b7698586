"""Save and load game state through a key-value store."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import quote

from tick_overworld.state import GameState
from tick_overworld.types import PersistenceError

log = logging.getLogger(__name__)

_SAVE_VERSION = 1

GAME_STATE_KEY = "gameState"
ENCOUNTERS_KEY = "pokemonList"

_MISSING = object()


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store. Contents live as long as the object."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class FileStore:
    """One UTF-8 text file per key inside ``directory``.

    Writes go to a temporary file in the same directory and are renamed into
    place, so a reader never sees a half-written value.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._directory / f"{quote(key, safe='')}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class GameRepository:
    """Serializes a GameState to a single JSON blob under a fixed key."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = GAME_STATE_KEY,
        encounters_key: str = ENCOUNTERS_KEY,
    ) -> None:
        self._store = store
        self._key = key
        self._encounters_key = encounters_key

    def save(self, state: GameState) -> None:
        """Write the state under the fixed key. Raises PersistenceError if the store fails."""
        payload = {"version": _SAVE_VERSION, **state.to_dict()}
        self._write(self._key, json.dumps(payload))
        log.debug("saved %dx%d game under %r", state.rows, state.columns, self._key)

    def load(self) -> GameState | None:
        """Return the saved state, or None if nothing has been saved.

        Raises PersistenceError if the stored blob cannot be read or decoded,
        has an unsupported version, or describes an inconsistent state.
        """
        data = self._read(self._key)
        if data is _MISSING:
            log.debug("no saved game under %r", self._key)
            return None
        if not isinstance(data, dict):
            raise PersistenceError(
                f"Corrupted save under {self._key!r}: expected an object, "
                f"got {type(data).__name__}"
            )

        data = _migrate(data)
        try:
            return GameState.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            log.warning("saved game under %r failed validation: %s", self._key, exc)
            raise PersistenceError(f"Invalid save under {self._key!r}: {exc}") from exc

    def save_encounters(self, encounters: list[str]) -> None:
        self._write(self._encounters_key, json.dumps(list(encounters)))

    def load_encounters(self) -> list[str] | None:
        data = self._read(self._encounters_key)
        if data is _MISSING:
            return None
        if not isinstance(data, list) or not all(isinstance(e, str) for e in data):
            raise PersistenceError(
                f"Encounter log under {self._encounters_key!r} must be a list of strings"
            )
        return data

    def clear(self) -> None:
        self._store.delete(self._key)
        self._store.delete(self._encounters_key)

    def _read(self, key: str) -> Any:
        """Decode the JSON value under ``key``, or return _MISSING if the key is absent."""
        try:
            raw = self._store.get(key)
            if raw is None:
                return _MISSING
            return json.loads(raw)
        except (OSError, ValueError, RecursionError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError.
            log.warning("value under %r could not be read: %s", key, exc)
            raise PersistenceError(f"Corrupted value under {key!r}: {exc}") from exc

    def _write(self, key: str, value: str) -> None:
        try:
            self._store.set(key, value)
        except OSError as exc:
            raise PersistenceError(f"Could not write {key!r}: {exc}") from exc


def _migrate(data: dict[str, Any]) -> dict[str, Any]:
    """Bring a decoded save up to the current version."""
    version = data.get("version", 0)
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise PersistenceError(f"Invalid save version {version!r}")
    if version > _SAVE_VERSION:
        raise PersistenceError(
            f"Unsupported save version {version!r}, expected at most {_SAVE_VERSION}"
        )
    if version == 0:
        # Unversioned saves share the v1 field layout.
        log.info("migrating unversioned save to version %d", _SAVE_VERSION)
        data = {**data, "version": _SAVE_VERSION}
    return data
