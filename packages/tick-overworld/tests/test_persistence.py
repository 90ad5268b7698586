"""Tests for key-value stores and the game repository."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from tick_overworld import (
    GRASS,
    LAND,
    WATER,
    FileStore,
    GameRepository,
    GameState,
    MemoryStore,
    PersistenceError,
)
from tick_overworld.persistence import ENCOUNTERS_KEY, GAME_STATE_KEY


def _state() -> GameState:
    return GameState(
        rows=3,
        columns=3,
        cursor=4,
        grid=[LAND, WATER, GRASS, GRASS, LAND, LAND, WATER, WATER, GRASS],
        encounters=["Pokemon 1", "Pokemon 2"],
    )


class FailingStore(MemoryStore):
    def set(self, key: str, value: str) -> None:
        raise OSError("disk full")


@pytest.fixture(params=["memory", "file"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> MemoryStore | FileStore:
    if request.param == "memory":
        return MemoryStore()
    return FileStore(tmp_path / "saves")


class TestStores:
    def test_missing_key_is_none(self, store: MemoryStore | FileStore) -> None:
        assert store.get("nothing") is None

    def test_set_and_get(self, store: MemoryStore | FileStore) -> None:
        store.set("k", "value")
        assert store.get("k") == "value"

    def test_overwrite(self, store: MemoryStore | FileStore) -> None:
        store.set("k", "one")
        store.set("k", "two")
        assert store.get("k") == "two"

    def test_delete(self, store: MemoryStore | FileStore) -> None:
        store.set("k", "value")
        store.delete("k")
        assert store.get("k") is None

    def test_delete_missing_no_error(self, store: MemoryStore | FileStore) -> None:
        store.delete("never-set")  # should not raise


class TestFileStore:
    def test_creates_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"
        FileStore(target)
        assert target.is_dir()

    def test_key_with_separator_stays_inside_directory(self, tmp_path: Path) -> None:
        fs = FileStore(tmp_path)
        fs.set("../escape/key", "x")
        assert fs.get("../escape/key") == "x"
        files = list(tmp_path.iterdir())
        assert len(files) == 1
        assert files[0].parent == tmp_path

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        fs = FileStore(tmp_path)
        fs.set("gameState", "{}")
        fs.set("gameState", "{}")
        assert [p.name for p in tmp_path.iterdir()] == ["gameState.json"]

    def test_values_survive_new_instance(self, tmp_path: Path) -> None:
        FileStore(tmp_path).set("k", "persisted")
        assert FileStore(tmp_path).get("k") == "persisted"


class TestGameRepository:
    def test_load_without_save_is_none(self, store: MemoryStore | FileStore) -> None:
        assert GameRepository(store).load() is None

    def test_save_then_load_is_identical(self, store: MemoryStore | FileStore) -> None:
        repo = GameRepository(store)
        state = _state()
        repo.save(state)
        loaded = repo.load()
        assert loaded == state
        assert loaded is not state

    def test_saved_blob_layout(self) -> None:
        store = MemoryStore()
        GameRepository(store).save(_state())
        data = json.loads(store.get(GAME_STATE_KEY))
        assert data["version"] == 1
        assert data["rows"] == 3
        assert data["columns"] == 3
        assert data["cursorPosition"] == 4
        assert data["mapData"] == _state().grid
        assert data["pokemonList"] == ["Pokemon 1", "Pokemon 2"]

    def test_custom_key(self) -> None:
        store = MemoryStore()
        GameRepository(store, key="slot-2").save(_state())
        assert store.keys() == ["slot-2"]
        assert GameRepository(store, key="slot-2").load() == _state()
        assert GameRepository(store).load() is None

    def test_corrupted_blob_raises(self, store: MemoryStore | FileStore) -> None:
        repo = GameRepository(store)
        repo.save(_state())
        store.set(GAME_STATE_KEY, store.get(GAME_STATE_KEY)[:-10])
        with pytest.raises(PersistenceError) as exc_info:
            repo.load()
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_undecodable_bytes_raise(self, tmp_path: Path) -> None:
        repo = GameRepository(FileStore(tmp_path))
        repo.save(_state())
        (tmp_path / "gameState.json").write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(PersistenceError) as exc_info:
            repo.load()
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_deeply_nested_blob_raises(self) -> None:
        store = MemoryStore()
        store.set(GAME_STATE_KEY, "[" * 200000)
        with pytest.raises(PersistenceError):
            GameRepository(store).load()

    def test_float_terrain_code_raises(self) -> None:
        store = MemoryStore()
        data = {"version": 1, **_state().to_dict()}
        data["mapData"][0] = 1.0
        store.set(GAME_STATE_KEY, json.dumps(data))
        with pytest.raises(PersistenceError, match="Unknown terrain code"):
            GameRepository(store).load()

    def test_store_write_failure_raises(self) -> None:
        with pytest.raises(PersistenceError) as exc_info:
            GameRepository(FailingStore()).save(_state())
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_non_object_blob_raises(self) -> None:
        store = MemoryStore()
        store.set(GAME_STATE_KEY, "[1, 2, 3]")
        with pytest.raises(PersistenceError):
            GameRepository(store).load()

    def test_inconsistent_blob_raises(self) -> None:
        store = MemoryStore()
        data = {"version": 1, **_state().to_dict()}
        data["mapData"] = data["mapData"][:4]
        store.set(GAME_STATE_KEY, json.dumps(data))
        with pytest.raises(PersistenceError) as exc_info:
            GameRepository(store).load()
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_missing_field_raises(self) -> None:
        store = MemoryStore()
        store.set(GAME_STATE_KEY, json.dumps({"version": 1, "rows": 3}))
        with pytest.raises(PersistenceError) as exc_info:
            GameRepository(store).load()
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_legacy_unversioned_save_loads(self) -> None:
        store = MemoryStore()
        store.set(GAME_STATE_KEY, json.dumps(_state().to_dict()))
        assert GameRepository(store).load() == _state()

    def test_future_version_rejected(self) -> None:
        store = MemoryStore()
        store.set(GAME_STATE_KEY, json.dumps({"version": 2, **_state().to_dict()}))
        with pytest.raises(PersistenceError, match="Unsupported save version"):
            GameRepository(store).load()

    @pytest.mark.parametrize("version", ["1", -1, True, 1.5])
    def test_malformed_version_rejected(self, version: object) -> None:
        store = MemoryStore()
        store.set(GAME_STATE_KEY, json.dumps({"version": version, **_state().to_dict()}))
        with pytest.raises(PersistenceError):
            GameRepository(store).load()


class TestEncounterLog:
    def test_round_trip(self, store: MemoryStore | FileStore) -> None:
        repo = GameRepository(store)
        repo.save_encounters(["Pokemon 1"])
        assert repo.load_encounters() == ["Pokemon 1"]

    def test_absent_is_none(self, store: MemoryStore | FileStore) -> None:
        assert GameRepository(store).load_encounters() is None

    def test_corrupted_raises(self) -> None:
        store = MemoryStore()
        store.set(ENCOUNTERS_KEY, "not json")
        with pytest.raises(PersistenceError):
            GameRepository(store).load_encounters()

    def test_write_failure_raises(self) -> None:
        with pytest.raises(PersistenceError):
            GameRepository(FailingStore()).save_encounters(["Pokemon 1"])

    def test_wrong_shape_raises(self) -> None:
        store = MemoryStore()
        store.set(ENCOUNTERS_KEY, json.dumps({"a": 1}))
        with pytest.raises(PersistenceError):
            GameRepository(store).load_encounters()

    def test_clear_removes_both_keys(self, store: MemoryStore | FileStore) -> None:
        repo = GameRepository(store)
        repo.save(_state())
        repo.save_encounters(["Pokemon 1"])
        repo.clear()
        assert repo.load() is None
        assert repo.load_encounters() is None
