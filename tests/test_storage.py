import json

from todolist.db import SQLiteStorage
from todolist.models import ListItem
from todolist.settings import get_settings
from todolist.storage import InMemoryStorage, get_storage
from todolist.store import ListStore


class TestInMemoryStorage:
    def test_get_missing_returns_none(self):
        assert InMemoryStorage().get("myList") is None

    def test_set_overwrites(self):
        storage = InMemoryStorage()
        storage.set("myList", "[]")
        storage.set("myList", "[1]")
        assert storage.get("myList") == "[1]"

    def test_initial_values_are_copied(self):
        initial = {"myList": "[]"}
        storage = InMemoryStorage(initial)
        storage.set("myList", "[2]")
        assert initial["myList"] == "[]"


class TestSQLiteStorage:
    def test_get_set_and_overwrite(self, tmp_path):
        storage = SQLiteStorage(str(tmp_path / "nested" / "list.db"))
        assert storage.get("myList") is None
        storage.set("myList", "[]")
        storage.set("myList", '[{"_id": "1"}]')
        assert storage.get("myList") == '[{"_id": "1"}]'

    def test_survives_reopen(self, tmp_path):
        path = str(tmp_path / "list.db")
        store = ListStore(SQLiteStorage(path))
        store.add_item(ListItem(id="1", text="milk"))
        store.add_item(ListItem(id="2", text="eggs", checked=True))

        reopened = ListStore(SQLiteStorage(path))
        reopened.load()
        assert reopened.list == store.list
        assert json.loads(SQLiteStorage(path).get("myList"))[1] == {
            "_id": "2",
            "_item": "eggs",
            "_checked": True,
        }


class TestSettingsAndFactory:
    def test_defaults(self, monkeypatch):
        for name in ("PERSISTENCE_BACKEND", "SQLITE_DB_PATH", "LIST_STORAGE_KEY", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.persistence_backend == "memory"
        assert settings.storage_key == "myList"
        assert settings.cors_allow_origins == ["*"]
        assert settings.log_level == "INFO"

    def test_unknown_backend_falls_back_to_memory(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "redis")
        assert get_settings().persistence_backend == "memory"
        assert isinstance(get_storage(), InMemoryStorage)

    def test_sqlite_backend(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "sqlite")
        monkeypatch.setenv("SQLITE_DB_PATH", str(tmp_path / "todolist.db"))
        assert isinstance(get_storage(), SQLiteStorage)

    def test_origins_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
        assert get_settings().cors_allow_origins == ["http://a.test", "http://b.test"]
