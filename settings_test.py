import pytest

from todosync.settings import HOST, PORT, RemoteSourceSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ["TODO_SYNC_HOST", "TODO_SYNC_PORT", "TODO_SYNC_TIMEOUT"]:
        monkeypatch.delenv(var, raising=False)

    settings = RemoteSourceSettings.from_env()

    assert (settings.host, settings.port) == (HOST, PORT)
    assert settings.base_url == f"http://{HOST}:{PORT}"


def test_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TODO_SYNC_HOST", "todos.local")
    monkeypatch.setenv("TODO_SYNC_PORT", "8080")
    monkeypatch.setenv("TODO_SYNC_TIMEOUT", "0.5")

    settings = RemoteSourceSettings.from_env()

    assert settings == RemoteSourceSettings("todos.local", 8080, 0.5)
