from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

import fire_fetch.cli

SAMPLE_TREE = {"a": 1, "b": {"c": 2}}


def _collapse(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: True if isinstance(child, dict) else child for key, child in value.items()}
    return value


class FakeReader:
    """In-memory DatabaseReader backed by a nested dict."""

    def __init__(self, tree: Any = None, error: Exception | None = None) -> None:
        self.tree = tree
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def _lookup(self, path: str) -> Any:
        node = self.tree
        for part in [p for p in path.split("/") if p]:
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return copy.deepcopy(node)

    def get(self, path: str) -> Any:
        self.calls.append(("get", path))
        if self.error:
            raise self.error
        return self._lookup(path)

    def get_shallow(self, path: str) -> Any:
        self.calls.append(("get_shallow", path))
        if self.error:
            raise self.error
        return _collapse(self._lookup(path))


class FakeClientFactory:
    """Stands in for RealtimeDatabaseClient, yielding a FakeReader."""

    def __init__(self, reader: FakeReader) -> None:
        self.reader = reader
        self.created_with: list[dict[str, Any]] = []
        self.closed = False

    def __call__(self, **kwargs: Any) -> FakeClientFactory:
        self.created_with.append(kwargs)
        return self

    def __enter__(self) -> FakeReader:
        return self.reader

    def __exit__(self, *exc: object) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("FIRE_URL", "FIRE_ACCOUNT", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(fire_fetch.cli, "load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def fire_env(monkeypatch, tmp_path):
    account = tmp_path / "service-account.json"
    account.write_text(
        '{"type": "service_account", "project_id": "demo", "client_email": "sa@demo.iam.gserviceaccount.com"}'
    )
    monkeypatch.setenv("FIRE_URL", "https://demo-default-rtdb.firebaseio.com/")
    monkeypatch.setenv("FIRE_ACCOUNT", str(account))
    return account


@pytest.fixture
def sample_reader() -> FakeReader:
    return FakeReader(SAMPLE_TREE)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
