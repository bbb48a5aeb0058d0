from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the package importable when running tests from a plain checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from thelist.core import config as core_config  # noqa: E402
from thelist.db.store import Store  # noqa: E402
from thelist.repositories.people_repository import PeopleRepository  # noqa: E402


@pytest.fixture(autouse=True)
def settings_env(tmp_path, monkeypatch):
    """Point the default store at a temp file and reset the settings cache."""
    monkeypatch.setenv("THELIST_STORE", str(tmp_path / "env.db"))
    monkeypatch.delenv("THELIST_TITLE", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture()
def store(db_path):
    st = Store.open(str(db_path))
    yield st
    st.close()


@pytest.fixture()
def repo(store):
    return PeopleRepository(store)
