"""
Shared fixtures for Mobile Storage tests.
"""

import pytest

from mobile_storage.core import config as config_module
from mobile_storage.inventory import InventoryService, MobileStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the default database into tmp_path and drop the cached config."""
    monkeypatch.setenv("MOBILE_STORAGE_DB_PATH", str(tmp_path / "default" / "mobiles.db"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture
def store(tmp_path):
    return MobileStore(db_path=str(tmp_path / "mobiles.db"), retry_delay=0)


@pytest.fixture
def service(store):
    return InventoryService(store)
