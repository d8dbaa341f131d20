"""
Tests for the inventory service flows.
"""

import logging

import pytest

from mobile_storage.core.config import AppConfig, StorageConfig
from mobile_storage.inventory import (
    DuplicateMobileError,
    InvalidMobileError,
    InventoryService,
    StorageError,
    StorageErrorKind,
)


class TestAddMobile:
    """Test the add flow."""

    def test_add_new_mobile(self, service):
        mobile = service.add_mobile(imei="123456789012345", model="Phone A")

        assert mobile.is_persisted
        assert service.store.exists("123456789012345")

    def test_add_strips_whitespace(self, service):
        mobile = service.add_mobile(imei="  123456789012345 ", model=" Phone A ")

        assert mobile.imei == "123456789012345"
        assert mobile.model == "Phone A"

    def test_duplicate_imei_rejected(self, service):
        service.add_mobile(imei="123456789012345", model="Phone A")

        with pytest.raises(DuplicateMobileError) as exc_info:
            service.add_mobile(imei="123456789012345", model="Other model")

        assert exc_info.value.imei == "123456789012345"
        assert service.store.count() == 1

    @pytest.mark.parametrize("imei,model", [("", "Phone A"), ("123", ""), ("   ", "Phone A")])
    def test_empty_fields_rejected(self, service, imei, model):
        with pytest.raises(InvalidMobileError):
            service.add_mobile(imei=imei, model=model)

        assert service.store.count() == 0

    def test_saved_event_logged(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="mobile_storage.inventory.service"):
            service.add_mobile(imei="123456789012345", model="Phone A")

        assert any("mobile_saved" in r.getMessage() for r in caplog.records)


class TestSearch:
    """Test search and listing."""

    def test_blank_search_lists_everything(self, service):
        service.add_mobile(imei="987654321098765", model="Phone B")
        service.add_mobile(imei="123456789012345", model="Phone A")

        results = service.search("  ")

        assert [m.model for m in results] == ["Phone A", "Phone B"]

    def test_search_returns_single_match(self, service):
        service.add_mobile(imei="123456789012345", model="Phone A")
        service.add_mobile(imei="987654321098765", model="Phone B")

        results = service.search("1234")

        assert len(results) == 1
        assert results[0].model == "Phone A"

    def test_search_without_match(self, service):
        service.add_mobile(imei="123456789012345", model="Phone A")
        assert service.search("555") == []

    def test_list_reflects_store_without_caching(self, service):
        service.add_mobile(imei="123456789012345", model="Phone A")
        service.store.delete("123456789012345")

        assert service.list_mobiles() == []


class TestRemoveMobile:
    """Test the delete flow."""

    def test_remove_then_readd(self, service):
        service.add_mobile(imei="123456789012345", model="Phone A")

        assert service.remove_mobile("123456789012345") == 1
        assert not service.store.exists("123456789012345")

        service.add_mobile(imei="123456789012345", model="Phone A")
        assert service.store.count() == 1

    def test_remove_unknown(self, service):
        with pytest.raises(StorageError) as exc_info:
            service.remove_mobile("000000000000000")

        assert exc_info.value.kind == StorageErrorKind.NOT_FOUND


class TestStatsAndConfig:
    """Test stats and construction from config."""

    def test_stats(self, service):
        service.add_mobile(imei="123456789012345", model="Phone A")
        service.store.save(service.store.find_by_imei("1234"))
        service.add_mobile(imei="987654321098765", model="Phone B")

        assert service.get_stats() == {"total_mobiles": 3, "unique_imeis": 2}

    def test_from_config(self, tmp_path):
        db_path = tmp_path / "configured.db"
        config = AppConfig(storage=StorageConfig(db_path=str(db_path), retry_attempts=0))

        service = InventoryService.from_config(config)

        assert service.store.db_path == db_path
        assert service.store.retry_attempts == 0
        assert db_path.exists()
