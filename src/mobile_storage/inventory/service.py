"""
Inventory service: add, search and delete flows over the mobile store.
"""

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..core.config import AppConfig, get_config
from .errors import DuplicateMobileError, InvalidMobileError
from .models import InventoryEvent, InventoryEventType, Mobile
from .store import MobileStore

logger = logging.getLogger(__name__)


class InventoryService:
    """
    Application-level policy for the mobile inventory.

    The store is the single source of truth: every call reads from it
    and nothing is cached here. Duplicate IMEIs are rejected by an
    existence check before insert, which is not atomic and assumes a
    single writer.
    """

    def __init__(self, store: MobileStore):
        self.store = store

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "InventoryService":
        """
        Build a service backed by the configured database.

        Args:
            config: Application config, defaults to the global one

        Returns:
            InventoryService
        """
        config = config or get_config()
        store = MobileStore(
            db_path=config.storage.db_path,
            retry_attempts=config.storage.retry_attempts,
            retry_delay=config.storage.retry_delay,
            busy_timeout=config.storage.busy_timeout,
        )
        return cls(store)

    def list_mobiles(self) -> List[Mobile]:
        """All mobiles, ordered by model then IMEI for display."""
        return sorted(self.store.get_all(), key=lambda m: (m.model, m.imei, m.id or 0))

    def add_mobile(self, imei: str, model: str) -> Mobile:
        """
        Add a new mobile to the inventory.

        Args:
            imei: Device IMEI
            model: Model display name

        Returns:
            The saved mobile

        Raises:
            InvalidMobileError: If either field is empty
            DuplicateMobileError: If the IMEI is already stored
            StorageError: If the write fails
        """
        try:
            mobile = Mobile(imei=imei, model=model)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise InvalidMobileError(f"Missing or empty field(s): {fields}") from e

        if self.store.exists(mobile.imei):
            self._emit(InventoryEvent(
                event_type=InventoryEventType.DUPLICATE_REJECTED,
                imei=mobile.imei,
                details={"model": mobile.model},
            ))
            raise DuplicateMobileError(mobile.imei)

        saved = self.store.save(mobile)
        self._emit(InventoryEvent(
            event_type=InventoryEventType.MOBILE_SAVED,
            imei=saved.imei,
            details={"model": saved.model, "id": saved.id},
        ))
        return saved

    def search(self, text: str) -> List[Mobile]:
        """
        Search mobiles by IMEI.

        Blank text means no filter and returns the whole inventory.
        Otherwise returns at most one mobile: the first whose IMEI
        contains the text.
        """
        text = text.strip()
        if not text:
            return self.list_mobiles()

        found = self.store.find_by_imei(text)
        return [found] if found else []

    def remove_mobile(self, imei: str) -> int:
        """
        Remove a mobile by IMEI.

        Returns:
            Number of records removed

        Raises:
            StorageError: NOT_FOUND if the IMEI is not stored, WRITE_FAILED
                if the delete fails
        """
        removed = self.store.delete(imei.strip())
        self._emit(InventoryEvent(
            event_type=InventoryEventType.MOBILE_DELETED,
            imei=imei.strip(),
            details={"removed": removed},
        ))
        return removed

    def get_stats(self) -> Dict:
        """Get inventory statistics."""
        mobiles = self.store.get_all()
        return {
            "total_mobiles": len(mobiles),
            "unique_imeis": len({m.imei for m in mobiles}),
        }

    def _emit(self, event: InventoryEvent) -> None:
        logger.info(f"Inventory event: {event.model_dump(mode='json')}")
