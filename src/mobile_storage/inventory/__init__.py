"""
Mobile inventory module.

This module stores inventoried mobile devices and implements the add,
search and delete flows on top of the store.
"""

from .errors import (
    DuplicateMobileError,
    InvalidMobileError,
    InventoryError,
    StorageError,
    StorageErrorKind,
)
from .models import InventoryEvent, InventoryEventType, Mobile
from .service import InventoryService
from .store import MobileStore

__all__ = [
    "DuplicateMobileError",
    "InvalidMobileError",
    "InventoryError",
    "InventoryEvent",
    "InventoryEventType",
    "InventoryService",
    "Mobile",
    "MobileStore",
    "StorageError",
    "StorageErrorKind",
]
