"""
Errors raised by the mobile inventory.
"""

from enum import Enum
from typing import Optional


class StorageErrorKind(str, Enum):
    """Why a storage operation failed."""

    WRITE_FAILED = "write_failed"
    NOT_FOUND = "not_found"


class InventoryError(Exception):
    """Base class for inventory errors."""


class StorageError(InventoryError):
    """
    A write or delete could not be completed.

    The transaction is rolled back before this is raised, so the store
    holds exactly what it held before the call.
    """

    def __init__(self, kind: StorageErrorKind, message: str, imei: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.imei = imei


class DuplicateMobileError(InventoryError):
    """A mobile with the same IMEI is already stored."""

    def __init__(self, imei: str):
        super().__init__(f"Mobile with IMEI {imei} already exists")
        self.imei = imei


class InvalidMobileError(InventoryError):
    """Model name or IMEI is missing."""
