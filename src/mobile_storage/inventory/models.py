"""
Mobile inventory data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mobile(BaseModel):
    """
    Represents one inventoried mobile device.

    The IMEI is the de facto key. Uniqueness is an application policy
    enforced by the inventory service, not by the store, so two stored
    rows may share an IMEI and are told apart by their row id.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "imei": "123456789012345",
                "model": "Phone A",
            }
        },
    )

    imei: str = Field(..., description="Device hardware identifier (IMEI)")
    model: str = Field(..., description="Free-form model display name")
    id: Optional[int] = Field(None, description="Storage row id, None until saved")

    @field_validator("imei", "model")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip surrounding whitespace and reject empty values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def same_device(self, other: "Mobile") -> bool:
        """Deduplication equality: identifiers only."""
        return self.imei == other.imei

    def display_lines(self) -> Tuple[str, str]:
        """Primary and secondary text shown for the record in a list."""
        return f"Model: {self.model}", f"IMEI: {self.imei}"


class InventoryEventType(str, Enum):
    """Kinds of inventory changes."""

    MOBILE_SAVED = "mobile_saved"
    MOBILE_DELETED = "mobile_deleted"
    DUPLICATE_REJECTED = "duplicate_rejected"


class InventoryEvent(BaseModel):
    """
    Event emitted when the inventory changes (new mobile, deletion, etc.).
    """

    event_type: InventoryEventType
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    imei: str
    details: dict = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "event_type": "mobile_saved",
                "timestamp": "2025-01-15T10:30:00Z",
                "imei": "123456789012345",
                "details": {"model": "Phone A"},
            }
        }
    )
