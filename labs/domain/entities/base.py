"""Common fields shared by every persisted entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Entity:
    """Identity, audit timestamps and soft-delete marker."""

    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def update_timestamp(self) -> None:
        self.updated_at = utc_now()

    def mark_deleted(self) -> None:
        now = utc_now()
        self.deleted_at = now
        self.updated_at = now
