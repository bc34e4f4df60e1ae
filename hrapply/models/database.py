"""
SQLAlchemy database models for submitted employment applications
Integer fields get real columns; the rest of the record is kept as submitted
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hrapply.database import Base
from hrapply.models.record import INTEGER_FIELDS, SERVER_FIELDS


class ApplicationStatus(str, Enum):
    """Application status values"""
    PENDING = "pending"


# Record key -> mapped attribute for the integer columns
COLUMN_ATTRIBUTES = {
    "age": "age",
    "height": "height",
    "weight": "weight",
    "family1Age": "family1_age",
    "family2Age": "family2_age",
    "family3Age": "family3_age",
    "family4Age": "family4_age",
    "numberOfChildren": "number_of_children",
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Application(Base):
    """
    One submitted employment application
    Created once on submission; never updated or deleted
    """
    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    status: Mapped[str] = mapped_column(String(50), default=ApplicationStatus.PENDING.value)

    # Integer-typed record fields, column names match the record keys
    age: Mapped[Optional[int]] = mapped_column("age", Integer, nullable=True)
    height: Mapped[Optional[int]] = mapped_column("height", Integer, nullable=True)
    weight: Mapped[Optional[int]] = mapped_column("weight", Integer, nullable=True)
    family1_age: Mapped[Optional[int]] = mapped_column("family1Age", Integer, nullable=True)
    family2_age: Mapped[Optional[int]] = mapped_column("family2Age", Integer, nullable=True)
    family3_age: Mapped[Optional[int]] = mapped_column("family3Age", Integer, nullable=True)
    family4_age: Mapped[Optional[int]] = mapped_column("family4Age", Integer, nullable=True)
    number_of_children: Mapped[Optional[int]] = mapped_column("numberOfChildren", Integer, nullable=True)

    # Every other submitted field
    fields: Mapped[Dict[str, Any]] = mapped_column(JSON, default=dict)

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, status='{self.status}')>"

    @classmethod
    def from_record(cls, record: Dict[str, Any], created_at: Optional[datetime] = None) -> "Application":
        """
        Build a row from an already-coerced record

        Args:
            record: Application Record with integer fields coerced
            created_at: Creation time; defaults to now (UTC)
        """
        integers = {
            COLUMN_ATTRIBUTES[field]: record.get(field)
            for field in INTEGER_FIELDS
        }
        fields = {
            key: value
            for key, value in record.items()
            if key not in INTEGER_FIELDS and key not in SERVER_FIELDS
        }
        return cls(
            created_at=created_at or utcnow(),
            status=ApplicationStatus.PENDING.value,
            fields=fields,
            **integers,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the row back into an Application Record"""
        data: Dict[str, Any] = dict(self.fields or {})
        for field in INTEGER_FIELDS:
            data[field] = getattr(self, COLUMN_ATTRIBUTES[field])
        data.update({
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "status": self.status,
        })
        return data
