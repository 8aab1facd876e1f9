"""Compiled report model."""
from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, String, DateTime, Text, JSON

from finplan.db import Base


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class Report(Base):
    """A compiled financial plan. Immutable once written."""

    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    client_id = Column(String, nullable=True, index=True)

    # Opaque client data, stored as validated
    client_data = Column(JSON, nullable=False)

    # Configuration list exactly as submitted (audit/replay)
    strategy_configurations = Column(JSON, nullable=False)

    # Frozen snapshot; never re-rendered on catalog changes
    generated_report = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
