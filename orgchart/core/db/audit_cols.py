# (c) Copyright Datacraft, 2026
"""Timestamp and tombstone columns shared by soft-deletable tables."""
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utc_now() -> datetime:
	return datetime.now(timezone.utc)


class AuditColumns:
	created_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, nullable=False
	)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime(timezone=True), default=utc_now, nullable=False
	)
	# Tombstone marker: rows with a value here are soft deleted
	deleted_at: Mapped[datetime | None] = mapped_column(
		DateTime(timezone=True), nullable=True, index=True
	)
