from datetime import UTC, datetime
from typing import Any, Optional

from sqlalchemy import DateTime
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, MappedAsDataclass, mapped_column
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC datetime on every backend.

    PostgreSQL keeps the offset; SQLite stores naive values, which are read
    back as UTC so that loaded and freshly assigned timestamps compare.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Dialect) -> Any:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        value = value.astimezone(UTC)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect: Dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class TimestampMixin(MappedAsDataclass):
    """Mixin for adding created_at and updated_at timestamp columns.

    Repository records (items, files, element texts) carry both timestamps.
    ``updated_at`` is refreshed whenever the adapter persists a record after
    replacing one of its metadata values, so the engine can see when a
    document or page was last annotated.

    Attributes:
        created_at: Timestamp when the record was created.
        updated_at: Timestamp when the record was last saved.

    Note:
        Both timestamps are timezone-aware UTC values and are excluded from
        dataclass initialization (init=False).
    """

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        init=False,
    )

    updated_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(),
        default_factory=lambda: datetime.now(UTC),
        nullable=True,
        init=False,
    )

    def touch(self) -> None:
        """Mark the record as modified now."""
        self.updated_at = datetime.now(UTC)
