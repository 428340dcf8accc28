"""SQLAlchemy models for file entities."""

from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.elements import UnaryExpression

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class File(Base, TimestampMixin):
    """File model: one page (usually a scanned image) attached to an item.

    ``filename`` is the name under which the file is stored in the archive;
    ``original_filename`` is the name it was uploaded with and serves as the
    page name when the file has no Dublin Core title.
    """

    __tablename__ = "files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("items.id", ondelete="CASCADE"), index=True)
    filename: Mapped[str] = mapped_column(String(255))
    original_filename: Mapped[str] = mapped_column(String(255))
    mime_type: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    order: Mapped[Optional[int]] = mapped_column(Integer, default=None)

    @classmethod
    def native_order(cls) -> List[UnaryExpression]:
        """Attachment order of files within an item: explicit order first, then upload order."""
        return [cls.order.asc().nulls_last(), cls.id.asc()]
