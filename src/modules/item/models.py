"""SQLAlchemy models for item entities."""

from sqlalchemy import Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Item(Base, TimestampMixin):
    """Item model: the repository's document record.

    An item owns an ordered set of files (its pages). Descriptive metadata
    such as the title is not stored on the row itself but as element texts
    with ``record_type == "Item"``.
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    public: Mapped[bool] = mapped_column(Boolean, default=True)
