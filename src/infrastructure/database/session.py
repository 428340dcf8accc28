from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import settings

engine_options = {} if settings.DATABASE_IS_SQLITE else {
    "pool_size": settings.DB_POOL_SIZE,
    "max_overflow": settings.DB_MAX_OVERFLOW,
    "pool_pre_ping": True,
}
engine = create_async_engine(settings.DATABASE_URL, echo=False, **engine_options)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all repository models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass so that every
    model gets a generated ``__init__``/``__repr__`` from its mapped columns.
    Columns declared with ``init=False`` (primary keys, timestamps) are filled
    by the database or by their default factories.

    Example:
        ```python
        class Item(Base):
            __tablename__ = "items"

            id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
            public: Mapped[bool] = mapped_column(Boolean, default=True)

        item = Item(public=False)
        ```
    """

    pass


async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for database session management.

    Yields one session per request; the session is closed when the request
    finishes. Adapter writes commit on this session themselves.

    Yields:
        AsyncSession: A configured async database session.

    Example:
        ```python
        @router.get("/document/{document_id}")
        async def get_document(document_id: int, db: AsyncSession = Depends(async_session)):
            ...
        ```
    """
    async_get_db = local_session
    async with async_get_db() as db:
        yield db


async def create_tables() -> None:
    """Create all repository tables if they don't exist.

    Idempotent: existing tables are left unchanged. Intended for application
    startup and for ``scripts/create_tables.py``.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
