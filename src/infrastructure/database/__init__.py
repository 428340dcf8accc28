from .session import Base, async_session, create_tables, local_session

__all__ = ["Base", "async_session", "create_tables", "local_session"]
