from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Dict, Optional

import anyio
from fastapi import APIRouter, FastAPI

from ..modules import models  # noqa: F401
from ..modules.common.utils.error_handler import register_exception_handlers
from ..modules.element.services import ElementSetService
from .config.settings import (
    DatabaseSettings,
    EnvironmentOption,
    Settings,
    get_settings,
)
from .database.session import create_tables, local_session
from .logging import configure_logging, get_logger

logger = get_logger(__name__)


async def set_threadpool_tokens(number_of_tokens: int = 100) -> None:
    """Configure the number of threadpool tokens for anyio."""
    limiter = anyio.to_thread.current_default_thread_limiter()
    limiter.total_tokens = number_of_tokens


async def install_element_sets() -> None:
    """Install the element sets the adapter binds to, if missing."""
    async with local_session() as db:
        await ElementSetService().install_default_element_sets(db)


def lifespan_factory(
    settings: Settings,
    create_tables_on_startup: bool = True,
    install_element_sets_on_startup: bool = True,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Factory to create a lifespan async context manager for a FastAPI app.

    Args:
        settings: Application settings
        create_tables_on_startup: Whether to create repository tables on startup
        install_element_sets_on_startup: Whether to install the Dublin Core and
            Scripto element sets on startup

    Returns:
        An async context manager for FastAPI's lifespan
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging()
        await set_threadpool_tokens()

        if isinstance(settings, DatabaseSettings) and create_tables_on_startup:
            await create_tables()

        if install_element_sets_on_startup:
            await install_element_sets()

        logger.info("Application started", extra={"backend": settings.TRANSCRIPTION_BACKEND})
        yield

    return lifespan


def create_application(
    router: APIRouter,
    settings: Optional[Settings] = None,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[None]]] = None,
    create_tables_on_startup: Optional[bool] = None,
    install_element_sets_on_startup: Optional[bool] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    version: Optional[str] = None,
    **kwargs: Any,
) -> FastAPI:
    """Creates and configures a FastAPI application based on the provided settings.

    Args:
        router: The APIRouter containing the routes for the application
        settings: Application settings (uses get_settings() if None)
        lifespan: Optional lifespan; defaults to ``lifespan_factory(settings, ...)``
        create_tables_on_startup: Defaults to settings.CREATE_TABLES_ON_STARTUP
        install_element_sets_on_startup: Defaults to settings.INSTALL_ELEMENT_SETS_ON_STARTUP
        title: The title of the API (defaults to settings.APP_NAME)
        description: A description of the API (defaults to settings.APP_DESCRIPTION)
        version: The version of the API (defaults to settings.VERSION)
        **kwargs: Additional keyword arguments passed to FastAPI constructor

    Returns:
        A configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    if create_tables_on_startup is None:
        create_tables_on_startup = settings.CREATE_TABLES_ON_STARTUP
    if install_element_sets_on_startup is None:
        install_element_sets_on_startup = settings.INSTALL_ELEMENT_SETS_ON_STARTUP

    metadata: Dict[str, Any] = {
        "title": title or settings.APP_NAME,
        "description": description or settings.APP_DESCRIPTION,
        "version": version or settings.VERSION,
        "docs_url": settings.DOCS_URL,
        "redoc_url": settings.REDOC_URL,
        "openapi_url": settings.OPENAPI_URL,
    }

    hide_docs = settings.ENVIRONMENT == EnvironmentOption.PRODUCTION and not settings.ENABLE_DOCS_IN_PRODUCTION
    if hide_docs:
        metadata.update({"docs_url": None, "redoc_url": None, "openapi_url": None})

    kwargs.update(metadata)

    if lifespan is None:
        lifespan = lifespan_factory(
            settings,
            create_tables_on_startup=create_tables_on_startup,
            install_element_sets_on_startup=install_element_sets_on_startup,
        )

    application = FastAPI(lifespan=lifespan, **kwargs)
    application.include_router(router)
    register_exception_handlers(application)

    return application
