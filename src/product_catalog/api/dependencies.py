"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing handler instances.

Pattern:
    - Repository and handlers stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool

from product_catalog.handlers import ProductsAdminHandler, ProductsFetchHandler
from product_catalog.protocols import ProductStore
from product_catalog.repositories import RedisProductRepository

logger = logging.getLogger(__name__)


def get_repository(request: Request) -> ProductStore:
    """Dependency injection for the ProductStore from app.state.

    Raises:
        RuntimeError: If the repository is not initialized
    """
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Repository not initialized. Check lifespan setup.")
    return repository


def get_admin_handler(request: Request) -> ProductsAdminHandler:
    """Dependency injection for ProductsAdminHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "admin_handler", None)
    if handler is None:
        raise RuntimeError("ProductsAdminHandler not initialized. Check lifespan setup.")
    return handler


def get_fetch_handler(request: Request) -> ProductsFetchHandler:
    """Dependency injection for ProductsFetchHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "fetch_handler", None)
    if handler is None:
        raise RuntimeError("ProductsFetchHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(repository: ProductStore | None = None):
    """Create the lifespan context manager for the app.

    Args:
        repository: Product store to serve. If None, a Redis repository
            is created from settings at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = repository or RedisProductRepository.from_settings()

        app.state.repository = store
        app.state.admin_handler = ProductsAdminHandler(repository=store)
        app.state.fetch_handler = ProductsFetchHandler(repository=store)

        healthy = await run_in_threadpool(store.health_check)
        logger.info("Product handlers initialized (healthy=%s)", healthy)

        yield

        del app.state.fetch_handler
        del app.state.admin_handler
        del app.state.repository
        logger.info("Product handlers shut down")

    return lifespan


# Type aliases for cleaner dependency injection
AdminHandlerDep = Annotated[ProductsAdminHandler, Depends(get_admin_handler)]
FetchHandlerDep = Annotated[ProductsFetchHandler, Depends(get_fetch_handler)]
RepositoryDep = Annotated[ProductStore, Depends(get_repository)]
