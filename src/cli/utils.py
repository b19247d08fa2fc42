"""Shared helpers for the CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from src.app.core.services import BookManagementService, DbSessionService
from src.app.entities.service.book import BookRepository
from src.app.runtime.context import get_config

console = Console()


@contextmanager
def book_service() -> Iterator[BookManagementService]:
    """Yield a book usecase bound to the configured database, closing it afterwards."""
    config = get_config()
    database_service = DbSessionService(config.database, config.app.environment)
    try:
        with database_service.session_scope() as session:
            yield BookManagementService(BookRepository(session))
    finally:
        database_service.dispose()
