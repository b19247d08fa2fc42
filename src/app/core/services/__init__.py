"""Core services exports."""

from .book.book_management import BookManagementService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    # Book Services
    "BookManagementService",
    # Database Services
    "DbManageService",
    "DbSessionService",
]
