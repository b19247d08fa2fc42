"""Schema management for the books table."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.app.entities.service.book import BookTable  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all missing database tables."""
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables: {}", sorted(SQLModel.metadata.tables))

    def drop_all(self) -> None:
        """Drop every table known to the metadata."""
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped tables: {}", sorted(SQLModel.metadata.tables))
