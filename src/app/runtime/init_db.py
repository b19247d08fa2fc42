"""Database initialization script."""

from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> None:
    """Create all database tables."""
    main_config = config or get_config()
    database_service = DbSessionService(main_config.database, main_config.app.environment)
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
