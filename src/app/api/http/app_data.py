from dataclasses import dataclass

from src.app.core.services import DbSessionService
from src.app.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
