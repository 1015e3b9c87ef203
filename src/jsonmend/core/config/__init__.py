# Configuration package

from jsonmend.core.config.app_config import (
    AppConfig,
    LoggingConfig,
    LogLevel,
    RepairConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "LogLevel",
    "LoggingConfig",
    "RepairConfig",
    "load_config",
]
