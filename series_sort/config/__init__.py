from .app_config import AppConfig
from .log_config import LogConfig
from .sort_config import SortConfig

__all__ = ["AppConfig", "LogConfig", "SortConfig"]
