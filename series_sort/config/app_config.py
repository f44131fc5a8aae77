#!filepath: series_sort/config/app_config.py
import os

import yaml
from pydantic import BaseModel
from dotenv import load_dotenv

from .log_config import LogConfig
from .sort_config import SortConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    series_sort/config/app_config.py → series_sort/config → series_sort → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    sort: SortConfig = SortConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 series_sort/config/base.yml
        - SERIES_SORT_LOG_LEVEL 覆盖 log.level
        """
        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv("SERIES_SORT_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})
            raw["log"]["level"] = level

        return cls(**raw)
