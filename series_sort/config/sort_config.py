#!filepath: series_sort/config/sort_config.py
from pydantic import BaseModel


class SortConfig(BaseModel):
    # 是否开启 Instrumentation（timer / metrics）
    instrumentation: bool = False
    # 是否把每个 entity 提取出的 key 打到 debug 日志
    log_keys: bool = False
