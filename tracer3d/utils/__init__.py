# tracer3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger    – готовый объект logging.Logger (с level INFO)
    * set_level – смена уровня логирования
    * Config    – JSON‑конфигурация
    * Profiler  – замер времени блока кода
"""

from .logger import logger, set_level
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler

__all__ = ["logger", "set_level", "Config", "DEFAULT_CONFIG", "Profiler"]
