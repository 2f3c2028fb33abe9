# linmath3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – готовый объект logging.Logger (с level INFO)
    * Config – JSON‑конфигурация пакета
"""

from .logger import logger
from .config import Config, default_epsilon

__all__ = ["logger", "Config", "default_epsilon"]
