"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import json
import os
from pathlib import Path
from linmath3d.utils.logger import logger

DEFAULT_CONFIG = {
    "epsilon": 1e-9,
    "log_level": "INFO",
}

DEFAULT_PATH = "linmath3d.json"
ENV_VAR = "LINMATH3D_CONFIG"


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path or os.environ.get(ENV_VAR, DEFAULT_PATH))
            cls._instance._load()
        return cls._instance

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")
                self.data = data
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            self.data = DEFAULT_CONFIG.copy()
        try:
            logger.setLevel(self["log_level"])
        except (TypeError, ValueError) as exc:
            logger.error(f"[Config] Bad log_level: {exc} – keeping INFO")
            logger.setLevel(DEFAULT_CONFIG["log_level"])

    def save(self):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)


def default_epsilon() -> float:
    """Допуск для приближённых сравнений (ключ `epsilon`)."""
    value = Config()["epsilon"]
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.error(f"[Config] Bad epsilon {value!r} – using default")
        return float(DEFAULT_CONFIG["epsilon"])
