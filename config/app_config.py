# config/app_config.py
# -*- coding: utf-8 -*-
"""
Конфигурация сервера: ключи API и параметры запуска.
Значения читаются из окружения (и из .env, если он есть).
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_PORT = 3000


@dataclass
class AppConfig:
    openweather_api_key: str
    gemini_api_key: str
    gnews_api_key: str
    gemini_model: str = DEFAULT_GEMINI_MODEL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    static_dir: Path = PROJECT_ROOT / "public"

    @classmethod
    def load(cls):
        return cls(
            openweather_api_key=os.getenv("API_OPEN_WEATHER", ""),
            gemini_api_key=os.getenv("API_GEMINI", ""),
            gnews_api_key=os.getenv("API_GNEWS", ""),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            static_dir=Path(os.getenv("STATIC_DIR", str(PROJECT_ROOT / "public"))),
        )

    def missing_keys(self) -> list:
        """Имена переменных окружения, для которых ключ не задан."""
        keys = {
            "API_OPEN_WEATHER": self.openweather_api_key,
            "API_GEMINI": self.gemini_api_key,
            "API_GNEWS": self.gnews_api_key,
        }
        return [name for name, value in keys.items() if not value]
