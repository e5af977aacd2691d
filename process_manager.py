# process_manager.py
# -*- coding: utf-8 -*-
"""
Координатор зависимостей сервера.
Создаёт конфигурацию, реестр городов и клиенты API один раз
и передаётся в обработчики явно (через app.state), без глобального экземпляра.
"""

import logging
from typing import Optional

import httpx

from config.app_config import AppConfig
from core.models.city import CityRegistry
from core.utils.api_client import GeminiClient, GNewsClient, OpenWeatherClient

logger = logging.getLogger("process_manager")


class ProcessManager:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(
        self,
        config: AppConfig,
        registry: Optional[CityRegistry] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config
        self.registry = registry if registry is not None else CityRegistry()
        # Один пул соединений на все запросы; состояния запросов в нём нет
        self.http = httpx.AsyncClient(transport=transport)
        self.weather_client = OpenWeatherClient(self.http, config.openweather_api_key)
        self.advice_client = GeminiClient(self.http, config.gemini_api_key, config.gemini_model)
        self.news_client = GNewsClient(self.http, config.gnews_api_key)

        missing = config.missing_keys()
        if missing:
            # Не падаем при старте: запросы к провайдерам вернут ошибку
            logger.warning(f"⚠️ Не заданы ключи API: {', '.join(missing)}")
        logger.info(f"✅ ProcessManager: initialized ({len(self.registry)} cities)")

    async def shutdown(self):
        """Закрывает пул HTTP-соединений."""
        await self.http.aclose()
        logger.info("🛑 ProcessManager: shut down")
