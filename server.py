# server.py
# -*- coding: utf-8 -*-
"""
Основной скрипт веб-сервера: форма выбора города и страница погоды.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config.app_config import AppConfig
from config.logging_config import setup_logging
from core.models.city import CityRegistry
from process_manager import ProcessManager
from scripts.weather.weather_handler import router as weather_router

logger = logging.getLogger("server")


def create_app(
    config: Optional[AppConfig] = None,
    registry: Optional[CityRegistry] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> FastAPI:
    """
    Создаёт приложение FastAPI.
    transport подменяет сетевой слой httpx (используется в тестах).
    """
    config = config if config is not None else AppConfig.load()
    pm = ProcessManager(config, registry=registry, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await pm.shutdown()

    app = FastAPI(title="Weather Digest", lifespan=lifespan)
    app.state.process_manager = pm
    app.include_router(weather_router)

    if config.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(config.static_dir)), name="static")
    else:
        logger.warning(f"⚠️ Папка статики не найдена: {config.static_dir}")

    return app


def main():
    config = AppConfig.load()
    setup_logging(config.log_level)
    app = create_app(config)
    logger.info(f"🚀 Сервер запущен: http://localhost:{config.port}/")
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
