# -*- coding: utf-8 -*-
"""
Конвейер получения данных для страницы погоды.

Шаги выполняются строго по очереди:
погода -> снимок -> совет -> новости -> страница.
Каждый шаг возвращает StepResult; первая ошибка прерывает конвейер.
"""

import logging
from datetime import datetime
from typing import Awaitable, Callable, Optional

from core.models.city import City
from core.models.step_result import StepResult
from core.models.weather_response import WeatherSnapshot
from core.utils.api_client import GeminiClient, GNewsClient, OpenWeatherClient
from core.utils.error_handler import DigestError, log_exception
from scripts.weather._processes.formatter import render_weather_page

logger = logging.getLogger("data_fetcher")


async def _run_step(name: str, func: Callable[[], Awaitable], context: dict) -> StepResult:
    """Выполняет шаг и превращает ожидаемые ошибки в StepResult."""
    try:
        value = await func()
    except DigestError as e:
        log_exception(e, f"❌ Шаг '{name}' завершился ошибкой", context)
        return StepResult.failure(name, e)
    return StepResult.success(name, value)


async def run_weather_pipeline(
    city: City,
    weather_client: OpenWeatherClient,
    advice_client: GeminiClient,
    news_client: GNewsClient,
    as_of: Optional[datetime] = None
) -> StepResult:
    """
    Получает погоду, совет и новости для города и собирает страницу.

    Returns:
        StepResult: value = HTML при успехе, иначе error и имя упавшего шага
    """
    context = {"city": city.name}
    logger.info(f"🌤️ Запуск конвейера для {city.name}")

    raw = await _run_step("weather", lambda: weather_client.fetch_weather(city.geo), context)
    if not raw.ok:
        return raw

    async def build_snapshot():
        return WeatherSnapshot.from_openweather(city.name, raw.value)

    snapshot = await _run_step("snapshot", build_snapshot, context)
    if not snapshot.ok:
        return snapshot

    advice = await _run_step("advice", lambda: advice_client.fetch_advice(snapshot.value), context)
    if not advice.ok:
        return advice

    news = await _run_step("news", lambda: news_client.fetch_news(city.name), context)
    if not news.ok:
        return news

    async def render():
        return render_weather_page(snapshot.value, advice.value, news.value, as_of=as_of)

    page = await _run_step("render", render, context)
    if page.ok:
        logger.info(f"✅ Конвейер завершён для {city.name}")
    return page
