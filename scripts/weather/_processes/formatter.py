# -*- coding: utf-8 -*-
"""
Формирование HTML-страниц (погода, форма выбора города, ошибки).
Шаблоны лежат в scripts/weather/_io/templates, экранирование включено.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader

from core.models.city import CityRegistry
from core.models.weather_response import Advice, NewsArticle, WeatherSnapshot
from core.utils.error_handler import RenderAssumptionViolation

logger = logging.getLogger("formatter")

TEMPLATE_DIR = Path(__file__).parent.parent / "_io" / "templates"
MAP_ZOOM = 13
AS_OF_FORMAT = "%H:%M:%S"

_env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), autoescape=True)


def render_weather_page(
    weather: WeatherSnapshot,
    advice: Advice,
    articles: List[NewsArticle],
    as_of: Optional[datetime] = None
) -> str:
    """
    Собирает страницу: погода, карта, совет и первая новость.

    Args:
        weather (WeatherSnapshot): Нормализованная погода
        advice (Advice): Ответ модели
        articles (list): Статьи; используется только первая
        as_of (datetime): Время "по состоянию на" (по умолчанию сейчас)

    Returns:
        str: HTML-документ
    """
    if weather is None or advice is None:
        raise RenderAssumptionViolation("Нет данных о погоде или совета")
    if not articles:
        raise RenderAssumptionViolation(f"Нет новостей для {weather.city}")

    as_of = as_of or datetime.now()
    html = _env.get_template("weather_page.html.j2").render(
        weather=weather,
        advice=advice.text,
        article=articles[0],
        as_of=as_of.strftime(AS_OF_FORMAT),
        map_data=weather.to_map_data(),
        map_zoom=MAP_ZOOM,
    )
    logger.info(f"✅ Страница сформирована для {weather.city}")
    return html


def render_index_page(registry: CityRegistry) -> str:
    """Форма выбора города."""
    return _env.get_template("index.html.j2").render(cities=list(registry))


def render_error_page(status: int, message: str) -> str:
    return _env.get_template("error_page.html.j2").render(status=status, message=message)


def render_validation_error(raw_index) -> str:
    """Короткий фрагмент для неверного индекса (не полная страница)."""
    value = "" if raw_index is None else raw_index
    return _env.from_string('<h2>Wrong city index: "{{ value }}"! Please try again.</h2>').render(value=value)
