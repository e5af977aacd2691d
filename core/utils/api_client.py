# -*- coding: utf-8 -*-
"""
Клиенты внешних API:
- OpenWeather: текущая погода по координатам
- Gemini: совет, чем заняться при такой погоде
- GNews: новости по названию города

Все клиенты асинхронные и работают через общий httpx.AsyncClient.
Повторов и кэширования нет: один запрос, один ответ.
"""
import logging
from typing import Dict, List, Optional

import httpx

from core.models.city import Coordinates
from core.models.weather_response import Advice, NewsArticle, WeatherSnapshot, extract_advice_text
from core.utils.error_handler import NetworkError, UpstreamError

logger = logging.getLogger("api_client")


def _mask(params: Dict, secret_keys=("appid", "apikey", "key")) -> Dict:
    """Копия параметров запроса со скрытыми ключами (для логов)."""
    return {k: ("***" if k in secret_keys and v else v) for k, v in params.items()}


class _BaseClient:
    """Общая часть: запрос, проверка статуса, разбор JSON."""
    PROVIDER = "upstream"

    def __init__(self, http: httpx.AsyncClient, api_key: str):
        self.http = http
        self.api_key = api_key

    async def _request_json(self, method: str, url: str, params: Dict, json: Optional[Dict] = None) -> Dict:
        logger.info(f"🌐 {self.PROVIDER}: {method} {url} {_mask(params)}")
        try:
            response = await self.http.request(method, url, params=params, json=json)
        except httpx.TransportError as e:
            logger.error(f"❌ {self.PROVIDER}: сетевая ошибка: {e!r}")
            raise NetworkError(self.PROVIDER, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"❌ {self.PROVIDER}: HTTP {response.status_code} {response.reason_phrase}")
            raise UpstreamError(self.PROVIDER, response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"❌ {self.PROVIDER}: ответ не является JSON")
            raise UpstreamError(self.PROVIDER, response.status_code, "Invalid JSON body") from e


class OpenWeatherClient(_BaseClient):
    """Клиент для OpenWeather (текущая погода)."""
    PROVIDER = "OpenWeather"
    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    async def fetch_weather(self, geo: Coordinates) -> Dict:
        """
        Получает текущую погоду в метрических единицах.

        Args:
            geo (Coordinates): Широта и долгота города

        Returns:
            dict: Сырой JSON (coord, weather, main, wind, sys)
        """
        params = {
            "lat": geo.lat,
            "lon": geo.lon,
            "appid": self.api_key,
            "units": "metric",
        }
        data = await self._request_json("GET", self.BASE_URL, params)
        logger.info(f"✅ OpenWeather: погода получена для ({geo.lat}, {geo.lon})")
        return data


def build_advice_prompt(snapshot: WeatherSnapshot) -> str:
    return (
        f"Briefly tell me what there is to do in {snapshot.city} city in this weather: "
        f"weather - {snapshot.condition}, temperature - {snapshot.temp}, "
        f"feels like - {snapshot.feels_like}"
    )


class GeminiClient(_BaseClient):
    """Клиент для Gemini generateContent."""
    PROVIDER = "Gemini"
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, http: httpx.AsyncClient, api_key: str, model: str):
        super().__init__(http, api_key)
        self.model = model

    async def fetch_advice(self, snapshot: WeatherSnapshot) -> Advice:
        prompt = build_advice_prompt(snapshot)
        url = f"{self.BASE_URL}/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        raw = await self._request_json("POST", url, {"key": self.api_key}, json=payload)

        # Модель может вернуть 200 без текста (например, блокировка по безопасности)
        if extract_advice_text(raw) is None:
            logger.error(f"❌ Gemini: в ответе нет текста для {snapshot.city}")
            raise UpstreamError(self.PROVIDER, 200, "Empty completion")

        logger.info(f"✅ Gemini: совет получен для {snapshot.city}")
        return Advice(raw=raw)


class GNewsClient(_BaseClient):
    """Клиент для поиска новостей GNews."""
    PROVIDER = "GNews"
    BASE_URL = "https://gnews.io/api/v4/search"

    async def fetch_news(self, city_name: str) -> List[NewsArticle]:
        params = {"q": city_name, "lang": "en", "apikey": self.api_key}
        data = await self._request_json("GET", self.BASE_URL, params)
        if not isinstance(data, dict) or not isinstance(data.get("articles") or [], list):
            logger.error(f"❌ GNews: неожиданный формат ответа для {city_name}")
            raise UpstreamError(self.PROVIDER, 200, "Malformed articles list")
        articles = NewsArticle.list_from_gnews(data)
        logger.info(f"✅ GNews: {len(articles)} статей для {city_name}")
        return articles
