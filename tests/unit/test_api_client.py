# -*- coding: utf-8 -*-
"""
Тесты для core/utils/api_client.py
Тестирует:
- Параметры запросов к OpenWeather, Gemini, GNews
- Ошибки провайдеров (UpstreamError) и транспорта (NetworkError)
"""
import json

import httpx
import pytest

from core.models.city import Coordinates
from core.models.weather_response import WeatherSnapshot
from core.utils.api_client import (
    GeminiClient,
    GNewsClient,
    OpenWeatherClient,
    build_advice_prompt
)
from core.utils.error_handler import NetworkError, UpstreamError
from tests.conftest import WEATHER_FIXTURE, FakeUpstreams, failing, json_reply

ASTANA = Coordinates(lat=51.169392, lon=71.449074)


def _snapshot():
    return WeatherSnapshot.from_openweather("Astana", WEATHER_FIXTURE)


async def test_fetch_weather_builds_metric_request():
    fake = FakeUpstreams()
    async with httpx.AsyncClient(transport=fake.transport) as http:
        data = await OpenWeatherClient(http, "ow-key").fetch_weather(ASTANA)

    assert data["main"]["temp"] == 20
    request = fake.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/data/2.5/weather"
    assert request.url.params["lat"] == "51.169392"
    assert request.url.params["lon"] == "71.449074"
    assert request.url.params["appid"] == "ow-key"
    assert request.url.params["units"] == "metric"
    print("✅ test_fetch_weather_builds_metric_request passed")


async def test_fetch_weather_404_is_upstream_error():
    fake = FakeUpstreams(weather=json_reply(404, {"cod": "404", "message": "city not found"}))
    async with httpx.AsyncClient(transport=fake.transport) as http:
        with pytest.raises(UpstreamError) as info:
            await OpenWeatherClient(http, "ow-key").fetch_weather(ASTANA)

    assert info.value.status == 404
    assert info.value.provider == "OpenWeather"
    assert info.value.message == "Not Found"


@pytest.mark.parametrize("exc_class", [httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError])
async def test_transport_failure_is_network_error(exc_class):
    fake = FakeUpstreams(weather=failing(exc_class), news=failing(exc_class))
    async with httpx.AsyncClient(transport=fake.transport) as http:
        with pytest.raises(NetworkError):
            await OpenWeatherClient(http, "ow-key").fetch_weather(ASTANA)
        with pytest.raises(NetworkError) as info:
            await GNewsClient(http, "gn-key").fetch_news("Astana")
    assert info.value.provider == "GNews"


async def test_invalid_json_is_upstream_error():
    def not_json(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    fake = FakeUpstreams(weather=not_json)
    async with httpx.AsyncClient(transport=fake.transport) as http:
        with pytest.raises(UpstreamError) as info:
            await OpenWeatherClient(http, "ow-key").fetch_weather(ASTANA)
    assert info.value.status == 200


def test_build_advice_prompt():
    prompt = build_advice_prompt(_snapshot())
    assert "in Astana city" in prompt
    assert "weather - Clear" in prompt
    assert "temperature - 20" in prompt
    assert "feels like - 19" in prompt


async def test_fetch_advice_posts_prompt():
    fake = FakeUpstreams()
    async with httpx.AsyncClient(transport=fake.transport) as http:
        advice = await GeminiClient(http, "gm-key", "gemini-1.5-flash").fetch_advice(_snapshot())

    assert advice.text == "Take a walk along the Ishim embankment."
    request = fake.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
    assert request.url.params["key"] == "gm-key"
    body = json.loads(request.content)
    assert body["contents"][0]["parts"][0]["text"] == build_advice_prompt(_snapshot())


@pytest.mark.parametrize("reply", [
    json_reply(429, {"error": {"message": "quota"}}),
    json_reply(403, {"error": {"message": "bad key"}}),
    json_reply(200, {"candidates": []}),
    json_reply(200, {"candidates": [{"content": {"parts": [{"text": 42}, {"text": ["x"]}]}}]}),
    json_reply(200, [{"candidates": []}]),
])
async def test_fetch_advice_errors(reply):
    fake = FakeUpstreams(advice=reply)
    async with httpx.AsyncClient(transport=fake.transport) as http:
        with pytest.raises(UpstreamError) as info:
            await GeminiClient(http, "gm-key", "gemini-1.5-flash").fetch_advice(_snapshot())
    assert info.value.provider == "Gemini"


async def test_fetch_news():
    fake = FakeUpstreams()
    async with httpx.AsyncClient(transport=fake.transport) as http:
        articles = await GNewsClient(http, "gn-key").fetch_news("Province of Turin")

    assert [a.title for a in articles] == ["Astana hosts summit", "Second headline"]
    request = fake.requests[0]
    assert request.url.path == "/api/v4/search"
    assert request.url.params["q"] == "Province of Turin"
    assert request.url.params["lang"] == "en"
    assert request.url.params["apikey"] == "gn-key"


async def test_fetch_news_upstream_error():
    fake = FakeUpstreams(news=json_reply(500, {"errors": ["boom"]}))
    async with httpx.AsyncClient(transport=fake.transport) as http:
        with pytest.raises(UpstreamError) as info:
            await GNewsClient(http, "gn-key").fetch_news("Astana")
    assert info.value.status == 500


@pytest.mark.parametrize("body", [
    [{"title": "Array instead of object"}],
    {"articles": {"title": "Object instead of list"}},
    "just a string",
])
async def test_fetch_news_malformed_body(body):
    fake = FakeUpstreams(news=json_reply(200, body))
    async with httpx.AsyncClient(transport=fake.transport) as http:
        with pytest.raises(UpstreamError) as info:
            await GNewsClient(http, "gn-key").fetch_news("Astana")
    assert info.value.provider == "GNews"


async def test_fetch_news_null_articles_is_empty_list():
    fake = FakeUpstreams(news=json_reply(200, {"totalArticles": 0, "articles": None}))
    async with httpx.AsyncClient(transport=fake.transport) as http:
        articles = await GNewsClient(http, "gn-key").fetch_news("Astana")
    assert articles == []


if __name__ == "__main__":
    import asyncio
    asyncio.run(test_fetch_weather_builds_metric_request())
