# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Общие фикстуры: ответы провайдеров и подменный транспорт httpx.
"""
import copy

import httpx
import pytest

from config.app_config import AppConfig

WEATHER_FIXTURE = {
    "coord": {"lat": 51.17, "lon": 71.45},
    "weather": [{"main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {"temp": 20, "feels_like": 19, "pressure": 1012, "humidity": 40},
    "wind": {"speed": 3},
    "sys": {"country": "KZ"},
}

ADVICE_FIXTURE = {
    "candidates": [
        {"content": {"parts": [{"text": "Take a walk along the Ishim embankment."}]}}
    ]
}

NEWS_FIXTURE = {
    "articles": [
        {"title": "Astana hosts summit", "description": "Leaders gather in the capital."},
        {"title": "Second headline", "description": "Should never be rendered."},
    ]
}


def json_reply(status: int, body=None):
    """Фабрика ответа: новый httpx.Response на каждый запрос."""
    def reply(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=copy.deepcopy(body))
    return reply


def failing(exc_class):
    """Фабрика сетевой ошибки httpx."""
    def reply(request: httpx.Request) -> httpx.Response:
        raise exc_class("connection failed", request=request)
    return reply


class FakeUpstreams:
    """Отвечает за OpenWeather, Gemini и GNews; записывает все запросы."""

    def __init__(self, weather=None, advice=None, news=None):
        self.replies = {
            "api.openweathermap.org": weather or json_reply(200, WEATHER_FIXTURE),
            "generativelanguage.googleapis.com": advice or json_reply(200, ADVICE_FIXTURE),
            "gnews.io": news or json_reply(200, NEWS_FIXTURE),
        }
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.replies[request.url.host](request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def hosts(self):
        return [r.url.host for r in self.requests]


@pytest.fixture
def upstreams():
    return FakeUpstreams()


@pytest.fixture
def app_config(tmp_path):
    return AppConfig(
        openweather_api_key="ow-key",
        gemini_api_key="gm-key",
        gnews_api_key="gn-key",
        static_dir=tmp_path / "public",
    )


@pytest.fixture
def weather_payload():
    return copy.deepcopy(WEATHER_FIXTURE)
