# core/models/weather_response.py
from dataclasses import dataclass
from typing import List, Optional

from core.models.city import Coordinates
from core.utils.error_handler import RenderAssumptionViolation

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"


@dataclass(frozen=True)
class WeatherSnapshot:
    city: str
    coord: Coordinates
    condition: str
    description: str
    icon: str
    temp: float
    feels_like: float
    pressure: float
    humidity: float
    wind_speed: float
    country_code: str

    @classmethod
    def from_openweather(cls, city_name: str, payload: dict) -> "WeatherSnapshot":
        """Нормализует ответ OpenWeather (coord, weather[0], main, wind, sys)."""
        try:
            current = payload["weather"][0]
            main = payload["main"]
            return cls(
                city=city_name,
                coord=Coordinates(lat=payload["coord"]["lat"], lon=payload["coord"]["lon"]),
                condition=current["main"],
                description=current["description"],
                icon=current["icon"],
                temp=main["temp"],
                feels_like=main["feels_like"],
                pressure=main["pressure"],
                humidity=main["humidity"],
                wind_speed=payload["wind"]["speed"],
                country_code=payload["sys"]["country"],
            )
        except (KeyError, IndexError, TypeError) as e:
            raise RenderAssumptionViolation(f"Неполный ответ погоды для {city_name}: {e!r}") from e

    @property
    def icon_url(self) -> str:
        return ICON_URL_TEMPLATE.format(icon=self.icon)

    def to_map_data(self) -> dict:
        return {"city": self.city, "coord": {"lat": self.coord.lat, "lon": self.coord.lon}}


@dataclass(frozen=True)
class Advice:
    """Ответ генеративной модели; на страницу идёт только текст."""
    raw: dict

    @property
    def text(self) -> str:
        return extract_advice_text(self.raw) or ""


def extract_advice_text(raw: dict) -> Optional[str]:
    """Склеивает candidates[0].content.parts[*].text; None, если текста нет."""
    try:
        parts = raw["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(parts, list):
        return None
    texts = [
        part["text"] for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    text = "".join(texts).strip()
    return text or None


@dataclass(frozen=True)
class NewsArticle:
    title: str
    description: str

    @classmethod
    def list_from_gnews(cls, payload: dict) -> List["NewsArticle"]:
        """Статьи в порядке провайдера, без фильтрации."""
        articles = payload.get("articles") if isinstance(payload, dict) else None
        return [
            cls(title=item.get("title") or "", description=item.get("description") or "")
            for item in articles or []
            if isinstance(item, dict)
        ]
