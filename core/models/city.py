# core/models/city.py
# -*- coding: utf-8 -*-
"""
Реестр городов, для которых можно получить погоду.
Список неизменяемый: строится один раз при старте и передаётся явно.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from core.utils.error_handler import CityNotFound


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class City:
    name: str
    lat: float
    lon: float

    @property
    def geo(self) -> Coordinates:
        return Coordinates(lat=self.lat, lon=self.lon)


DEFAULT_CITIES = (
    City("Astana", 51.169392, 71.449074),
    City("Almaty", 43.238949, 76.889709),
    City("California", 36.778259, -119.417931),
    City("Paris", 48.864716, 2.349014),
    City("Province of Turin", 45.133, 7.367),
)


class CityRegistry:
    """Таблица городов, индексируемая по позиции."""

    def __init__(self, cities: Iterable[City] = DEFAULT_CITIES):
        self._cities: Tuple[City, ...] = tuple(cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[Tuple[int, City]]:
        return iter(enumerate(self._cities))

    def get(self, index: int) -> City:
        # bool является подклассом int, но индексом не считается
        if not isinstance(index, int) or isinstance(index, bool):
            raise CityNotFound(index)
        if not 0 <= index < len(self._cities):
            raise CityNotFound(index)
        return self._cities[index]
