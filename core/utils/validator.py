# core/utils/validator.py
from typing import Optional

from core.models.city import City, CityRegistry
from core.utils.error_handler import CityNotFound


def parse_city_index(raw: Optional[str], registry: CityRegistry) -> City:
    """
    Проверяет индекс города из формы и возвращает город.
    Допускается только целое неотрицательное число меньше размера реестра.
    """
    if raw is None:
        raise CityNotFound(raw)
    text = str(raw).strip()
    if not text.isdigit() or not text.isascii():
        raise CityNotFound(raw)
    # Слишком длинные строки int() не переводит (лимит цифр), индексом они быть не могут
    if len(text.lstrip("0")) > len(str(len(registry))):
        raise CityNotFound(raw)
    try:
        index = int(text)
    except ValueError:
        raise CityNotFound(raw) from None
    return registry.get(index)
