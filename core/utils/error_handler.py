# -*- coding: utf-8 -*-
"""
Централизованная обработка ошибок.

Иерархия:
- ValidationError: неверный индекс города (короткое сообщение пользователю)
- UpstreamError: провайдер ответил не-2xx
- NetworkError: сбой транспорта (DNS, таймаут, обрыв соединения)
- RenderAssumptionViolation: неполные данные для страницы
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class DigestError(Exception):
    """Базовая ошибка сервера."""


class ValidationError(DigestError):
    """Неверный ввод пользователя."""


class CityNotFound(ValidationError):
    def __init__(self, index):
        self.index = index
        super().__init__(f"Город с индексом {index!r} не найден")


class UpstreamError(DigestError):
    """Провайдер вернул неуспешный статус."""

    def __init__(self, provider: str, status: int, message: str = ""):
        self.provider = provider
        self.status = status
        self.message = message
        super().__init__(f"{provider}: HTTP {status} {message}".rstrip())


class NetworkError(DigestError):
    """Запрос не дошёл до провайдера."""

    def __init__(self, provider: str, message: str = ""):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: сетевая ошибка: {message}".rstrip())


class RenderAssumptionViolation(DigestError):
    """Данных недостаточно для построения страницы."""


def http_status_for(exception: Exception) -> int:
    """Статус ответа для ошибки, прервавшей конвейер."""
    if isinstance(exception, (UpstreamError, NetworkError, RenderAssumptionViolation)):
        return 502
    if isinstance(exception, ValidationError):
        return 200
    return 500


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Просто логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (город, провайдер и т.п.)
    """
    log_context = f" | Контекст: {context}" if context else ""
    # Ожидаемые ошибки провайдеров логируем без трейсбэка
    exc_info = not isinstance(exception, DigestError)
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=exc_info)
