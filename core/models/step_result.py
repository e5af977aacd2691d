# core/models/step_result.py
# -*- coding: utf-8 -*-
"""
Результат шага конвейера: либо значение, либо ошибка.
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class StepResult:
    step: str
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, step: str, value: Any) -> "StepResult":
        return cls(step=step, value=value)

    @classmethod
    def failure(cls, step: str, error: Exception) -> "StepResult":
        return cls(step=step, error=error)
