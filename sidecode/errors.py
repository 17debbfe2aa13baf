"""Исключения валидатора номерных знаков."""
from __future__ import annotations

from typing import Optional


class SideCodeError(Exception):
    """Базовая ошибка пакета."""


class InvalidArgumentError(SideCodeError, ValueError):
    """Пустой номер или некорректный реестр при создании валидатора."""


class NotFoundError(SideCodeError, LookupError):
    """Страна или подходящий sidecode не найдены."""


class CountryNotFoundError(NotFoundError):
    def __init__(self, country: Optional[str]) -> None:
        super().__init__(f"Страна не поддерживается: {country}")
        self.country = country


class SideCodeNotFoundError(NotFoundError):
    def __init__(self, plate: str, country: str) -> None:
        super().__init__(f"Не найден sidecode для номера '{plate}' (страна {country})")
        self.plate = plate
        self.country = country


class UnsupportedTemplateSymbolError(SideCodeError, ValueError):
    """Шаблон содержит символ вне набора X, 9, ?, -."""

    def __init__(self, symbol: str, side_code: str) -> None:
        super().__init__(f"Некорректный sidecode '{side_code}': недопустимый символ '{symbol}'")
        self.symbol = symbol
        self.side_code = side_code
