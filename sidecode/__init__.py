"""Проверка и форматирование номерных знаков по sidecode-шаблонам."""

from .base import DEFAULT_COUNTRY, DEFAULT_SIDE_CODES, DUTCH_SIDE_CODES, ValidatorConfig
from .errors import (
    CountryNotFoundError,
    InvalidArgumentError,
    NotFoundError,
    SideCodeError,
    SideCodeNotFoundError,
    UnsupportedTemplateSymbolError,
)
from .factory import build_validator
from .registry import SideCodeRegistry
from .validator import LicensePlateValidator

__all__ = [
    "DEFAULT_COUNTRY",
    "DEFAULT_SIDE_CODES",
    "DUTCH_SIDE_CODES",
    "ValidatorConfig",
    "CountryNotFoundError",
    "InvalidArgumentError",
    "NotFoundError",
    "SideCodeError",
    "SideCodeNotFoundError",
    "UnsupportedTemplateSymbolError",
    "build_validator",
    "SideCodeRegistry",
    "LicensePlateValidator",
]
