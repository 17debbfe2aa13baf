"""Посимвольное сравнение номера с sidecode-шаблоном."""
from __future__ import annotations

from typing import Optional

from .base import ALNUM, DASH, DIGIT, LETTER
from .errors import UnsupportedTemplateSymbolError


def _symbol_matches(symbol: str, plate_char: str, side_code: str) -> bool:
    if symbol == LETTER:
        return plate_char.isalpha()
    if symbol == DIGIT:
        return plate_char.isdecimal()
    if symbol == ALNUM:
        return plate_char.isalpha() or plate_char.isdecimal()
    if symbol == DASH:
        return plate_char == DASH
    raise UnsupportedTemplateSymbolError(symbol, side_code)


def match_side_code(plate: str, side_code: str, registered: Optional[str] = None) -> bool:
    """Проверяет, соответствует ли номер шаблону.

    Разная длина означает несовпадение без дальнейших проверок. Иначе шаблон
    просматривается целиком слева направо: обычное несовпадение не прерывает
    проход, поэтому недопустимый символ дальше по шаблону всё равно приводит
    к :class:`UnsupportedTemplateSymbolError`. В ошибке указывается
    ``registered``, если шаблон передан без дефисов.
    """

    if len(plate) != len(side_code):
        return False

    matched = True
    for symbol, plate_char in zip(side_code, plate):
        if not _symbol_matches(symbol, plate_char, registered or side_code):
            matched = False
    return matched
