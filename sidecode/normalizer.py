"""Нормализация номеров перед сравнением с шаблонами."""
from __future__ import annotations

import unicodedata
from typing import Optional

from .base import DASH


def normalize_plate(raw: Optional[str]) -> Optional[str]:
    """Приводит номер к форме NFC без пробелов и в верхнем регистре.

    Возвращает ``None``, если строка пустая или состоит только из пробелов.
    Исключений не бросает: решение об ошибке принимает вызывающий код.
    """

    if raw is None or not raw.strip():
        return None
    composed = unicodedata.normalize("NFC", raw)
    # str.isspace покрывает все пробельные символы Unicode, не только ASCII
    compact = "".join(ch for ch in composed if not ch.isspace())
    upper = "".join(_upper_char(ch) for ch in compact)
    return unicodedata.normalize("NFC", upper)


def _upper_char(ch: str) -> str:
    # Один символ в один: ß и ΐ в верхнем регистре разворачиваются в несколько
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def remove_dashes(value: str) -> str:
    return value.replace(DASH, "")
