from __future__ import annotations

from typing import List

from .base import DASH
from .normalizer import remove_dashes


def format_with_side_code(plate: str, side_code: str) -> str:
    """Расставляет дефисы номера по позициям шаблона.

    Шаблон должен заранее совпасть с номером (без учёта дефисов).
    """

    characters = remove_dashes(plate)
    if len(characters) != len(remove_dashes(side_code)):
        raise ValueError(f"Номер '{plate}' не подходит под шаблон '{side_code}'")

    result: List[str] = []
    position = 0
    for symbol in side_code:
        if symbol == DASH:
            result.append(DASH)
        else:
            result.append(characters[position])
            position += 1
    return "".join(result)
