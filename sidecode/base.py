"""Базовые константы и модели для работы с sidecode-шаблонами."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

LETTER = "X"
DIGIT = "9"
ALNUM = "?"
DASH = "-"

SUPPORTED_SYMBOLS = (LETTER, DIGIT, ALNUM, DASH)

DEFAULT_COUNTRY = "NL"

# Порядок важен: побеждает первый подошедший шаблон.
DUTCH_SIDE_CODES: Tuple[str, ...] = (
    "XX-99-99",
    "99-99-XX",
    "99-XX-99",
    "XX-99-XX",
    "XX-XX-99",
    "99-XX-XX",
    "99-XXX-9",
    "9-XXX-99",
    "XX-999-X",
    "X-999-XX",
    "XXX-99-X",
    "X-99-XXX",
    "9-XX-999",
    "999-XX-9",
)

DEFAULT_SIDE_CODES: Dict[str, Tuple[str, ...]] = {DEFAULT_COUNTRY: DUTCH_SIDE_CODES}


@dataclass
class ValidatorConfig:
    """Настройки построения валидатора (секция ``sidecodes``)."""

    config_dir: Optional[Path] = None
    enabled_countries: List[str] = field(default_factory=list)
    default_country: str = DEFAULT_COUNTRY

    @classmethod
    def from_dict(cls, data: Dict) -> "ValidatorConfig":
        raw_dir = data.get("config_dir") or ""
        config_dir = Path(raw_dir) if raw_dir else None
        enabled_countries = [str(code).upper() for code in data.get("enabled_countries") or []]
        default_country = str(data.get("default_country") or DEFAULT_COUNTRY).upper()
        return cls(
            config_dir=config_dir,
            enabled_countries=enabled_countries,
            default_country=default_country,
        )
