#/sidecode/validator.py
"""Проверка и форматирование номерных знаков по sidecode-шаблонам стран."""
from __future__ import annotations

from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from .base import DEFAULT_SIDE_CODES
from .errors import InvalidArgumentError, SideCodeNotFoundError
from .formatter import format_with_side_code
from .infrastructure.logging_manager import get_logger
from .matcher import match_side_code
from .normalizer import normalize_plate, remove_dashes
from .registry import SideCodeRegistry

logger = get_logger(__name__)

_DEFAULT = object()


class LicensePlateValidator:
    """Находит sidecode номера, проверяет и форматирует его.

    Без аргументов поддерживается только Нидерланды (``NL``). Переданный
    словарь полностью заменяет набор по умолчанию. Экземпляр не меняется
    после создания и может использоваться из нескольких потоков.
    """

    def __init__(self, supported_side_codes: Mapping[str, Sequence[str]] | SideCodeRegistry = _DEFAULT) -> None:  # type: ignore[assignment]
        if supported_side_codes is _DEFAULT:
            supported_side_codes = DEFAULT_SIDE_CODES
        if isinstance(supported_side_codes, SideCodeRegistry):
            self.registry = supported_side_codes
        else:
            self.registry = SideCodeRegistry(supported_side_codes)

    @property
    def countries(self) -> List[str]:
        return self.registry.countries()

    def side_codes(self, country: str) -> Tuple[str, ...]:
        return self.registry.side_codes(country)

    def _prepare(self, plate: Optional[str], ignore_dashes: bool) -> Tuple[str, str]:
        normalized = normalize_plate(plate)
        if normalized is None:
            raise InvalidArgumentError("Номер не может быть пустым")
        candidate = remove_dashes(normalized) if ignore_dashes else normalized
        if not candidate:
            raise InvalidArgumentError("Номер не может быть пустым")
        return normalized, candidate

    def _candidates(self, country: str, ignore_dashes: bool) -> Iterator[Tuple[str, str]]:
        """Шаблоны страны в порядке регистрации: (исходный, для сравнения)."""

        for side_code in self.registry.side_codes(country):
            yield side_code, remove_dashes(side_code) if ignore_dashes else side_code

    def _match(self, candidate: str, country: str, ignore_dashes: bool) -> Optional[str]:
        for side_code, comparable in self._candidates(country, ignore_dashes):
            if match_side_code(candidate, comparable, registered=side_code):
                return side_code
        return None

    def try_find_side_code(self, plate: Optional[str], country: str, ignore_dashes: bool = False) -> Optional[str]:
        """Возвращает первый подходящий sidecode или ``None``."""

        _, candidate = self._prepare(plate, ignore_dashes)
        side_code = self._match(candidate, country, ignore_dashes)
        if side_code is None:
            logger.debug("%s: sidecode для '%s' не найден", country, candidate)
        else:
            logger.debug("%s: '%s' соответствует sidecode '%s'", country, candidate, side_code)
        return side_code

    def find_side_code(self, plate: Optional[str], country: str, ignore_dashes: bool = False) -> str:
        side_code = self.try_find_side_code(plate, country, ignore_dashes)
        if side_code is None:
            raise SideCodeNotFoundError(plate or "", country)
        return side_code

    def try_format_plate(self, plate: Optional[str], country: str, ignore_dashes: bool = True) -> Optional[str]:
        """Форматирует номер по найденному sidecode или возвращает ``None``."""

        normalized, candidate = self._prepare(plate, ignore_dashes)
        side_code = self._match(candidate, country, ignore_dashes)
        if side_code is None:
            logger.debug("%s: нечем отформатировать '%s'", country, candidate)
            return None
        formatted = format_with_side_code(remove_dashes(normalized), side_code)
        logger.debug("%s: '%s' -> '%s' (sidecode '%s')", country, plate, formatted, side_code)
        return formatted

    def format_plate(self, plate: Optional[str], country: str, ignore_dashes: bool = True) -> str:
        formatted = self.try_format_plate(plate, country, ignore_dashes)
        if formatted is None:
            raise SideCodeNotFoundError(plate or "", country)
        return formatted

    def is_valid_plate(self, plate: Optional[str], country: str, ignore_dashes: bool = False) -> bool:
        """Проверяет номер.

        С ``ignore_dashes=True`` достаточно, чтобы номер можно было
        отформатировать; без него дефисы должны стоять ровно как в шаблоне.
        """

        if ignore_dashes:
            return self.try_format_plate(plate, country, ignore_dashes=True) is not None
        return self.try_find_side_code(plate, country, ignore_dashes=False) is not None
