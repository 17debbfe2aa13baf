"""Реестр sidecode-шаблонов по странам."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import yaml

from .errors import CountryNotFoundError, InvalidArgumentError
from .infrastructure.logging_manager import get_logger

logger = get_logger(__name__)


def _country_key(code: str) -> str:
    return code.strip().upper()


class SideCodeRegistry:
    """Неизменяемое сопоставление кода страны и упорядоченного списка шаблонов.

    Коды стран очищаются от пробелов и приводятся к верхнему регистру при
    построении, поэтому поиск не зависит от регистра. Символы шаблонов здесь
    не проверяются: это происходит только при сравнении с номером.
    """

    def __init__(
        self,
        side_codes: Mapping[str, Sequence[str]],
        names: Optional[Mapping[str, str]] = None,
    ) -> None:
        if side_codes is None:
            raise InvalidArgumentError("Не передан реестр sidecode-шаблонов")
        if not isinstance(side_codes, Mapping):
            raise InvalidArgumentError(
                f"Реестр sidecode-шаблонов должен быть словарём, получено {type(side_codes).__name__}"
            )

        self._by_code: Dict[str, Tuple[str, ...]] = {}
        for code, templates in side_codes.items():
            if not isinstance(code, str) or not code.strip():
                raise InvalidArgumentError(f"Некорректный код страны: {code!r}")
            key = _country_key(code)
            if key in self._by_code:
                raise InvalidArgumentError(f"Код страны {code} указан несколько раз")
            self._by_code[key] = self._freeze(code, templates)

        self._names = {_country_key(code): name for code, name in (names or {}).items()}
        logger.debug("Реестр sidecode-шаблонов: %s", ", ".join(self._by_code) or "пусто")

    @staticmethod
    def _freeze(code: str, templates: Sequence[str]) -> Tuple[str, ...]:
        if templates is None or isinstance(templates, str):
            raise InvalidArgumentError(f"{code}: ожидается список шаблонов, получено {templates!r}")
        frozen = tuple(templates)
        for template in frozen:
            if not isinstance(template, str):
                raise InvalidArgumentError(f"{code}: шаблон должен быть строкой, получено {template!r}")
        return frozen

    @classmethod
    def from_config_dir(cls, path: Path | str, enabled: Optional[Iterable[str]] = None) -> "SideCodeRegistry":
        """Загружает страны из ``*.yaml`` файлов каталога.

        Формат файла::

            code: NL
            name: Netherlands
            side_codes:
              - XX-99-99
              - 99-99-XX

        Битые файлы пропускаются с предупреждением в логе.
        """

        base = Path(path)
        enabled_codes = {_country_key(code) for code in enabled or []}
        side_codes: Dict[str, List[str]] = {}
        names: Dict[str, str] = {}

        for yaml_path in sorted(base.glob("*.yaml")):
            try:
                with open(yaml_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                code, name, templates = cls._parse_country(yaml_path, data)
            except (OSError, yaml.YAMLError, ValueError) as exc:
                logger.warning("Не удалось загрузить страну из %s: %s", yaml_path.name, exc)
                continue
            if enabled_codes and code not in enabled_codes:
                continue
            if code in side_codes:
                logger.warning("Страна %s из %s уже загружена, файл пропущен", code, yaml_path.name)
                continue
            side_codes[code] = templates
            names[code] = name

        if not side_codes:
            raise InvalidArgumentError(f"В каталоге {base} не найдено ни одной страны")
        logger.info("Загружено стран из %s: %d", base, len(side_codes))
        return cls(side_codes, names=names)

    @staticmethod
    def _parse_country(path: Path, data: object) -> Tuple[str, str, List[str]]:
        if not isinstance(data, dict):
            raise ValueError("ожидается словарь верхнего уровня")
        code = _country_key(str(data.get("code") or path.stem))
        raw_side_codes = data.get("side_codes") or []
        if not isinstance(raw_side_codes, list):
            raise ValueError("side_codes должен быть списком")
        # YAML превращает шаблоны вроде 999 в числа
        templates = [str(item) for item in raw_side_codes if item is not None]
        return code, str(data.get("name") or code), templates

    def countries(self) -> List[str]:
        return list(self._by_code)

    def side_codes(self, country: str) -> Tuple[str, ...]:
        if country is None:
            raise CountryNotFoundError(country)
        try:
            return self._by_code[_country_key(country)]
        except KeyError:
            raise CountryNotFoundError(country) from None

    def __contains__(self, country: object) -> bool:
        return isinstance(country, str) and _country_key(country) in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)

    def to_metadata(self) -> List[Dict[str, object]]:
        return [
            {"code": code, "name": self._names.get(code, code), "side_codes": list(templates)}
            for code, templates in self._by_code.items()
        ]
