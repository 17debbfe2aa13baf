# /sidecode_cli.py
"""CLI-обертка для проверки и форматирования номеров из командной строки.

Логика сопоставления живёт в пакете ``sidecode``; здесь только разбор
аргументов, настройка логирования и вывод результатов.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sidecode import LicensePlateValidator, SideCodeError, build_validator
from sidecode.base import ValidatorConfig
from sidecode.infrastructure.logging_manager import LoggingManager, get_logger
from sidecode.infrastructure.settings_manager import SettingsManager

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Проверка и форматирование автомобильных номеров по sidecode.")
    parser.add_argument("--settings", default="settings.json", help="Путь к JSON-файлу настроек.")
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Каталог с YAML-описаниями стран (заменяет встроенный набор NL).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    find_parser = subparsers.add_parser("find", help="Найти sidecode номера.")
    find_parser.add_argument("plate")
    find_parser.add_argument("--country", default=None, help="Код страны (по умолчанию из настроек).")
    find_parser.add_argument("--ignore-dashes", action="store_true", help="Не учитывать положение дефисов.")

    format_parser = subparsers.add_parser("format", help="Отформатировать номер по sidecode.")
    format_parser.add_argument("plate")
    format_parser.add_argument("--country", default=None, help="Код страны (по умолчанию из настроек).")
    format_parser.add_argument("--strict", action="store_true", help="Требовать дефисы ровно как в шаблоне.")

    validate_parser = subparsers.add_parser("validate", help="Проверить номер.")
    validate_parser.add_argument("plate")
    validate_parser.add_argument("--country", default=None, help="Код страны (по умолчанию из настроек).")
    validate_parser.add_argument("--ignore-dashes", action="store_true", help="Не учитывать положение дефисов.")

    subparsers.add_parser("countries", help="Показать страны и их шаблоны.")
    return parser


def _validator_config(settings: SettingsManager, config_dir: Optional[str]) -> ValidatorConfig:
    sidecode_conf = dict(settings.get_sidecode_config())
    if config_dir:
        sidecode_conf["config_dir"] = config_dir
    return ValidatorConfig.from_dict(sidecode_conf)


def run(args: argparse.Namespace, validator: LicensePlateValidator, default_country: str) -> int:
    country = getattr(args, "country", None) or default_country

    if args.command == "find":
        print(validator.find_side_code(args.plate, country, ignore_dashes=args.ignore_dashes))
        return 0
    if args.command == "format":
        print(validator.format_plate(args.plate, country, ignore_dashes=not args.strict))
        return 0
    if args.command == "validate":
        is_valid = validator.is_valid_plate(args.plate, country, ignore_dashes=args.ignore_dashes)
        print("valid" if is_valid else "invalid")
        return 0 if is_valid else 1

    for entry in validator.registry.to_metadata():
        print(f"{entry['code']} ({entry['name']}): {', '.join(entry['side_codes'])}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = SettingsManager(args.settings)
        LoggingManager(settings.get_logging_config())
        config = _validator_config(settings, args.config_dir)
        validator = build_validator(config)
        return run(args, validator, config.default_country)
    except SideCodeError as exc:
        logger.error("Ошибка обработки номера: %s", exc)
        print(f"Ошибка: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.exception("Непредвиденная ошибка")
        print(f"Непредвиденная ошибка: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
