#!/usr/bin/env python3
# /sidecode/factory.py
from __future__ import annotations

import os
from typing import Dict

from sidecode.base import ValidatorConfig
from sidecode.infrastructure.logging_manager import get_logger
from sidecode.registry import SideCodeRegistry
from sidecode.validator import LicensePlateValidator

logger = get_logger(__name__)


def build_validator(config: Dict[str, object] | ValidatorConfig | None = None) -> LicensePlateValidator:
    """Создаёт валидатор по секции ``sidecodes`` настроек.

    Если каталог с YAML-конфигурациями не задан, используется встроенный
    набор голландских шаблонов.
    """

    if not isinstance(config, ValidatorConfig):
        config = ValidatorConfig.from_dict(config or {})

    if config.config_dir is None:
        logger.debug("Каталог стран не задан, используется набор по умолчанию")
        return LicensePlateValidator()

    registry = SideCodeRegistry.from_config_dir(
        os.path.abspath(config.config_dir), enabled=config.enabled_countries
    )
    return LicensePlateValidator(registry)
