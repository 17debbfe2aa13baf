#!/usr/bin/env python3
# /sidecode/infrastructure/logging_manager.py
"""Единая точка настройки логирования."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggingManager:
    """Настраивает консольный и ротируемый файловый обработчики.

    Принимает секцию ``logging`` из настроек: ``level``, ``file``,
    ``max_bytes``, ``backup_count``. Повторный вызов заменяет ранее
    установленные обработчики, а не дублирует их.
    """

    _handlers: List[logging.Handler] = []

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = config or {}
        self.level = self._parse_level(self.config.get("level", "INFO"))
        self._configure()

    @staticmethod
    def _parse_level(raw: Any) -> int:
        if isinstance(raw, int):
            return raw
        level = logging.getLevelName(str(raw).upper())
        return level if isinstance(level, int) else logging.INFO

    def _configure(self) -> None:
        logger = logging.getLogger()
        for handler in LoggingManager._handlers:
            logger.removeHandler(handler)
            handler.close()
        LoggingManager._handlers = []

        formatter = logging.Formatter(LOG_FORMAT)
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        LoggingManager._handlers.append(console)

        log_file = self.config.get("file")
        if log_file:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=int(self.config.get("max_bytes", 1048576)),
                backupCount=int(self.config.get("backup_count", 5)),
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            LoggingManager._handlers.append(file_handler)

        for handler in LoggingManager._handlers:
            logger.addHandler(handler)
        logger.setLevel(self.level)
