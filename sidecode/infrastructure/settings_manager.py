#!/usr/bin/env python3
# /sidecode/infrastructure/settings_manager.py
import json
import os
from typing import Any, Dict

from sidecode.base import DEFAULT_COUNTRY


class SettingsManager:
    """Управляет JSON-настройками валидатора и логирования."""

    def __init__(self, path: str = "settings.json") -> None:
        self.path = path
        self.settings = self._load()

    def _default(self) -> Dict[str, Any]:
        return {
            "sidecodes": self._sidecode_defaults(),
            "logging": self._logging_defaults(),
        }

    @staticmethod
    def _sidecode_defaults() -> Dict[str, Any]:
        return {
            "config_dir": "",
            "enabled_countries": [],
            "default_country": DEFAULT_COUNTRY,
        }

    @staticmethod
    def _logging_defaults() -> Dict[str, Any]:
        return {
            "level": "INFO",
            "file": "",
            "max_bytes": 1048576,
            "backup_count": 5,
        }

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            defaults = self._default()
            self._save(defaults)
            return defaults
        with open(self.path, "r", encoding="utf-8") as f:
            return self._upgrade(json.load(f))

    def _upgrade(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Дополняет существующие настройки недостающими полями."""

        changed = False
        if self._fill_section_defaults(data, "sidecodes", self._sidecode_defaults()):
            changed = True
        if self._fill_section_defaults(data, "logging", self._logging_defaults()):
            changed = True

        if changed:
            self._save(data)
        return data

    @staticmethod
    def _fill_section_defaults(data: Dict[str, Any], section: str, defaults: Dict[str, Any]) -> bool:
        if section not in data or not isinstance(data.get(section), dict):
            data[section] = defaults
            return True

        changed = False
        current = data[section]
        for key, value in defaults.items():
            if key not in current:
                # Пользовательские значения не перезаписываем.
                current[key] = value
                changed = True
        return changed

    def _save(self, data: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get_sidecode_config(self) -> Dict[str, Any]:
        return self.settings.get("sidecodes", {})

    def save_sidecode_config(self, sidecode_conf: Dict[str, Any]) -> None:
        self.settings["sidecodes"] = sidecode_conf
        self._save(self.settings)

    def get_logging_config(self) -> Dict[str, Any]:
        return self.settings.get("logging", {})

    def refresh(self) -> None:
        self.settings = self._load()
