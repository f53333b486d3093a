"""
Конфигурация генерации сервисов
"""

import logging
import os
from typing import Optional
from dataclasses import dataclass

import toml

from .internal.generator.naming import NamingConvention

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "openapi-services.toml"

CONFIG_FIELD_TYPES = {
    "url": str,
    "dirname": str,
    "body_field": str,
    "strict_operation_ids": bool,
    "controller_token": str,
    "service_token": str,
}


@dataclass
class ServicesConfig:
    """Конфигурация генератора сервисов"""

    url: Optional[str] = None
    dirname: Optional[str] = None

    body_field: str = "bodyArgs"
    strict_operation_ids: bool = False

    controller_token: str = "Controller"
    service_token: str = "Service"

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: str = None
    ) -> Optional["ServicesConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (toml.TomlDecodeError, OSError) as exc:
            logger.warning("Cannot read %s: %s", config_path, exc)
            return None

        for key, value in config_data.items():
            expected = CONFIG_FIELD_TYPES.get(key)
            if expected is not None and not isinstance(value, expected):
                logger.warning(
                    "Cannot read %s: %s must be %s, got %r",
                    config_path,
                    key,
                    expected.__name__,
                    value,
                )
                return None

        defaults = cls()
        return cls(
            url=config_data.get("url"),
            dirname=config_data.get("dirname", "api_services"),
            body_field=config_data.get("body_field", defaults.body_field),
            strict_operation_ids=config_data.get(
                "strict_operation_ids", defaults.strict_operation_ids
            ),
            controller_token=config_data.get(
                "controller_token", defaults.controller_token
            ),
            service_token=config_data.get("service_token", defaults.service_token),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "url": self.url,
            "dirname": self.dirname,
            "body_field": self.body_field,
            "strict_operation_ids": self.strict_operation_ids,
            "controller_token": self.controller_token,
            "service_token": self.service_token,
        }
        # toml не умеет None
        config_data = {k: v for k, v in config_data.items() if v is not None}

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "ServicesConfig":
        """Объединение с аргументами командной строки"""
        return ServicesConfig(
            url=args.url or self.url,
            dirname=args.dirname or self.dirname,
            body_field=self.body_field,
            strict_operation_ids=getattr(args, "strict", False)
            or self.strict_operation_ids,
            controller_token=self.controller_token,
            service_token=self.service_token,
        )

    def naming_convention(self) -> NamingConvention:
        return NamingConvention(
            controller_token=self.controller_token,
            service_token=self.service_token,
        )
