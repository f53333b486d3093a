"""Генератор TypeScript сервисов из OpenAPI описаний"""

from .config import ServicesConfig
from .exceptions import (
    DuplicateOperationError,
    GenerationError,
    UnknownOperationError,
)
from .generator import ApiServicesGenerator, generate_services

__all__ = [
    "ApiServicesGenerator",
    "generate_services",
    "ServicesConfig",
    "GenerationError",
    "UnknownOperationError",
    "DuplicateOperationError",
]
