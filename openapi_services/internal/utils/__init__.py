"""Утилиты для генератора"""

from .path_utils import (
    binding_name,
    path_parameter_names,
    path_args_to_template,
)

__all__ = [
    "binding_name",
    "path_parameter_names",
    "path_args_to_template",
]
