"""Утилиты для шаблонов путей и имен привязок"""

import re
from typing import Dict, List, Union

from ..types.models import Identifier

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def binding_name(param_name: str) -> str:
    """
    Локальное имя для параметра пути.

    Examples:
        >>> binding_name("id")
        'id'
        >>> binding_name("user-id")
        'user_id'
    """
    name = re.sub(r"[^A-Za-z0-9_$]", "_", param_name)
    if not name or name[0].isdigit():
        name = "_" + name
    return name


def path_parameter_names(raw_path: str) -> List[str]:
    """Имена подстановок в порядке появления: /a/{x}/b/{y} -> [x, y]"""
    return _PLACEHOLDER.findall(raw_path)


def path_args_to_template(
    raw_path: str, bindings: Dict[str, str] = None
) -> List[Union[str, Identifier]]:
    """
    Разбивает путь на части шаблонной строки.

    Подстановки {name} заменяются на Identifier локальной привязки.

    Examples:
        >>> path_args_to_template("/users/{id}")
        ['/users/', Identifier(name='id')]
    """
    bindings = bindings or {}
    parts: List[Union[str, Identifier]] = []
    position = 0

    for match in _PLACEHOLDER.finditer(raw_path):
        if match.start() > position:
            parts.append(raw_path[position : match.start()])

        name = match.group(1)
        parts.append(Identifier(bindings.get(name, binding_name(name))))
        position = match.end()

    if position < len(raw_path):
        parts.append(raw_path[position:])

    return parts
