"""Имена сервиса и метода из operationId.

Соглашение NestJS: operationId = "<Controller>_<method>", например
"UserController_getUser" -> ("UserService", "getUser").
Все, что не делится ровно на две части, получает пару по умолчанию.
"""

from typing import Optional, Tuple

from pydantic import BaseModel


class NamingConvention(BaseModel):
    separator: str = "_"
    controller_token: str = "Controller"
    service_token: str = "Service"
    default_service: str = "Service"
    default_method: str = "unknownName"


NESTJS = NamingConvention()


def names_from_operation_id(
    operation_id: Optional[str], convention: NamingConvention = NESTJS
) -> Tuple[str, str]:
    """Пара (имя сервиса, имя метода); никогда не бросает исключений"""
    parts = operation_id.split(convention.separator) if operation_id is not None else []

    if len(parts) != 2:
        return convention.default_service, convention.default_method

    service_name, method_name = parts

    # Заменяется только первое вхождение
    return (
        service_name.replace(convention.controller_token, convention.service_token, 1),
        method_name,
    )
