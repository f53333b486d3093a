"""
Модели разобранного OpenAPI описания
"""

from typing import Any, Dict, List, Optional, Iterable

from pydantic import BaseModel, ConfigDict, Field

KNOWN_OPERATIONS = ("post", "get", "patch", "delete", "put")


class Parameter(BaseModel):
    """Параметр операции"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(default="query", alias="in")
    # Схемы храним как есть: $ref и jsonref прокси нужны рендереру типов
    schema_: Any = Field(default=None, alias="schema")
    required: bool = False


class MediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Any = Field(default=None, alias="schema")


class RequestBody(BaseModel):
    content: Dict[str, MediaType] = {}
    required: bool = False


class Response(BaseModel):
    content: Dict[str, MediaType] = {}


class Operation(BaseModel):
    """Одна операция: HTTP-метод на пути"""

    model_config = ConfigDict(populate_by_name=True)

    operation_id: Optional[str] = Field(default=None, alias="operationId")
    parameters: List[Parameter] = []
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: Dict[str, Response] = {}


class PathItem(BaseModel):
    """Все объявленные ключи пути и разобранные операции известных методов"""

    declared_verbs: List[str] = []
    operations: Dict[str, Operation] = {}

    def unknown_verbs(self, known: Iterable[str] = KNOWN_OPERATIONS) -> List[str]:
        known = set(known)
        return [verb for verb in self.declared_verbs if verb not in known]


class APIDescription(BaseModel):
    paths: Dict[str, PathItem] = {}
    schemas: Dict[str, Any] = {}
