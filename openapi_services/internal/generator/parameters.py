"""Классификация параметров операции по месту передачи"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from ..types.spec import MediaType, Operation, Parameter

_PREFERRED_CONTENT_TYPES = ("application/json", "*/*")


class BodySchema(BaseModel):
    content_name: str
    schema_: Any = None
    required: bool = False


class ResponseSchema(BaseModel):
    schema_: Any = None
    status: str


def group_parameters(operation: Operation) -> Dict[str, List[Parameter]]:
    """location -> параметры в порядке объявления"""
    grouped: Dict[str, List[Parameter]] = {}
    for param in operation.parameters:
        grouped.setdefault(param.location, []).append(param)
    return grouped


def extract_body_schema(
    operation: Operation, content_name: str = "bodyArgs"
) -> Optional[BodySchema]:
    """Схема тела, если запрос объявляет структурированный контент"""
    request_body = operation.request_body
    if request_body is None:
        return None

    media = _pick_media(request_body.content)
    if media is None:
        return None

    return BodySchema(
        content_name=content_name,
        schema_=media.schema_,
        required=request_body.required,
    )


def extract_response_schema(operation: Operation) -> Optional[ResponseSchema]:
    """Схема первого успешного ответа с контентом"""
    statuses = [s for s in operation.responses if s.startswith("2")]
    if "default" in operation.responses:
        statuses.append("default")

    for status in statuses:
        media = _pick_media(operation.responses[status].content)
        if media is not None:
            return ResponseSchema(schema_=media.schema_, status=status)

    return None


def has_parameters(operation: Operation, body: Optional[BodySchema]) -> bool:
    return body is not None or bool(operation.parameters)


def _pick_media(content: Dict[str, MediaType]) -> Optional[MediaType]:
    with_schema = {
        content_type: media
        for content_type, media in content.items()
        if media.schema_ is not None
    }
    for content_type in _PREFERRED_CONTENT_TYPES:
        if content_type in with_schema:
            return with_schema[content_type]

    for content_type, media in with_schema.items():
        if content_type.endswith("+json") or content_type.endswith("/json"):
            return media

    return next(iter(with_schema.values()), None)
