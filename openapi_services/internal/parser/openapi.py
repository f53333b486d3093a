import logging
from typing import Any, Dict, Mapping

from ..types.spec import (
    KNOWN_OPERATIONS,
    APIDescription,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
)

logger = logging.getLogger(__name__)


class OpenApiParser:
    """Парсер OpenAPI спецификации в APIDescription"""

    def __init__(self, openapi_dict: Dict[str, Any]):
        self.openapi_dict = openapi_dict

    def parse(self) -> APIDescription:
        """Разбор путей и компонентных схем"""
        paths = {
            raw_path: self._parse_path_item(raw_path, path_spec or {})
            for raw_path, path_spec in (self.openapi_dict.get("paths") or {}).items()
        }
        schemas = dict(
            (self.openapi_dict.get("components") or {}).get("schemas") or {}
        )
        return APIDescription(paths=paths, schemas=schemas)

    def _parse_path_item(self, raw_path: str, path_spec: Mapping) -> PathItem:
        declared_verbs = list(path_spec.keys())
        operations = {}

        # Неизвестные ключи не разбираем: их отвергает генератор
        for verb in declared_verbs:
            if verb in KNOWN_OPERATIONS:
                operations[verb] = self._parse_operation(path_spec[verb] or {})

        logger.debug("Parsed %s: %s", raw_path, ", ".join(declared_verbs))
        return PathItem(declared_verbs=declared_verbs, operations=operations)

    def _parse_operation(self, spec: Mapping) -> Operation:
        parameters = [
            Parameter.model_validate(dict(self._resolve(param)))
            for param in spec.get("parameters") or []
        ]

        request_body = None
        if spec.get("requestBody"):
            request_body = RequestBody.model_validate(
                self._with_content(self._resolve(spec["requestBody"]))
            )

        responses = {
            str(status): Response.model_validate(
                self._with_content(self._resolve(response or {}))
            )
            for status, response in (spec.get("responses") or {}).items()
        }

        return Operation(
            operation_id=spec.get("operationId"),
            parameters=parameters,
            request_body=request_body,
            responses=responses,
        )

    @staticmethod
    def _with_content(spec: Mapping) -> Dict[str, Any]:
        result = dict(spec)
        result["content"] = {
            content_type: dict(media or {})
            for content_type, media in (spec.get("content") or {}).items()
        }
        return result

    def _resolve(self, node: Any) -> Any:
        """Разрешение локального $ref для параметров, тел и ответов (не схем)"""
        seen = set()
        while isinstance(node, Mapping) and isinstance(node.get("$ref"), str):
            ref = node["$ref"]
            if ref in seen or not ref.startswith("#/"):
                raise ValueError(f"Cannot resolve reference {ref}")
            seen.add(ref)
            node = resolve_ref(self.openapi_dict, ref)
        return node


def resolve_ref(spec: Mapping, ref: str) -> Any:
    """Разрешение JSON pointer вида #/components/parameters/Limit"""
    node = spec
    for part in ref.lstrip("#/").split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, Mapping) or part not in node:
            raise ValueError(f"Cannot resolve reference {ref}")
        node = node[part]
    return node
