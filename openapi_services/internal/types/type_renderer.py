import re
from typing import Any, List, Mapping

import jsonref
from pydantic import BaseModel

from .models import ObjectType, PropertySignature, quote

_PRIMITIVES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
    "void": "void",
    "unknown": "unknown",
    "any": "any",
}


class TypeExpression(BaseModel):
    """Текст типа и имена внешних типов, на которые он ссылается"""

    text: str
    references: List[str] = []

    def __str__(self):
        return self.text


class TypeRenderer:
    """Преобразование схем OpenAPI в выражения типов TypeScript"""

    def render(self, schema: Any) -> TypeExpression:
        references: List[str] = []
        text = self._render(schema, references)
        return TypeExpression(text=text, references=_unique(references))

    def render_primitive(self, kind: str) -> TypeExpression:
        return TypeExpression(text=_PRIMITIVES.get(kind, "unknown"))

    @staticmethod
    def reference_name(ref: str) -> str:
        """'#/components/schemas/User' -> 'User'"""
        name = ref.rstrip("/").split("/")[-1]
        return sanitize_type_name(name)

    def _render(self, schema: Any, references: List[str]) -> str:
        # jsonref прокси проверяем до любого обращения к содержимому
        if isinstance(schema, jsonref.JsonRef):
            name = self.reference_name(schema.__reference__["$ref"])
            references.append(name)
            return name

        if not isinstance(schema, Mapping) or not schema:
            return "unknown"

        if isinstance(schema.get("$ref"), str):
            name = self.reference_name(schema["$ref"])
            references.append(name)
            return name

        text = self._render_node(schema, references)

        if schema.get("nullable") and text != "null":
            text = f"{_wrap(text)} | null"

        return text

    def _render_node(self, schema: Mapping, references: List[str]) -> str:
        if "allOf" in schema:
            return self._join(schema["allOf"], " & ", references)

        for key in ("oneOf", "anyOf"):
            if key in schema:
                return self._join(schema[key], " | ", references)

        if "enum" in schema:
            return " | ".join(_literal(value) for value in schema["enum"]) or "never"

        if "const" in schema:
            return _literal(schema["const"])

        schema_type = schema.get("type")

        # OpenAPI 3.1: type: [string, 'null']
        if isinstance(schema_type, list):
            return " | ".join(
                self._render_node({**schema, "type": t}, references)
                for t in schema_type
            )

        if schema_type == "array":
            items = self._render(schema.get("items"), references)
            return f"Array<{items}>"

        if schema_type == "object" or "properties" in schema:
            return self._render_object(schema, references)

        if schema_type == "string" and schema.get("format") == "binary":
            return "Blob"

        if schema_type in _PRIMITIVES:
            return _PRIMITIVES[schema_type]

        return "unknown"

    def _render_object(self, schema: Mapping, references: List[str]) -> str:
        properties = schema.get("properties") or {}
        additional = schema.get("additionalProperties")

        if not properties:
            if isinstance(additional, Mapping) and additional:
                return f"Record<string, {self._render(additional, references)}>"
            return "Record<string, unknown>"

        required = set(schema.get("required") or [])
        object_type = ObjectType(
            properties=[
                PropertySignature(
                    name=name,
                    type=self._render(prop_schema, references),
                    optional=name not in required,
                )
                for name, prop_schema in properties.items()
            ]
        )
        return str(object_type)

    def _join(self, schemas: List[Any], separator: str, references: List[str]) -> str:
        parts = _unique([_wrap(self._render(s, references)) for s in schemas])
        if not parts:
            return "unknown"

        return separator.join(parts)


def sanitize_type_name(name: str) -> str:
    """Имя схемы как идентификатор TypeScript"""
    clean = re.sub(r"[^A-Za-z0-9_$]", "_", name)
    if not clean or clean[0].isdigit():
        clean = "_" + clean
    return clean


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    return quote(str(value))


def _wrap(text: str) -> str:
    if (" | " in text or " & " in text) and not text.startswith("{"):
        return f"({text})"
    return text


def _unique(values: List[str]) -> List[str]:
    return list(dict.fromkeys(values))
