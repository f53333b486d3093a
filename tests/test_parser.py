"""
Тесты разбора OpenAPI описания
"""

import pytest

from openapi_services.internal.parser.openapi import OpenApiParser, resolve_ref

SPEC = {
    "components": {
        "schemas": {"Pet": {"type": "object"}, "Owner": {"type": "object"}},
        "requestBodies": {
            "PetBody": {
                "required": True,
                "content": {
                    "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}
                },
            }
        },
    },
    "paths": {
        "/pets": {
            "post": {
                "operationId": "PetController_create",
                "requestBody": {"$ref": "#/components/requestBodies/PetBody"},
                "responses": {201: {"description": "Created"}},
            },
            "get": {"operationId": "PetController_list"},
            "options": {"whatever": True},
        }
    },
}


class TestOpenApiParser:
    def test_declared_verbs_order(self):
        description = OpenApiParser(SPEC).parse()
        path_item = description.paths["/pets"]

        assert path_item.declared_verbs == ["post", "get", "options"]
        assert list(path_item.operations) == ["post", "get"]
        assert path_item.unknown_verbs() == ["options"]

    def test_request_body_ref_resolved_schema_kept(self):
        operation = OpenApiParser(SPEC).parse().paths["/pets"].operations["post"]

        assert operation.operation_id == "PetController_create"
        assert operation.request_body.required is True
        assert operation.request_body.content["application/json"].schema_ == {
            "$ref": "#/components/schemas/Pet"
        }
        assert list(operation.responses) == ["201"]

    def test_schemas_in_order(self):
        description = OpenApiParser(SPEC).parse()

        assert list(description.schemas) == ["Pet", "Owner"]

    def test_empty_document(self):
        description = OpenApiParser({}).parse()

        assert description.paths == {}
        assert description.schemas == {}


class TestResolveRef:
    def test_escaped_pointer(self):
        spec = {"paths": {"/a/b": {"get": {"operationId": "x"}}}}

        assert resolve_ref(spec, "#/paths/~1a~1b/get") == {"operationId": "x"}

    def test_missing(self):
        with pytest.raises(ValueError):
            resolve_ref({}, "#/components/schemas/Missing")
