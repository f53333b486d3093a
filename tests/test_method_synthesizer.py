"""
Тесты синтеза методов сервиса
"""

import logging

import pytest

from openapi_services.internal.generator.method_synthesizer import MethodSynthesizer
from openapi_services.internal.types.models import ClassDeclaration, SourceFile
from openapi_services.internal.types.spec import Operation
from openapi_services.internal.types.type_renderer import TypeRenderer


@pytest.fixture
def models_file():
    return SourceFile(file_name="models.ts")


@pytest.fixture
def service_file():
    return SourceFile(file_name="services/UserService.ts")


@pytest.fixture
def service_class():
    return ClassDeclaration(name="UserService")


@pytest.fixture
def synthesize(models_file, service_file, service_class):
    synthesizer = MethodSynthesizer(TypeRenderer(), models_file)

    def _synthesize(raw_path, verb, method_name="method", **spec):
        return synthesizer.synthesize(
            service_file=service_file,
            service_class=service_class,
            method_name=method_name,
            raw_path=raw_path,
            verb=verb,
            operation=Operation.model_validate(spec),
        )

    return _synthesize


def json_content(schema):
    return {"content": {"application/json": {"schema": schema}}}


class TestMethodSynthesizer:
    def test_get_user(self, synthesize, service_file):
        method = synthesize(
            "/users/{id}",
            "get",
            method_name="getUser",
            parameters=[
                {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
            ],
            responses={"200": json_content({"$ref": "#/components/schemas/User"})},
        )

        assert str(method) == (
            "getUser(props: { id: string }): Promise<User> {\n"
            "  const { baseUrl, adapter } = this.configuration\n"
            "  const {\n"
            "    id,\n"
            "  } = props\n"
            "\n"
            "  return adapter<User>({\n"
            "    url: `${baseUrl}/users/${id}`,\n"
            "    method: 'GET',\n"
            "    queryParams: undefined,\n"
            "    bodyArgs: undefined,\n"
            "  })\n"
            "}"
        )
        assert [str(i) for i in service_file.imports] == [
            "import type { User } from '../models'"
        ]

    def test_without_parameters(self, synthesize, service_file):
        method = synthesize("/health", "get", method_name="check")

        assert method.parameters == []
        assert method.return_type == "Promise<void>"
        assert str(method).startswith("check(): Promise<void> {")
        assert "const {\n" not in str(method)
        assert "adapter<void>(" in str(method)
        assert service_file.imports == []

    def test_query_parameters(self, synthesize):
        method = synthesize(
            "/users",
            "get",
            parameters=[
                {"name": "limit", "in": "query", "schema": {"type": "integer"}},
                {"name": "X-Trace", "in": "header", "schema": {"type": "string"}},
                {"name": "sort-by", "in": "query", "required": True, "schema": {"type": "string"}},
            ],
        )

        text = str(method)
        assert "method(props: { limit?: number; 'X-Trace'?: string; 'sort-by': string })" in text
        assert (
            "    queryParams: {\n"
            "      limit: props['limit'],\n"
            "      'sort-by': props['sort-by'],\n"
            "    },\n"
        ) in text
        assert "X-Trace'" not in text.split("queryParams")[1]

    def test_body(self, synthesize, service_file):
        method = synthesize(
            "/users",
            "post",
            requestBody={"required": True, **json_content({"$ref": "#/components/schemas/CreateUser"})},
            responses={"201": json_content({"$ref": "#/components/schemas/User"})},
        )

        text = str(method)
        assert "method(props: { bodyArgs: CreateUser }): Promise<User>" in text
        assert "method: 'POST'," in text
        assert "bodyArgs: props['bodyArgs']," in text
        assert "queryParams: undefined," in text
        assert service_file.imports[0].named_imports == ["User", "CreateUser"]

    def test_optional_body_goes_first(self, synthesize):
        method = synthesize(
            "/users/{id}",
            "patch",
            parameters=[
                {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
            ],
            requestBody=json_content({"type": "object"}),
        )

        assert [p.name for p in method.parameters[0].var_type.properties] == [
            "bodyArgs",
            "id",
        ]
        assert method.parameters[0].var_type.properties[0].optional is True

    def test_path_parameters_substituted(self, synthesize):
        method = synthesize(
            "/orgs/{org}/users/{user-id}",
            "delete",
            parameters=[
                {"name": "org", "in": "path", "required": True, "schema": {"type": "string"}},
                {"name": "user-id", "in": "path", "required": True, "schema": {"type": "integer"}},
            ],
        )

        text = str(method)
        assert "  const {\n    org,\n    'user-id': user_id,\n  } = props\n" in text
        assert "url: `${baseUrl}/orgs/${org}/users/${user_id}`," in text
        assert "method: 'DELETE'," in text

    def test_unbound_placeholder_warns(self, synthesize, caplog):
        """Подстановка без параметра пути остается в url, но логируется"""
        with caplog.at_level(logging.WARNING):
            method = synthesize("/users/{id}", "patch", method_name="upd")

        assert "url: `${baseUrl}/users/${id}`," in str(method)
        assert "placeholders id have no path parameter" in caplog.text

    def test_bound_placeholders_do_not_warn(self, synthesize, caplog):
        with caplog.at_level(logging.WARNING):
            synthesize(
                "/users/{id}",
                "get",
                parameters=[
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
            )

        assert "placeholders" not in caplog.text

    def test_parameter_ref_imported(self, synthesize, service_file):
        synthesize(
            "/users",
            "get",
            parameters=[
                {"name": "role", "in": "query", "schema": {"$ref": "#/components/schemas/Role"}}
            ],
        )

        assert service_file.imports[0].named_imports == ["Role"]

    def test_methods_appended_in_order(self, synthesize, service_class):
        synthesize("/a", "get", method_name="first")
        synthesize("/b", "get", method_name="second")
        synthesize("/c", "get", method_name="first")

        assert [m.name for m in service_class.methods] == ["first", "second", "first"]

    def test_custom_body_field(self, models_file, service_file, service_class):
        synthesizer = MethodSynthesizer(TypeRenderer(), models_file, body_field="payload")

        method = synthesizer.synthesize(
            service_file=service_file,
            service_class=service_class,
            method_name="create",
            raw_path="/items",
            verb="put",
            operation=Operation.model_validate(
                {"requestBody": json_content({"type": "string"})}
            ),
        )

        assert "bodyArgs: props['payload']," in str(method)
        assert "props: { payload?: string }" in str(method)
