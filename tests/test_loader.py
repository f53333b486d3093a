"""
Тесты загрузки описаний
"""

import json

import httpx
import jsonref
import pytest

from openapi_services import loader
from openapi_services.loader import load_document

SPEC = {
    "openapi": "3.0.0",
    "components": {"schemas": {"User": {"type": "object"}}},
    "paths": {
        "/users": {
            "get": {
                "operationId": "UserController_list",
                "responses": {
                    "200": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/User"}
                            }
                        }
                    }
                },
            }
        }
    },
}


def response_schema(document):
    return document["paths"]["/users"]["get"]["responses"]["200"]["content"][
        "application/json"
    ]["schema"]


class TestLoadDocument:
    def test_json_file(self, tmp_path):
        path = tmp_path / "openapi.json"
        path.write_text(json.dumps(SPEC))

        document = load_document(str(path))

        assert document["openapi"] == "3.0.0"
        assert isinstance(response_schema(document), jsonref.JsonRef)

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "openapi.yaml"
        path.write_text(
            "openapi: 3.0.0\n"
            "paths:\n"
            "  /ping:\n"
            "    get:\n"
            "      operationId: HealthController_ping\n"
        )

        document = load_document(str(path))

        assert document["paths"]["/ping"]["get"]["operationId"] == "HealthController_ping"

    def test_url_gets_openapi_json(self, monkeypatch):
        requested = []

        def fake_get(url, **kwargs):
            requested.append(url)
            return httpx.Response(200, json=SPEC, request=httpx.Request("GET", url))

        monkeypatch.setattr(loader.httpx, "get", fake_get)

        document = load_document("http://api.local")

        assert requested == ["http://api.local/openapi.json"]
        assert "paths" in document

    def test_http_error(self, monkeypatch):
        def fake_get(url, **kwargs):
            return httpx.Response(500, request=httpx.Request("GET", url))

        monkeypatch.setattr(loader.httpx, "get", fake_get)

        with pytest.raises(ValueError, match="http://api.local/spec.json"):
            load_document("http://api.local/spec.json")

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")

        with pytest.raises(ValueError):
            load_document(str(path))
