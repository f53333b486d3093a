"""
Тесты командной строки
"""

import json

import pytest

from openapi_services.cli import generate

SPEC = {
    "paths": {
        "/users/{id}": {
            "get": {
                "operationId": "UserController_getUser",
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
            }
        }
    }
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCli:
    def test_generate_files(self, workdir):
        (workdir / "openapi.json").write_text(json.dumps(SPEC))

        generate(["--url", "openapi.json", "--dirname", "out"])

        service = (workdir / "out" / "services" / "UserService.ts").read_text()
        assert "export class UserService {" in service
        assert (workdir / "out" / "utils.ts").exists()
        assert (workdir / "out" / "models.ts").exists()
        assert (workdir / "out" / "index.ts").exists()

    def test_unknown_operation_exits(self, workdir, capsys):
        (workdir / "openapi.json").write_text(
            json.dumps({"paths": {"/x": {"head": {}}}})
        )

        with pytest.raises(SystemExit) as exc_info:
            generate(["--url", "openapi.json", "--dirname", "out"])

        assert exc_info.value.code == 1
        assert "Unknown operation(s) found for /x: head" in capsys.readouterr().out

    def test_strict_overrides_config_file(self, workdir):
        """--strict действует и когда конфиг берется из файла как есть"""
        duplicated = {
            "paths": {
                "/a": {"get": {"operationId": "UserController_get"}},
                "/b": {"get": {"operationId": "UserController_get"}},
            }
        }
        (workdir / "openapi.json").write_text(json.dumps(duplicated))
        generate(["--init-config", "--url", "openapi.json", "--dirname", "out"])

        with pytest.raises(SystemExit) as exc_info:
            generate(["--url", "openapi.json", "--force", "--strict"])

        assert exc_info.value.code == 1
        assert not (workdir / "out").exists()

    def test_init_config(self, workdir):
        generate(["--init-config", "--url", "openapi.json"])

        assert (workdir / "openapi-services.toml").exists()

    def test_no_url(self, workdir):
        with pytest.raises(SystemExit):
            generate([])
