"""Unit tests for tasks command."""

import json

from typer.testing import CliRunner

from influxdb2_cli.commands.tasks import app
from influxdb2_cli.utils import exit_codes

runner = CliRunner()

TASK = {
    "id": "task-1",
    "orgID": "org-1",
    "org": "some-org",
    "name": "downsample",
    "status": "active",
    "flux": "from(bucket: \"b\")",
    "every": "1h",
}


class TestListCommand:
    def test_list_tasks_json_output(self, mock_get_client):
        mock_get_client.respond(200, json={"tasks": [TASK]})

        result = runner.invoke(app, ["list", "-o", "json"])

        assert result.exit_code == 0, result.output
        tasks = json.loads(result.output)
        assert tasks[0]["id"] == "task-1"
        assert tasks[0]["flux"] == "from(bucket: \"b\")"
        assert mock_get_client.last.url.query == b""

    def test_list_tasks_with_filters(self, mock_get_client):
        mock_get_client.respond(200, json={"tasks": []})

        result = runner.invoke(
            app,
            ["list", "--org-id", "org-1", "--status", "inactive", "--type", "system", "--limit", "5"],
        )

        assert result.exit_code == 0, result.output
        assert dict(mock_get_client.last.url.params) == {
            "orgID": "org-1",
            "status": "inactive",
            "type": "system",
            "limit": "5",
        }

    def test_list_tasks_limit_out_of_range(self, mock_get_client):
        result = runner.invoke(app, ["list", "--limit", "501"])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert mock_get_client.requests == []

    def test_list_tasks_table_shows_summary_columns(self, mock_get_client):
        mock_get_client.respond(200, json={"tasks": [TASK]})

        result = runner.invoke(app, ["list", "-o", "table"])

        assert result.exit_code == 0, result.output
        assert "task-1" in result.output
        assert "bucket" not in result.output

    def test_list_tasks_uses_configured_output_format(self, mock_get_client, authed_config):
        authed_config.set("output.format", "json")
        mock_get_client.respond(200, json={"tasks": [TASK]})

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)[0]["name"] == "downsample"

    def test_list_tasks_malformed_response(self, mock_get_client):
        mock_get_client.respond(200, text="<html>proxy error</html>")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == exit_codes.ERROR_GENERAL
        assert "Malformed response" in result.output


class TestCreateCommand:
    def test_create_task_from_flux(self, mock_get_client):
        mock_get_client.respond(201, json=TASK)

        result = runner.invoke(
            app, ["create", "--flux", "from(bucket: \"b\")", "--description", "rollup"]
        )

        assert result.exit_code == 0, result.output
        assert "Task created" in result.output
        assert json.loads(mock_get_client.last.content) == {
            "flux": "from(bucket: \"b\")",
            "description": "rollup",
            "org": "some-org",
        }

    def test_create_task_explicit_org_id_skips_default_org(self, mock_get_client):
        mock_get_client.respond(201)

        result = runner.invoke(
            app, ["create", "--flux", "x", "--org-id", "org-9", "--status", "inactive"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(mock_get_client.last.content) == {
            "flux": "x",
            "orgID": "org-9",
            "status": "inactive",
        }

    def test_create_task_from_file(self, mock_get_client, tmp_path):
        script = tmp_path / "task.flux"
        script.write_text("from(bucket: \"file\")", encoding="utf-8")
        mock_get_client.respond(201)

        result = runner.invoke(app, ["create", "--file", str(script)])

        assert result.exit_code == 0, result.output
        assert json.loads(mock_get_client.last.content)["flux"] == "from(bucket: \"file\")"

    def test_create_task_needs_exactly_one_script_source(self, mock_get_client, tmp_path):
        script = tmp_path / "task.flux"
        script.write_text("x", encoding="utf-8")

        neither = runner.invoke(app, ["create"])
        both = runner.invoke(app, ["create", "--flux", "x", "--file", str(script)])

        assert neither.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert both.exit_code == exit_codes.ERROR_INVALID_ARGS
        assert mock_get_client.requests == []

    def test_create_task_rejected(self, mock_get_client):
        mock_get_client.respond(400, text="flux is invalid")

        result = runner.invoke(app, ["create", "--flux", "nope"])

        assert result.exit_code == exit_codes.ERROR_NETWORK
        assert "flux is invalid" in result.output


class TestDeleteCommand:
    def test_delete_task_with_yes(self, mock_get_client):
        mock_get_client.respond(204)

        result = runner.invoke(app, ["delete", "task-1", "--yes"])

        assert result.exit_code == 0, result.output
        assert "Task deleted: task-1" in result.output
        assert mock_get_client.last.url.path == "/api/v2/tasks/task-1"

    def test_delete_task_forbidden(self, mock_get_client):
        mock_get_client.respond(403, text="forbidden")

        result = runner.invoke(app, ["delete", "task-1", "--yes"])

        assert result.exit_code == exit_codes.ERROR_PERMISSION_DENIED
