"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem and
network: config, credentials and logs go to *tmp_path*, and HTTP traffic
goes to an ``httpx.MockTransport``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import httpx
import pytest

from influxdb2_cli.api.client import APIClient

TEST_URL = "http://influx.test:8086"
TEST_TOKEN = "some-token"
TEST_ORG = "some-org"


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log file to tmp_path and reset the singleton."""
    import influxdb2_cli.utils.logger as logger_mod

    logger_mod._logger = None
    with patch("influxdb2_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    app_logger = logging.getLogger("influxdb2_cli")
    for handler in [h for h in app_logger.handlers if isinstance(h, RotatingFileHandler)]:
        handler.close()
        app_logger.removeHandler(handler)
    logger_mod._logger = None


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigManager backed by a temporary directory.

    Patches platform dirs so config and credentials land in *tmp_path* only,
    and resets the cached global manager around the test.
    """
    import influxdb2_cli.config as config_mod

    config_mod._config_manager = None
    with patch("influxdb2_cli.config.user_config_dir", return_value=str(tmp_path / "config")):
        with patch("influxdb2_cli.config.user_data_dir", return_value=str(tmp_path / "data")):
            yield config_mod.get_config_manager("default")
    config_mod._config_manager = None


@pytest.fixture()
def authed_config(tmp_config):
    """tmp_config with an API token and organization stored."""
    tmp_config.save_credentials(TEST_TOKEN)
    tmp_config.set("api.url", TEST_URL)
    tmp_config.set("api.org", TEST_ORG)
    return tmp_config


class Recorder:
    """Mock HTTP server: records requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, json=None, text: str | None = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json = json
        self.text = text

    def respond(self, status_code: int = 200, json=None, text: str | None = None) -> None:
        self.status_code = status_code
        self.json = json
        self.text = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, text=self.text or "")

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture()
def server() -> Recorder:
    """A recorder answering 200 with an empty body until told otherwise."""
    return Recorder()


@pytest.fixture()
def make_client(server) -> Callable[..., APIClient]:
    """Factory for APIClients wired to the ``server`` recorder."""

    def factory() -> APIClient:
        return APIClient(
            TEST_URL,
            TEST_TOKEN,
            org=TEST_ORG,
            transport=httpx.MockTransport(server),
        )

    return factory


@pytest.fixture()
def mock_get_client(server, authed_config):
    """Patch the commands' client factory to talk to the ``server`` recorder."""

    def build(profile: str = "default") -> APIClient:
        api_config = authed_config.config.api
        return APIClient(
            api_config.url,
            authed_config.load_credentials()["token"],
            org=api_config.org,
            transport=httpx.MockTransport(server),
        )

    with patch("influxdb2_cli.commands.labels.get_client", side_effect=build):
        with patch("influxdb2_cli.commands.tasks.get_client", side_effect=build):
            yield server
