"""Integration tests for the command-line interface."""

import json
import sys
from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import httpx
import pytest
import respx
from structlog.testing import capture_logs

from playable_catalog import cli
from playable_catalog.config import get_settings

BASE_URL = "http://catalog.test"


@pytest.fixture(autouse=True)
def catalog_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the cached settings at the mocked backend."""
    monkeypatch.setenv("CATALOG_BASE_URL", BASE_URL)
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def run_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], *args: str) -> Any:
    """Run main() with argv and return the decoded JSON output."""
    monkeypatch.setattr(sys, "argv", ["playable-catalog", *args])
    with capture_logs():
        cli.main()
    return json.loads(capsys.readouterr().out)


class TestTestConfigCommand:
    """Tests for the test-config command."""

    def test_prints_effective_configuration(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the catalog section reflects the environment."""
        monkeypatch.setenv("CATALOG_LIST_PATH", "v2/list")
        get_settings.cache_clear()

        output = run_cli(monkeypatch, capsys, "test-config")

        assert output["success"] is True
        assert output["command"] == "test-config"
        assert output["data"]["catalog_base_url"] == BASE_URL
        assert output["data"]["catalog_list_path"] == "/v2/list"
        assert output["data"]["catalog_timeout_seconds"] == 30


class TestListCommand:
    """Tests for the list command."""

    @respx.mock
    def test_list_entries(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test entries are listed with labels and launch paths."""
        respx.get(f"{BASE_URL}/api/list-all").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"id": "g1", "name": None, "manage": {"Plain": "main.html"}},
                    {
                        "id": "g2",
                        "name": "Demo",
                        "manage": {
                            "SugarCube": [
                                {"id": "i1", "name": None, "index": "1", "layers": ["base"], "mods": None}
                            ]
                        },
                    },
                ],
            )
        )

        output = run_cli(monkeypatch, capsys, "list")

        assert output["success"] is True
        assert output["data"] == [
            {
                "id": "g1",
                "name": "g1",
                "label": "Plain HTML",
                "options": [{"label": "g1", "path": "/play/g1/main.html/index-path"}],
            },
            {
                "id": "g2",
                "name": "Demo",
                "label": "SugarCube ML",
                "options": [{"label": "i1", "path": "/play/g2/i1/index-path"}],
            },
        ]

    @respx.mock
    def test_list_backend_down(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a failed fetch reports an empty, unsuccessful listing."""
        respx.get(f"{BASE_URL}/api/list-all").mock(return_value=httpx.Response(502))

        output = run_cli(monkeypatch, capsys, "list")

        assert output["success"] is False
        assert output["data"] == []
        assert output["error"] is not None


class TestLaunchCommand:
    """Tests for the launch command."""

    def test_launch_prints_destination(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the destination is resolved without opening a browser."""
        with patch("playable_catalog.cli.webbrowser.open") as mock_open:
            output = run_cli(monkeypatch, capsys, "launch", "g2", "i1")

        mock_open.assert_not_called()
        assert output["data"]["path"] == "/play/g2/i1/index-path"
        assert output["data"]["url"] == f"{BASE_URL}/play/g2/i1/index-path"
        assert output["data"]["opened"] is False

    def test_launch_open(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --open hands the absolute URL to the browser."""
        with patch("playable_catalog.cli.webbrowser.open", return_value=True) as mock_open:
            output = run_cli(monkeypatch, capsys, "launch", "g1", "main.html", "--open")

        mock_open.assert_called_once_with(f"{BASE_URL}/play/g1/main.html/index-path")
        assert output["data"]["opened"] is True

    def test_launch_missing_arguments(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test usage error when sub_id is missing."""
        monkeypatch.setattr(sys, "argv", ["playable-catalog", "launch", "g1"])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
