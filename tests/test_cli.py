"""Black-box tests for CLI entry point."""

from pytest_httpx import HTTPXMock
from typer.testing import CliRunner

from flickr_lite.cli import app

runner = CliRunner()


class TestCLI:
    """Test command-line interface."""

    def test_cli_help(self) -> None:
        """Test CLI help output."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Look up Flickr users" in result.stdout

    def test_cli_missing_api_key(self, monkeypatch) -> None:
        """Test CLI fails without an API key."""
        monkeypatch.delenv("FLICKR_API_KEY", raising=False)

        result = runner.invoke(app, ["photos", "alice"])

        assert result.exit_code == 1
        assert "api key is required" in result.stdout.lower()

    def test_cli_photos(
        self,
        api_key: str,
        user_response: dict,
        photos_response: dict,
        httpx_mock: HTTPXMock,
    ) -> None:
        """Test listing photos prints their titles."""
        httpx_mock.add_response(method="GET", json=user_response)
        httpx_mock.add_response(method="GET", json=photos_response)

        result = runner.invoke(app, ["photos", "alice", "--api-key", api_key, "-n", "3"])

        assert result.exit_code == 0
        assert "Sunset" in result.stdout
        assert "Garden" in result.stdout
        assert httpx_mock.get_requests()[1].url.params["per_page"] == "3"

    def test_cli_photos_unknown_user(
        self, api_key: str, fail_response: dict, httpx_mock: HTTPXMock
    ) -> None:
        """Test a failed lookup exits with an error."""
        httpx_mock.add_response(method="GET", json=fail_response)

        result = runner.invoke(app, ["photos", "nobody", "--api-key", api_key])

        assert result.exit_code == 1
        assert "User not found" in result.stdout

    def test_cli_info_from_env(
        self,
        api_key: str,
        user_response: dict,
        info_response: dict,
        monkeypatch,
        httpx_mock: HTTPXMock,
    ) -> None:
        """Test info reads the API key from the environment."""
        monkeypatch.setenv("FLICKR_API_KEY", api_key)
        httpx_mock.add_response(method="GET", json=user_response)
        httpx_mock.add_response(method="GET", json=info_response)

        result = runner.invoke(app, ["info", "alice"])

        assert result.exit_code == 0
        assert "Alice Liddell" in result.stdout
        assert "Oxford, UK" in result.stdout
        assert httpx_mock.get_requests()[0].url.params["api_key"] == api_key

    def test_cli_info_profile_failure(
        self,
        api_key: str,
        user_response: dict,
        fail_response: dict,
        httpx_mock: HTTPXMock,
    ) -> None:
        """Test a failed profile fetch exits with the session's error."""
        httpx_mock.add_response(method="GET", json=user_response)
        httpx_mock.add_response(method="GET", json=fail_response)

        result = runner.invoke(app, ["info", "alice", "--api-key", api_key])

        assert result.exit_code == 1
        assert "User not found" in result.stdout
