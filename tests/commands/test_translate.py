"""Tests for the native, vanity, and link commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from multidomain.cli import cli


@pytest.mark.usefixtures("config_root")
class TestNativeCommand:
    def test_translates(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["native", "company", "partners"])
        assert result.exit_code == 0
        assert "native_url: company/partners" in result.output

    def test_forced_path(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "native", "company", "/careers/jobs/"])
        assert json.loads(result.output)["data"]["native_url"] == "/careers/jobs/"

    def test_primary_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["native", "primary", "partners"])
        assert result.exit_code == 1
        assert "ERROR: native" in result.output

    def test_unknown_domain_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["native", "missing", "partners"])
        assert result.exit_code == 1


@pytest.mark.usefixtures("config_root")
class TestVanityCommand:
    def test_translates(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "vanity", "shop", "/store/front/cart/"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["vanity_url"] == "cart/"

    def test_unknown_domain_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["vanity", "missing", "/x/"])
        assert result.exit_code == 1


@pytest.mark.usefixtures("config_root")
class TestLinkCommand:
    def test_cross_domain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "link", "--host", "example.org", "/company/partners/"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["owner"] == "company"
        assert data["link"] == "https://company.example.com/partners/"

    def test_scheme(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "link", "--host", "example.org", "--scheme", "http", "/store/front/"]
        )
        assert json.loads(result.output)["data"]["link"] == "http://shop.example.net/"
