"""Tests for MultiDomainSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from multidomain.config.settings import MultiDomainSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MULTIDOMAIN_CONFIG", "MULTIDOMAIN_ALLOW_SUBDOMAINS", "MULTIDOMAIN_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = MultiDomainSettings.load(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.allow_subdomains is False
        assert settings.domains == {}

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MultiDomainSettings.load(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_domain_table(self, config_root: Path) -> None:
        settings = MultiDomainSettings.load(start=config_root)
        assert settings.config_path == (config_root / "multidomain.toml").resolve()
        assert settings.allow == ["admin/*", "Security/*"]
        assert settings.hostnames == {"COMPANY_HOST": "company.example.com"}
        assert list(settings.domains) == ["primary", "company", "shop"]
        assert settings.domains["company"].force == ["careers/*"]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "deploy" / "domains.toml"
        custom.parent.mkdir()
        custom.write_text('[domains.primary]\nhostname = "example.org"\n')
        settings = MultiDomainSettings.load(config_path=str(custom))
        assert settings.config_path == custom
        assert settings.domains["primary"].hostname == "example.org"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "multidomain.toml").write_text("allow = [\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            MultiDomainSettings.load(start=tmp_path)

    def test_to_config(self, config_root: Path) -> None:
        config = MultiDomainSettings.load(start=config_root).to_config()
        assert config.allow == ["admin/*", "Security/*"]
        assert config.domains["shop"].resolves_to == "store/front"


class TestOverrides:
    def test_init_kwargs_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "multidomain.toml").write_text("allow_subdomains = true\n")
        settings = MultiDomainSettings.load(start=tmp_path, allow_subdomains=False)
        assert settings.allow_subdomains is False

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MULTIDOMAIN_ALLOW_SUBDOMAINS", "true")
        settings = MultiDomainSettings.load(start=tmp_path)
        assert settings.allow_subdomains is True

    def test_env_var_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "multidomain.toml").write_text("allow_subdomains = false\n")
        monkeypatch.setenv("MULTIDOMAIN_ALLOW_SUBDOMAINS", "true")
        settings = MultiDomainSettings.load(start=tmp_path)
        assert settings.allow_subdomains is True
