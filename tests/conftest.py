"""Shared pytest fixtures for multidomain tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from multidomain.config.models import DomainEntryConfig, MultiDomainConfig
from multidomain.services.registry import DomainRegistry

CONFIG_TOML = """\
allow_subdomains = false
allow = ["admin/*", "Security/*"]

[hostnames]
COMPANY_HOST = "company.example.com"

[domains.primary]
hostname = "example.org"

[domains.company]
hostname = "COMPANY_HOST"
resolves_to = "company"
force = ["careers/*"]

[domains.shop]
hostname = "shop.example.net"
resolves_to = "store/front"
allow = ["checkout/*"]
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def domain_config() -> MultiDomainConfig:
    """Primary site plus two vanity domains, mirroring CONFIG_TOML."""
    return MultiDomainConfig(
        allow=["admin/*", "Security/*"],
        hostnames={"COMPANY_HOST": "company.example.com"},
        domains={
            "primary": DomainEntryConfig(hostname="example.org"),
            "company": DomainEntryConfig(
                hostname="COMPANY_HOST",
                resolves_to="company",
                force=["careers/*"],
            ),
            "shop": DomainEntryConfig(
                hostname="shop.example.net",
                resolves_to="store/front",
                allow=["checkout/*"],
            ),
        },
    )


@pytest.fixture
def registry(domain_config: MultiDomainConfig) -> DomainRegistry:
    return DomainRegistry.from_config(domain_config, environ={})


@pytest.fixture
def config_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temp directory holding multidomain.toml, set as CWD.

    Clears MULTIDOMAIN_* env vars so discovery and settings are isolated.
    """
    for name in ("MULTIDOMAIN_CONFIG", "MULTIDOMAIN_ALLOW_SUBDOMAINS", "MULTIDOMAIN_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / "multidomain.toml").write_text(CONFIG_TOML)
    monkeypatch.chdir(tmp_path)
    return tmp_path
