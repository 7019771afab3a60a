"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, multidomain.toml only contains
overrides. A working setup needs a ``[domains.primary]`` table plus one
table per vanity domain::

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
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field


def merge_patterns(global_patterns: Sequence[str], local_patterns: Sequence[str]) -> list[str]:
    """Concatenate process-wide and per-domain patterns, globals first.

    Duplicates are kept; order only affects how soon a match short-circuits.
    """
    return [*global_patterns, *local_patterns]


class DomainEntryConfig(BaseModel):
    """[domains.<key>] section."""

    model_config = {"frozen": True}

    hostname: str
    resolves_to: str | None = None
    allow: list[str] = Field(default_factory=list)
    force: list[str] = Field(default_factory=list)


class MultiDomainConfig(BaseModel):
    """Root configuration composing global defaults and all domains."""

    model_config = {"frozen": True}

    allow_subdomains: bool = False
    allow: list[str] = Field(default_factory=list)
    force: list[str] = Field(default_factory=list)
    hostnames: dict[str, str] = Field(default_factory=dict)
    domains: dict[str, DomainEntryConfig] = Field(default_factory=dict)

    def allowed_paths_for(self, entry: DomainEntryConfig) -> list[str]:
        return merge_patterns(self.allow, entry.allow)

    def forced_paths_for(self, entry: DomainEntryConfig) -> list[str]:
        return merge_patterns(self.force, entry.force)
