"""InspectService: query a domain table the way the HTTP layer would.

Backs the ``multidomain`` CLI: each method answers one question about the
configured domains and wraps the answer (or the domain error) in a
:class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from typing import Any

from multidomain.config.logging import request_log_context
from multidomain.domain.context import RequestContext
from multidomain.domain.errors import MultiDomainError, UnknownDomainError
from multidomain.domain.resolver import KEY_PRIMARY, DomainResolver
from multidomain.services.registry import DomainRegistry
from multidomain.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _describe(domain: DomainResolver) -> dict[str, Any]:
    return {
        "key": domain.key,
        "hostname": domain.hostname,
        "resolves_to": domain.base_url,
        "primary": domain.is_primary(),
        "allow": list(domain.allowed_paths),
        "force": list(domain.forced_paths),
    }


def _failure(op: str, exc: MultiDomainError) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc)
    return ServiceResult(ok=False, op=op, error=ServiceError(code=exc.code, message=str(exc)))


class InspectService:
    """Read-only queries over a :class:`DomainRegistry`."""

    def __init__(self, registry: DomainRegistry) -> None:
        self._registry = registry

    def _require(self, key: str) -> DomainResolver:
        domain = self._registry.get_domain(key)
        if domain is None:
            raise UnknownDomainError(f"No domain configured with key {key!r}")
        return domain

    def list_domains(self) -> ServiceResult:
        domains = self._registry.get_all_domains(include_primary=True)
        warnings: list[str] = []
        if KEY_PRIMARY not in self._registry:
            warnings.append("No primary domain configured")
        return ServiceResult(
            ok=True,
            op="domains",
            data={"count": len(domains), "items": [_describe(d) for d in domains]},
            warnings=warnings,
        )

    def resolve(self, host: str, path: str) -> ServiceResult:
        """Report which domain serves *host* + *path* and the native path."""
        ctx = RequestContext(host=host, path=path)
        try:
            with request_log_context(ctx):
                domain = self._registry.get_active_domain(ctx)
                native = self._registry.native_url_for(ctx)
        except MultiDomainError as exc:
            return _failure("resolve", exc)
        return ServiceResult(
            ok=True,
            op="resolve",
            data={
                "host": host,
                "path": path,
                "domain": domain.key,
                "primary": domain.is_primary(),
                "native_url": native,
            },
        )

    def native(self, key: str, url: str) -> ServiceResult:
        try:
            domain = self._require(key)
            native = domain.get_native_url(url)
        except MultiDomainError as exc:
            return _failure("native", exc)
        return ServiceResult(
            ok=True,
            op="native",
            data={"domain": key, "url": url, "native_url": native},
        )

    def vanity(self, key: str, url: str) -> ServiceResult:
        try:
            domain = self._require(key)
        except MultiDomainError as exc:
            return _failure("vanity", exc)
        return ServiceResult(
            ok=True,
            op="vanity",
            data={"domain": key, "url": url, "vanity_url": domain.get_vanity_url(url)},
        )

    def link(self, host: str, path: str, url: str, *, scheme: str = "https") -> ServiceResult:
        """Show how a native link renders on the page at *host* + *path*."""
        ctx = RequestContext(host=host, path=path)
        try:
            with request_log_context(ctx):
                owner = self._registry.domain_for_url(url)
                rewritten = self._registry.vanity_link(url, ctx, scheme=scheme)
        except MultiDomainError as exc:
            return _failure("link", exc)
        return ServiceResult(
            ok=True,
            op="link",
            data={"url": url, "owner": owner.key, "link": rewritten},
        )
