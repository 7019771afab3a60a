"""DomainRegistry: the table of configured domains and cross-domain lookups.

Built once at application startup from a :class:`MultiDomainConfig`.
Symbolic hostnames are resolved and global pattern lists merged before
any resolver is constructed, so every resolver holds literal values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from multidomain.config.hostnames import resolve_hostname
from multidomain.config.models import DomainEntryConfig, MultiDomainConfig
from multidomain.domain.context import RequestContext, resolve_context
from multidomain.domain.errors import DomainConfigError
from multidomain.domain.resolver import KEY_PRIMARY, DomainResolver

logger = logging.getLogger(__name__)


def build_resolver(
    key: str,
    entry: DomainEntryConfig,
    config: MultiDomainConfig,
    environ: Mapping[str, str] | None = None,
) -> DomainResolver:
    """Construct a resolver for one ``[domains.<key>]`` entry.

    Global ``allow``/``force`` patterns come first, followed by the
    entry's own patterns.
    """
    return DomainResolver(
        key,
        resolve_hostname(entry.hostname, config.hostnames, environ),
        entry.resolves_to,
        allowed_paths=config.allowed_paths_for(entry),
        forced_paths=config.forced_paths_for(entry),
        allow_subdomains=config.allow_subdomains,
    )


class DomainRegistry:
    """Ordered collection of :class:`DomainResolver` objects.

    Lookups that pick "the" domain for a request or URL scan vanity
    domains in configuration order and fall back to the primary domain.
    """

    def __init__(self, domains: list[DomainResolver]) -> None:
        self._domains: dict[str, DomainResolver] = {}
        for domain in domains:
            if domain.key in self._domains:
                raise DomainConfigError(f"Duplicate domain key {domain.key!r}")
            self._domains[domain.key] = domain

    @classmethod
    def from_config(
        cls,
        config: MultiDomainConfig,
        environ: Mapping[str, str] | None = None,
    ) -> DomainRegistry:
        """Build every configured domain, resolving symbolic hostnames."""
        domains = [
            build_resolver(key, entry, config, environ) for key, entry in config.domains.items()
        ]
        logger.debug("Built %d domains: %s", len(domains), ", ".join(d.key for d in domains))
        return cls(domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __contains__(self, key: object) -> bool:
        return key in self._domains

    def get_domain(self, key: str) -> DomainResolver | None:
        return self._domains.get(key)

    def get_primary_domain(self) -> DomainResolver:
        """Return the primary domain.

        Raises:
            DomainConfigError: No ``primary`` domain is configured.
        """
        primary = self._domains.get(KEY_PRIMARY)
        if primary is None:
            raise DomainConfigError(f"No {KEY_PRIMARY!r} domain is configured")
        return primary

    def get_all_domains(self, *, include_primary: bool = False) -> list[DomainResolver]:
        return [d for d in self._domains.values() if include_primary or not d.is_primary()]

    def get_active_domain(self, context: RequestContext | None = None) -> DomainResolver:
        """Return the vanity domain serving the request, else the primary domain."""
        ctx = resolve_context(context)
        for domain in self.get_all_domains():
            if domain.is_active(ctx):
                logger.debug("Request %s%s matched domain %s", ctx.host, ctx.path, domain.key)
                return domain
        return self.get_primary_domain()

    def domain_for_url(self, url: str) -> DomainResolver:
        """Return the vanity domain owning a native *url*, else the primary domain."""
        for domain in self.get_all_domains():
            if domain.has_url(url):
                return domain
        return self.get_primary_domain()

    def native_url_for(self, context: RequestContext | None = None) -> str:
        """Rewrite the request path into the native path space.

        Requests served by the primary domain pass through unchanged.
        """
        ctx = resolve_context(context)
        domain = self.get_active_domain(ctx)
        if domain.is_primary():
            return ctx.path
        return domain.get_native_url(ctx.path)

    def vanity_link(
        self,
        url: str,
        context: RequestContext | None = None,
        *,
        scheme: str = "https",
    ) -> str:
        """Rewrite a native link for output in the current request.

        Links owned by the active domain (or the primary domain while no
        vanity domain is active) become relative vanity paths. Links owned
        by another domain become absolute URLs on that domain's hostname.
        """
        ctx = resolve_context(context)
        owner = self.domain_for_url(url)
        active = self.get_active_domain(ctx)
        vanity = owner.get_vanity_url(url)
        if owner.base_url and url.strip("/") == owner.base_url.strip("/"):
            # link to the domain root itself
            vanity = ""

        if owner.key == active.key:
            return vanity
        return f"{scheme}://{owner.hostname}/{vanity.lstrip('/')}"
