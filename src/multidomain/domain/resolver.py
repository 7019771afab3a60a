"""DomainResolver: one configured domain and its URL translation rules.

A resolver maps a vanity path space, served under its own hostname, onto
a native path prefix (``base_url``) of the primary site:

    company.example.com/partners/  <->  example.org/company/partners/

Two pattern lists refine that mapping:

- *allowed paths* always belong to the primary domain. A request for one
  never activates this domain and the path is never translated.
- *forced paths* belong to this domain even though they live outside
  ``base_url``. They are never prefixed.

INVARIANT: Identity and pattern lists are fixed at construction. Request
state is never stored on the resolver; it arrives per call as a
:class:`RequestContext` (or from the ambient request scope).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from multidomain.domain.context import RequestContext, resolve_context
from multidomain.domain.errors import DomainConfigError, PrimaryDomainTranslationError
from multidomain.domain.hosts import host_matches, split_host
from multidomain.domain.links import has_prefix, join_links, strip_prefix
from multidomain.domain.patterns import match_url

logger = logging.getLogger(__name__)

KEY_PRIMARY = "primary"


class DomainResolver:
    """A configured domain, answering activation and translation queries.

    Attributes:
        key: Identifier from configuration; ``"primary"`` marks the native site.
        hostname: Literal hostname this domain is served on.
        base_url: Native path prefix the vanity space maps onto (None for primary).
        allowed_paths: Glob patterns that always defer to the primary domain.
        forced_paths: Glob patterns that always belong to this domain.
        allow_subdomains: Whether subdomains of ``hostname`` also activate it.
    """

    def __init__(
        self,
        key: str,
        hostname: str,
        base_url: str | None = None,
        *,
        allowed_paths: Iterable[str] = (),
        forced_paths: Iterable[str] = (),
        allow_subdomains: bool = False,
    ) -> None:
        if not hostname:
            raise DomainConfigError(f"Domain {key!r} has no hostname")
        if key != KEY_PRIMARY and not base_url:
            raise DomainConfigError(f"Domain {key!r} must define resolves_to")

        self._key = key
        self._hostname = hostname
        self._base_url = base_url
        self._allowed_paths = tuple(allowed_paths)
        self._forced_paths = tuple(forced_paths)
        self._allow_subdomains = allow_subdomains

    def __repr__(self) -> str:
        return (
            f"DomainResolver(key={self._key!r}, hostname={self._hostname!r}, "
            f"base_url={self._base_url!r})"
        )

    # --- Identity ---

    @property
    def key(self) -> str:
        return self._key

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def allowed_paths(self) -> tuple[str, ...]:
        return self._allowed_paths

    @property
    def forced_paths(self) -> tuple[str, ...]:
        return self._forced_paths

    @property
    def allow_subdomains(self) -> bool:
        return self._allow_subdomains

    def get_key(self) -> str:
        return self._key

    def get_hostname(self) -> str:
        return self._hostname

    def get_url(self) -> str | None:
        """The native path prefix this domain resolves to."""
        return self._base_url

    def is_primary(self) -> bool:
        return self._key == KEY_PRIMARY

    # --- Path classification ---

    def is_allowed_path(self, url: str) -> bool:
        return match_url(url, self._allowed_paths)

    def is_forced_path(self, url: str) -> bool:
        return match_url(url, self._forced_paths)

    # --- Request matching ---

    def is_active(self, context: RequestContext | None = None) -> bool:
        """Return True if this domain serves the given request.

        An allowed path is never active, whatever the host. Otherwise the
        request host (port discarded) must equal the hostname, or be one of
        its subdomains when ``allow_subdomains`` is set.

        Args:
            context: Request to evaluate; the ambient request when omitted.
        """
        ctx = resolve_context(context)
        if self.is_allowed_path(ctx.path):
            logger.debug("Domain %s skipped: %s is an allowed path", self._key, ctx.path)
            return False

        host, _port = split_host(ctx.host)
        return host_matches(host, self._hostname, allow_subdomains=self._allow_subdomains)

    def has_url(self, url: str) -> bool:
        """Return True if *url* is a native path owned by this domain.

        A domain without ``base_url`` (the primary) owns only its forced
        paths. Native URLs nobody else claims fall back to the primary
        through :meth:`DomainRegistry.domain_for_url` instead.
        """
        if self.is_forced_path(url):
            return True
        if self._base_url is None:
            return False
        return has_prefix(url, self._base_url)

    # --- Translation ---

    def get_native_url(self, url: str) -> str:
        """Translate a vanity path into the native path.

        ``partners/`` becomes ``company/partners/`` when the domain resolves
        to ``company``. Allowed and forced paths are returned unchanged.

        Raises:
            PrimaryDomainTranslationError: Called on the primary domain.
        """
        if self.is_primary():
            raise PrimaryDomainTranslationError(self._key)
        if self.is_allowed_path(url) or self.is_forced_path(url):
            return url
        return join_links(self._base_url, url)

    def get_vanity_url(self, url: str) -> str:
        """Translate a native path into the vanity path.

        ``/company/partners/`` becomes ``partners/`` when the domain resolves
        to ``company``. Paths outside ``base_url`` are returned unchanged.
        """
        if self.is_primary() or self.is_allowed_path(url):
            return url
        return strip_prefix(url, self._base_url or "")
