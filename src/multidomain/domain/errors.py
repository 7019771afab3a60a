"""Exception taxonomy for domain resolution.

Services catch :class:`MultiDomainError` and convert it into a failed
ServiceResult; library callers let it propagate.
"""

from __future__ import annotations


class MultiDomainError(Exception):
    """Base class for all multidomain errors."""

    code = "MULTIDOMAIN_ERROR"


class DomainConfigError(MultiDomainError):
    """A domain entry cannot be turned into a working resolver."""

    code = "DOMAIN_CONFIG"


class PrimaryDomainTranslationError(MultiDomainError):
    """Native URL translation was requested on the primary domain."""

    code = "PRIMARY_TRANSLATION"

    def __init__(self, key: str) -> None:
        super().__init__(f"Cannot convert a native URL on the primary domain ({key!r})")
        self.key = key


class NoRequestContextError(MultiDomainError):
    """The ambient request context was read outside a request scope."""

    code = "NO_REQUEST_CONTEXT"


class UnknownDomainError(MultiDomainError):
    """No domain is configured under the requested key."""

    code = "UNKNOWN_DOMAIN"
