"""multidomain: serve vanity hostnames from path prefixes of one site.

Typical use from an HTTP layer::

    from multidomain import DomainRegistry, MultiDomainSettings, request_scope

    registry = DomainRegistry.from_config(MultiDomainSettings.load().to_config())

    with request_scope(host=request.host, path=request.path):
        domain = registry.get_active_domain()
        native_path = registry.native_url_for()
"""

from __future__ import annotations

from multidomain.config.settings import MultiDomainSettings
from multidomain.domain.context import RequestContext, current_request, request_scope
from multidomain.domain.errors import (
    DomainConfigError,
    MultiDomainError,
    NoRequestContextError,
    PrimaryDomainTranslationError,
    UnknownDomainError,
)
from multidomain.domain.resolver import KEY_PRIMARY, DomainResolver
from multidomain.services.registry import DomainRegistry, build_resolver

__version__ = "0.1.0"

__all__ = [
    "KEY_PRIMARY",
    "DomainConfigError",
    "DomainRegistry",
    "DomainResolver",
    "MultiDomainError",
    "MultiDomainSettings",
    "NoRequestContextError",
    "PrimaryDomainTranslationError",
    "RequestContext",
    "UnknownDomainError",
    "build_resolver",
    "current_request",
    "request_scope",
    "__version__",
]
