"""Request context: the host and path a domain is evaluated against.

Resolvers never hold request state. Callers either pass a
:class:`RequestContext` to each query, or bind one for the current task
with :func:`request_scope` so queries can fall back to it. The ambient
value lives in a :class:`~contextvars.ContextVar`, which keeps concurrent
requests (threads or asyncio tasks) isolated from each other.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace

from multidomain.domain.errors import NoRequestContextError


@dataclass(frozen=True)
class RequestContext:
    """The parts of an incoming request that domain matching reads."""

    host: str  # raw HTTP Host header, may carry a :port suffix
    path: str  # request path (URI without scheme and host)

    def with_path(self, path: str) -> RequestContext:
        """Return a copy evaluated against a different request path."""
        return replace(self, path=str(path))

    def with_host(self, host: str) -> RequestContext:
        """Return a copy evaluated against a different HTTP host."""
        return replace(self, host=str(host))


_current: ContextVar[RequestContext | None] = ContextVar("multidomain_request", default=None)


def current_request() -> RequestContext:
    """Return the ambient request context bound by :func:`request_scope`.

    Raises:
        NoRequestContextError: No request scope is active.
    """
    ctx = _current.get()
    if ctx is None:
        raise NoRequestContextError("No request context is bound; pass one explicitly")
    return ctx


@contextmanager
def request_scope(*, host: str, path: str) -> Iterator[RequestContext]:
    """Bind a request context for the duration of the ``with`` block.

    Usage::

        with request_scope(host=request.host, path=request.path):
            domain = registry.get_active_domain()
    """
    ctx = RequestContext(host=host, path=path)
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        _current.reset(token)


def resolve_context(context: RequestContext | None) -> RequestContext:
    """Return *context* or, when None, the ambient request context."""
    return context if context is not None else current_request()
