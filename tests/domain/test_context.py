"""Tests for request contexts and the ambient request scope."""

import asyncio
import dataclasses

import pytest

from multidomain.domain.context import (
    RequestContext,
    current_request,
    request_scope,
    resolve_context,
)
from multidomain.domain.errors import NoRequestContextError


class TestRequestContext:
    def test_with_path_returns_copy(self) -> None:
        ctx = RequestContext(host="example.com", path="/")
        other = ctx.with_path("/admin/")
        assert other == RequestContext(host="example.com", path="/admin/")
        assert ctx.path == "/"

    def test_with_host_returns_copy(self) -> None:
        ctx = RequestContext(host="example.com", path="/")
        assert ctx.with_host("example.org:8080").host == "example.org:8080"
        assert ctx.host == "example.com"

    def test_frozen(self) -> None:
        ctx = RequestContext(host="example.com", path="/")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.path = "/x"  # type: ignore[misc]


class TestRequestScope:
    def test_unbound_raises(self) -> None:
        with pytest.raises(NoRequestContextError):
            current_request()

    def test_binds_and_resets(self) -> None:
        with request_scope(host="example.com", path="/a/") as ctx:
            assert current_request() is ctx
        with pytest.raises(NoRequestContextError):
            current_request()

    def test_nested_scopes(self) -> None:
        with request_scope(host="outer.com", path="/"):
            with request_scope(host="inner.com", path="/"):
                assert current_request().host == "inner.com"
            assert current_request().host == "outer.com"

    def test_resets_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with request_scope(host="example.com", path="/"):
                raise RuntimeError("boom")
        with pytest.raises(NoRequestContextError):
            current_request()

    def test_explicit_context_wins(self) -> None:
        explicit = RequestContext(host="explicit.com", path="/")
        with request_scope(host="ambient.com", path="/"):
            assert resolve_context(explicit) is explicit
            assert resolve_context(None).host == "ambient.com"

    def test_concurrent_tasks_are_isolated(self) -> None:
        async def handle(host: str) -> str:
            with request_scope(host=host, path="/"):
                await asyncio.sleep(0)
                return current_request().host

        async def main() -> list[str]:
            return list(await asyncio.gather(handle("a.com"), handle("b.com")))

        assert asyncio.run(main()) == ["a.com", "b.com"]
