"""Host header parsing and hostname matching."""

from __future__ import annotations


def split_host(http_host: str) -> tuple[str, str | None]:
    """Split a ``host[:port]`` header value into ``(host, port)``.

    Only splits when a colon is present; the port is None otherwise.
    """
    if ":" not in http_host:
        return http_host, None
    host, port = http_host.split(":", 1)
    return host, port


def host_matches(host: str, hostname: str, *, allow_subdomains: bool = False) -> bool:
    """Return True if *host* addresses *hostname*.

    With *allow_subdomains*, any proper subdomain also matches
    (``shop.example.com`` for ``example.com``), but a host that merely ends
    with the same characters does not (``notexample.com``).
    """
    host = host.lower().rstrip(".")
    hostname = hostname.lower().rstrip(".")
    if not hostname:
        return False
    if host == hostname:
        return True
    return allow_subdomains and host.endswith("." + hostname)
