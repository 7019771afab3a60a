"""Link helpers: joining and prefix handling for relative URLs.

Pure functions over URL strings. Query strings and fragments are carried
through ``join_links`` so translated links keep their parameters.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, urlencode


def join_links(*parts: str | None) -> str:
    """Join URL parts with exactly one slash between each non-empty part.

    Query strings found in any part are merged (later keys win) and appended
    once at the end; the last fragment seen is kept. ``None`` and empty
    parts are skipped.

    >>> join_links("company", "partners")
    'company/partners'
    >>> join_links("company/", "/partners/?page=2")
    'company/partners/?page=2'
    """
    result = ""
    query: dict[str, str] = {}
    fragment: str | None = None

    for part in parts:
        if not part:
            continue
        if "#" in part:
            part, fragment = part.split("#", 1)
        if "?" in part:
            part, raw_query = part.split("?", 1)
            query.update(parse_qsl(raw_query, keep_blank_values=True))
        if not part:
            continue
        if not result:
            result = part
        elif result.endswith("/") and part.startswith("/"):
            result += part.lstrip("/")
        elif result.endswith("/") or part.startswith("/"):
            result += part
        else:
            result += "/" + part

    if query:
        result += "?" + urlencode(query)
    if fragment:
        result += "#" + fragment
    return result


def strip_prefix(url: str, prefix: str) -> str:
    """Remove ``/?{prefix}/`` from the front of *url*.

    Best-effort: a url that does not start with the prefix is returned
    unchanged.
    """
    prefix = prefix.strip("/")
    if not prefix:
        return url
    return re.sub(rf"^/?{re.escape(prefix)}/", "", url, count=1)


def has_prefix(url: str, prefix: str) -> bool:
    """Return True if *url* lies under the *prefix* path segment.

    Both sides are compared without surrounding slashes, and the prefix must
    end on a segment boundary: ``company`` contains ``company/partners`` but
    not ``companyxyz/partners``.
    """
    prefix = prefix.strip("/")
    if not prefix:
        return False
    path = re.split(r"[?#]", url, maxsplit=1)[0].strip("/")
    return path == prefix or path.startswith(prefix + "/")
