"""Symbolic hostname resolution.

A configured hostname may be a literal (``example.com``) or a symbolic
name resolved once at startup, so one config file can serve several
environments:

1. A key of the ``[hostnames]`` alias table.
2. The name of an environment variable.
3. Otherwise the value is taken verbatim.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

logger = logging.getLogger(__name__)


def resolve_hostname(
    value: str,
    aliases: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the literal hostname for a configured *value*."""
    if aliases and value in aliases:
        resolved = aliases[value]
        logger.debug("Hostname %s resolved from alias table to %s", value, resolved)
        return resolved

    env = os.environ if environ is None else environ
    resolved_env = env.get(value)
    if resolved_env:
        logger.debug("Hostname %s resolved from environment to %s", value, resolved_env)
        return resolved_env
    return value
