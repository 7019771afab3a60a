"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (indented key-value text) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from multidomain.services.result import ServiceResult


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs.

    A list of dicts under ``items`` is rendered one entry per block.
    """
    lines: list[str] = []
    for key, value in data.items():
        if key == "items" and isinstance(value, list):
            for item in value:
                if isinstance(item, dict):
                    lines.append("  -")
                    lines.extend(f"    {k}: {_format_value(v)}" for k, v in item.items())
                else:
                    lines.append(f"  - {_format_value(item)}")
        else:
            lines.append(f"  {key}: {_format_value(value)}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {error_msg}"
