"""Plain-text and JSON formatting of records and results.

Record lines are the streaming output of ``domfuzz generate``::

    73.28%, exarnple.com, misspelling
    73.28%, exarnple.com, misspelling, registered
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from domfuzz.domain.models import VariationRecord
    from domfuzz.services.result import ServiceResult


def format_record(record: VariationRecord | dict[str, Any]) -> str:
    """One output line: score percentage, domain, transformation, status if checked."""
    data = record if isinstance(record, dict) else record.model_dump()
    parts = [f"{data['score'] * 100:.2f}%", data["domain"], data["transformation"]]
    if data.get("status"):
        parts.append(data["status"])
    return ", ".join(parts)


def format_summary(result: ServiceResult) -> str:
    """One-line run summary for stderr."""
    data = result.data
    line = f"{data.get('count', 0)} variations of {data.get('domain', '?')}"
    stats = data.get("stats") or {}
    dropped = [
        f"{key.replace('_', ' ')}={stats[key]}"
        for key in ("invalid", "duplicate", "below_threshold")
        if stats.get(key)
    ]
    if dropped:
        line += f" (dropped: {', '.join(dropped)})"
    statuses = data.get("statuses")
    if statuses:
        line += " [" + ", ".join(f"{k}={v}" for k, v in sorted(statuses.items())) + "]"
    if data.get("capped"):
        line += ", capped"
    return line


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise the record lines.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return "\n".join(format_record(item) for item in result.data.get("items", []))
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {error_msg}"
