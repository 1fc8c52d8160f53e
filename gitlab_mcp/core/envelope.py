"""Build the CallToolResult envelopes returned by every tool handler."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from mcp.types import CallToolResult, TextContent

from ..services.base import ServiceResult


def _plain(payload: Any) -> Any:
    """Convert dataclass payloads (or lists of them) into JSON-ready data."""
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return dataclasses.asdict(payload)
    if isinstance(payload, (list, tuple)):
        return [_plain(item) for item in payload]
    return payload


def render(payload: Any) -> str:
    """Serialize a payload to the canonical text form (indented JSON)."""
    return json.dumps(_plain(payload), indent=2, ensure_ascii=False)


def success_result(payload: Any) -> CallToolResult:
    """Wrap a payload in a success envelope."""
    try:
        text = render(payload)
    except (TypeError, ValueError) as e:
        return error_result(f"Failed to marshal result: {e}")
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_result(message: str) -> CallToolResult:
    """Wrap a human-readable message in a failure envelope."""
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def from_service_result(result: ServiceResult) -> CallToolResult:
    """Map a ServiceResult onto the matching envelope."""
    if not result.success:
        return error_result(result.error.message)
    return success_result(result.data)


def result_text(result: CallToolResult) -> str:
    """Text of the first content block ("" if there is none)."""
    for block in result.content:
        if isinstance(block, TextContent):
            return block.text
    return ""
