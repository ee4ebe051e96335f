"""Output formatting helpers for CLI commands."""

from __future__ import annotations

import json
from typing import Any

__all__ = ["format_error", "format_json", "format_warning"]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error("Bad template", details=["Unclosed mustache"]))
        Error: Bad template
          Unclosed mustache
    """
    lines = [f"Error: {message}"]
    for detail in details or []:
        lines.append(f"  {detail}")
    if suggestion:
        lines.append(f"Suggestion: {suggestion}")
    return "\n".join(lines)


def format_warning(message: str) -> str:
    return f"Warning: {message}"


def format_json(data: Any) -> str:
    """Format data as indented JSON; unknown types are rendered with str()."""
    return json.dumps(data, indent=2, default=str)
