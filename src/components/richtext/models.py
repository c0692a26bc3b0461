"""
Richtext component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Search Text ---


@dataclass(frozen=True)
class SearchText:
    """Weighted plain text contributed to the search index."""

    weight: int
    text: str
    silent: bool = False


# --- Input Models ---


@dataclass(frozen=True)
class SanitizeWidgetInput:
    """Input for sanitizing a rich text widget on save."""

    widget: dict[str, Any]
    options: dict[str, Any] = field(default_factory=dict)
    ctx: Any = None


@dataclass(frozen=True)
class BrowserDataInput:
    """Input for assembling the editing UI's data."""

    ctx: Any = None


@dataclass(frozen=True)
class SearchTextsInput:
    """Input for extracting search texts from a widget."""

    widget: dict[str, Any]


@dataclass(frozen=True)
class IsEmptyInput:
    """Input for checking whether a widget has visible text."""

    widget: dict[str, Any]


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeOutput:
    """Output for a sanitized widget."""

    widget: dict[str, Any]
    policy: dict[str, Any]
    success: bool = True


@dataclass(frozen=True)
class BrowserDataOutput:
    """Output for browser data."""

    data: dict[str, Any]
    success: bool = True


@dataclass(frozen=True)
class SearchTextsOutput:
    """Output for search texts."""

    texts: list[SearchText] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class IsEmptyOutput:
    """Output for the emptiness check."""

    is_empty: bool
    success: bool = True
