"""
Richtext component port definitions.

The HTML sanitizer, the HTML-to-plaintext converter and the generic widget
type are collaborators supplied from outside the component.
"""

from __future__ import annotations

from typing import Any, Protocol

from ._impl import SanitizationPolicy


class SanitizerPort(Protocol):
    """Port for the HTML sanitizer."""

    def clean(self, html: str, policy: SanitizationPolicy) -> str:
        """Return html with everything outside the policy removed."""
        ...


class PlaintextPort(Protocol):
    """Port for HTML-to-plaintext conversion."""

    def to_plaintext(self, html: str) -> str:
        """Return the visible text of html."""
        ...


class WidgetTypePort(Protocol):
    """Port for the generic widget type the rich text widget extends."""

    def sanitize(
        self,
        ctx: Any,
        raw_input: dict[str, Any],
        options: dict[str, Any],
    ) -> dict[str, Any]:
        """Generic sanitization of a widget's fields."""
        ...

    def get_browser_data(self, ctx: Any) -> dict[str, Any]:
        """Data exposed to the editing UI."""
        ...
