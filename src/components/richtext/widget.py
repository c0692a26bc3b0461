"""
Rich text widget type.

Unlike most widget types, the rich text widget is edited in context on the
page. On save its content is cleaned against a policy derived from the
effective toolbar.

Key behaviors:
- Generic widget sanitization runs first, then content is overwritten
- Effective options: configured defaults with call-site options on top
- Browser data carries component names, editor tools and default options
- Search text and emptiness come from the content's plain text
"""

from __future__ import annotations

import logging
from typing import Any

from src.rules.models import WidgetConfig

from ._impl import SanitizationPolicy, build_policy, merge_options
from .models import SearchText
from .ports import PlaintextPort, SanitizerPort, WidgetTypePort

logger = logging.getLogger(__name__)

WIDGET_NAME = "rich-text"
SEARCH_TEXT_WEIGHT = 10


class RichTextWidget:
    """
    Rich text widget type.

    Wraps the generic widget type and the HTML collaborators.
    """

    def __init__(
        self,
        base: WidgetTypePort,
        sanitizer: SanitizerPort,
        plaintext: PlaintextPort,
        config: WidgetConfig | None = None,
    ) -> None:
        self._base = base
        self._sanitizer = sanitizer
        self._plaintext = plaintext
        self._config = config or WidgetConfig()
        self._default_options = merge_options(
            self._config.minimum_default_options.to_options(),
            self._config.default_options,
        )

    @property
    def config(self) -> WidgetConfig:
        return self._config

    @property
    def default_options(self) -> dict[str, Any]:
        """Minimum default options with configured defaults on top."""
        return dict(self._default_options)

    def effective_options(self, options: dict[str, Any] | None) -> dict[str, Any]:
        return merge_options(self._default_options, options)

    def get_rich_text(self, widget: dict[str, Any]) -> str | None:
        """Content of the widget; None if it has not been edited yet."""
        return widget.get("content")

    def load(self, ctx: Any, widgets: list[dict[str, Any]]) -> None:
        """Rich text widgets need nothing loaded."""

    def options_to_policy(self, options: dict[str, Any] | None) -> SanitizationPolicy:
        return build_policy(options)

    def sanitize(
        self,
        ctx: Any,
        raw_input: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        output, _ = self.sanitize_with_policy(ctx, raw_input, options)
        return output

    def sanitize_with_policy(
        self,
        ctx: Any,
        raw_input: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> tuple[dict[str, Any], SanitizationPolicy]:
        """Sanitize a widget and return the policy its content was cleaned with."""
        rte_options = self.effective_options(options)

        output = self._base.sanitize(ctx, raw_input, rte_options)

        policy = self.options_to_policy(rte_options)
        content = raw_input.get("content") or ""
        output["content"] = self._sanitizer.clean(str(content), policy)

        logger.debug(
            "Sanitized rich text widget %s (toolbar=%s)",
            output.get("_id"),
            rte_options.get("toolbar"),
        )
        return output, policy

    def get_browser_data(self, ctx: Any) -> dict[str, Any]:
        initial_data = self._base.get_browser_data(ctx)
        return {
            **initial_data,
            "components": dict(self._config.components),
            "tools": self._config.tools_data(),
            "defaultOptions": self.default_options,
        }

    def get_icons(self) -> dict[str, str]:
        return dict(self._config.icons)

    def plaintext(self, widget: dict[str, Any]) -> str:
        return self._plaintext.to_plaintext(widget.get("content") or "")

    def add_search_texts(self, widget: dict[str, Any], texts: list[SearchText]) -> None:
        texts.append(
            SearchText(
                weight=SEARCH_TEXT_WEIGHT,
                text=self.plaintext(widget),
                silent=False,
            )
        )

    def is_empty(self, widget: dict[str, Any]) -> bool:
        return not self.plaintext(widget).strip()


# --- Factory ---


def create_rich_text_widget(config: WidgetConfig | None = None) -> RichTextWidget:
    """Create a RichTextWidget wired to the nh3 and generic widget adapters."""
    from src.adapters.html_sanitizer import Nh3Plaintext, Nh3Sanitizer
    from src.adapters.widget_base import BaseWidgetType

    config = config or WidgetConfig()
    return RichTextWidget(
        base=BaseWidgetType(name=WIDGET_NAME, config=config),
        sanitizer=Nh3Sanitizer(),
        plaintext=Nh3Plaintext(),
        config=config,
    )
