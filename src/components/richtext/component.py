"""
Richtext component - Rich text widget sanitization and editor data.

Provides toolbar-driven HTML sanitization plus the data the editing UI and
the search index need.

Invariants:
- I1: br and p are always allowed
- I2: Only tags, attributes and classes legalized by the toolbar survive
- I3: Generic widget sanitization runs before content sanitization
- I4: Policy derivation is pure and never raises
"""

from __future__ import annotations

from .models import (
    BrowserDataInput,
    BrowserDataOutput,
    IsEmptyInput,
    IsEmptyOutput,
    SanitizeOutput,
    SanitizeWidgetInput,
    SearchText,
    SearchTextsInput,
    SearchTextsOutput,
)
from .widget import RichTextWidget, create_rich_text_widget


def _widget_or_default(widget: RichTextWidget | None) -> RichTextWidget:
    return widget if widget is not None else create_rich_text_widget()


# --- Component Entry Points ---


def run_sanitize(
    inp: SanitizeWidgetInput,
    *,
    widget: RichTextWidget | None = None,
) -> SanitizeOutput:
    """
    Sanitize a rich text widget on save.

    Args:
        inp: Input containing the raw widget and call-site options.
        widget: Optional widget type; defaults to the nh3-backed one.

    Returns:
        SanitizeOutput with the sanitized widget and the policy applied.
    """
    rich_text = _widget_or_default(widget)
    sanitized, policy = rich_text.sanitize_with_policy(inp.ctx, inp.widget, inp.options)

    return SanitizeOutput(widget=sanitized, policy=policy.to_dict(), success=True)


def run_browser_data(
    inp: BrowserDataInput,
    *,
    widget: RichTextWidget | None = None,
) -> BrowserDataOutput:
    """Assemble the data exposed to the editing UI."""
    rich_text = _widget_or_default(widget)
    return BrowserDataOutput(data=rich_text.get_browser_data(inp.ctx), success=True)


def run_search_texts(
    inp: SearchTextsInput,
    *,
    widget: RichTextWidget | None = None,
) -> SearchTextsOutput:
    """Collect the widget's search texts."""
    rich_text = _widget_or_default(widget)
    texts: list[SearchText] = []
    rich_text.add_search_texts(inp.widget, texts)
    return SearchTextsOutput(texts=texts, success=True)


def run_is_empty(
    inp: IsEmptyInput,
    *,
    widget: RichTextWidget | None = None,
) -> IsEmptyOutput:
    """Check whether the widget has any visible text."""
    rich_text = _widget_or_default(widget)
    return IsEmptyOutput(is_empty=rich_text.is_empty(inp.widget), success=True)


def run(
    inp: SanitizeWidgetInput | BrowserDataInput | SearchTextsInput | IsEmptyInput,
    *,
    widget: RichTextWidget | None = None,
) -> SanitizeOutput | BrowserDataOutput | SearchTextsOutput | IsEmptyOutput:
    """
    Main entry point for the richtext component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SanitizeWidgetInput):
        return run_sanitize(inp, widget=widget)
    elif isinstance(inp, BrowserDataInput):
        return run_browser_data(inp, widget=widget)
    elif isinstance(inp, SearchTextsInput):
        return run_search_texts(inp, widget=widget)
    elif isinstance(inp, IsEmptyInput):
        return run_is_empty(inp, widget=widget)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
