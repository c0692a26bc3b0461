"""
Richtext component - Rich text widget sanitization policy and editor data.
"""

from ._impl import (
    BASELINE_TAGS,
    TOOL_TO_ATTRIBUTES,
    TOOL_TO_TAGS,
    SanitizationPolicy,
    ToolAttributes,
    build_policy,
    derive_allowed_attributes,
    derive_allowed_classes,
    derive_allowed_tags,
    get_style_classes,
    merge_options,
)
from .component import (
    run,
    run_browser_data,
    run_is_empty,
    run_sanitize,
    run_search_texts,
)
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
from .ports import PlaintextPort, SanitizerPort, WidgetTypePort
from .widget import RichTextWidget, create_rich_text_widget

__all__ = [
    # Entry points
    "run",
    "run_browser_data",
    "run_is_empty",
    "run_sanitize",
    "run_search_texts",
    # Input models
    "BrowserDataInput",
    "IsEmptyInput",
    "SanitizeWidgetInput",
    "SearchTextsInput",
    # Output models
    "BrowserDataOutput",
    "IsEmptyOutput",
    "SanitizeOutput",
    "SearchText",
    "SearchTextsOutput",
    # Ports
    "PlaintextPort",
    "SanitizerPort",
    "WidgetTypePort",
    # Policy builder
    "BASELINE_TAGS",
    "TOOL_TO_ATTRIBUTES",
    "TOOL_TO_TAGS",
    "SanitizationPolicy",
    "ToolAttributes",
    "build_policy",
    "derive_allowed_attributes",
    "derive_allowed_classes",
    "derive_allowed_tags",
    "get_style_classes",
    "merge_options",
    # Widget type
    "RichTextWidget",
    "create_rich_text_widget",
]
