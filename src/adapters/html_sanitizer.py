"""
nh3 adapters for HTML sanitization and plaintext extraction.

Satisfies SanitizerPort and PlaintextPort of the richtext component.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import Any

import nh3

from src.components.richtext._impl import SanitizationPolicy, merge_options

logger = logging.getLogger(__name__)

# Tags whose boundaries separate words in the extracted text
BLOCK_TAG_PATTERN = re.compile(
    r"<(?:br|hr)\s*/?>|</?(?:p|div|h[1-6]|li|ul|ol|blockquote|pre|tr|td|th)\b[^>]*>",
    re.IGNORECASE,
)
BLANK_LINES_PATTERN = re.compile(r"\n\s*\n+")


# nh3's default clean_content_tags; a tag may not be both allowed and content-cleaned
CLEAN_CONTENT_TAGS: frozenset[str] = frozenset({"script", "style"})


def _default_clean_options() -> dict[str, Any]:
    return {
        # Attributes come only from the policy's per-tag allow-list
        "generic_attributes": set(),
        "link_rel": None,
        "strip_comments": True,
    }


@dataclass
class Nh3Sanitizer:
    """
    HTML sanitizer backed by nh3.

    The derived policy is laid over these defaults. URL schemes keep nh3's
    own behavior unless overridden here.
    """

    defaults: dict[str, Any] = field(default_factory=_default_clean_options)

    def clean(self, html_content: str, policy: SanitizationPolicy) -> str:
        kwargs = merge_options(self.defaults, policy.to_sanitizer_kwargs())
        clean_content = set(kwargs.get("clean_content_tags", CLEAN_CONTENT_TAGS))
        kwargs["clean_content_tags"] = clean_content - kwargs["tags"]
        logger.debug(
            "Sanitizing %d chars with %d allowed tags",
            len(html_content),
            len(kwargs["tags"]),
        )
        return nh3.clean(html_content, **kwargs)


@dataclass
class Nh3Plaintext:
    """Plaintext extraction: block boundaries become newlines, all tags are dropped."""

    def to_plaintext(self, html_content: str) -> str:
        if not html_content:
            return ""

        spaced = BLOCK_TAG_PATTERN.sub(lambda m: m.group(0) + "\n", html_content)
        stripped = nh3.clean(spaced, tags=set(), strip_comments=True)
        text = html.unescape(stripped)
        return BLANK_LINES_PATTERN.sub("\n", text).strip()
