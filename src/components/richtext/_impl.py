"""
Rich text sanitization policy builder.

Derives an HTML sanitizer allow-list from a rich text widget's toolbar and
style definitions, so that h4 can be legal in one area and illegal in another.

Key behaviors:
- Baseline tags (br, p) are always allowed
- Each known toolbar item legalizes a fixed set of tags and attributes
- The "styles" item legalizes each style's tag and its classes
- Unknown toolbar items are ignored
- Pure functions: same options always produce the same policy
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# --- Lookup Tables ---

BASELINE_TAGS: tuple[str, ...] = ("br", "p")

STYLES_ITEM = "styles"

TOOL_TO_TAGS: Mapping[str, tuple[str, ...]] = {
    "bold": ("b", "strong"),
    "italic": ("i", "em"),
    "strike": ("s",),
    "link": ("a",),
    "horizontal_rule": ("hr",),
    "bullet_list": ("ul", "li"),
    "ordered_list": ("ol", "li"),
    "blockquote": ("blockquote",),
    "code_block": ("pre", "code"),
}


@dataclass(frozen=True)
class ToolAttributes:
    """Attributes a toolbar item legalizes on one tag."""

    tag: str
    attributes: tuple[str, ...]


TOOL_TO_ATTRIBUTES: Mapping[str, ToolAttributes] = {
    "link": ToolAttributes(tag="a", attributes=("href", "id", "name", "target")),
}


# --- Policy ---


@dataclass(frozen=True)
class SanitizationPolicy:
    """
    Allow-list handed to the HTML sanitizer.

    Lists are deduplicated and keep first-seen order.
    """

    allowed_tags: list[str] = field(default_factory=lambda: list(BASELINE_TAGS))
    allowed_attributes: dict[str, list[str]] = field(default_factory=dict)
    allowed_classes: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "allowedTags": list(self.allowed_tags),
            "allowedAttributes": {k: list(v) for k, v in self.allowed_attributes.items()},
            "allowedClasses": {k: list(v) for k, v in self.allowed_classes.items()},
        }

    def to_sanitizer_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for nh3.clean; other nh3 settings keep their defaults."""
        return {
            "tags": set(self.allowed_tags),
            "attributes": {k: set(v) for k, v in self.allowed_attributes.items()},
            "allowed_classes": {k: set(v) for k, v in self.allowed_classes.items()},
        }


# --- Helpers ---


def merge_options(
    defaults: Mapping[str, Any] | None,
    overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Shallow merge of two option mappings.

    Keys in overrides win. Neither input is mutated.
    """
    merged: dict[str, Any] = dict(defaults or {})
    merged.update(overrides or {})
    return merged


def _add_unique(bucket: list[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in bucket:
            bucket.append(value)


def _toolbar_items(toolbar: Any) -> list[str]:
    """String items of a toolbar; anything else is ignored."""
    if not isinstance(toolbar, (list, tuple)):
        return []
    return [item for item in toolbar if isinstance(item, str)]


def _style_definitions(styles: Any) -> list[Mapping[str, Any]]:
    """Mapping entries of a styles list; anything else is ignored."""
    if not isinstance(styles, (list, tuple)):
        return []
    return [style for style in styles if isinstance(style, Mapping)]


def _style_tag(style: Mapping[str, Any]) -> str | None:
    tag = style.get("tag")
    return tag if isinstance(tag, str) and tag else None


def get_style_classes(style: Mapping[str, Any]) -> list[str]:
    """Class tokens of a style definition; empty when it has no string class."""
    classes = style.get("class")
    if not isinstance(classes, str):
        return []
    return classes.split()


# --- Derivations ---


def derive_allowed_tags(
    toolbar: Sequence[str] | None,
    styles: Sequence[Mapping[str, Any]] | None,
) -> list[str]:
    """Tags legalized by the toolbar, always including br and p."""
    allowed = list(BASELINE_TAGS)

    for item in _toolbar_items(toolbar):
        if item in TOOL_TO_TAGS:
            _add_unique(allowed, TOOL_TO_TAGS[item])
        elif item == STYLES_ITEM:
            for style in _style_definitions(styles):
                tag = _style_tag(style)
                if tag:
                    _add_unique(allowed, [tag])

    return allowed


def derive_allowed_attributes(toolbar: Sequence[str] | None) -> dict[str, list[str]]:
    """Attributes per tag legalized by the toolbar."""
    allowed: dict[str, list[str]] = {}

    for item in _toolbar_items(toolbar):
        entry = TOOL_TO_ATTRIBUTES.get(item)
        if entry is None:
            continue
        _add_unique(allowed.setdefault(entry.tag, []), entry.attributes)

    return allowed


def derive_allowed_classes(
    toolbar: Sequence[str] | None,
    styles: Sequence[Mapping[str, Any]] | None,
) -> dict[str, list[str]]:
    """
    Classes per tag legalized by style definitions.

    Only populated when the toolbar has "styles". Every tag seen through a
    style gets an entry, even when none of its styles carry a class.
    """
    allowed: dict[str, list[str]] = {}

    if STYLES_ITEM not in _toolbar_items(toolbar):
        return allowed

    for style in _style_definitions(styles):
        tag = _style_tag(style)
        if not tag:
            continue
        _add_unique(allowed.setdefault(tag, []), get_style_classes(style))

    return allowed


def build_policy(options: Mapping[str, Any] | None) -> SanitizationPolicy:
    """Build the sanitization policy for effective widget options."""
    if not isinstance(options, Mapping):
        options = {}
    toolbar = options.get("toolbar")
    styles = options.get("styles")

    return SanitizationPolicy(
        allowed_tags=derive_allowed_tags(toolbar, styles),
        allowed_attributes=derive_allowed_attributes(toolbar),
        allowed_classes=derive_allowed_classes(toolbar, styles),
    )
