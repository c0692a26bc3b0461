"""
Tests for the rich text sanitization policy builder.

Covers:
- Baseline tags survive any toolbar
- Toolbar items map to tags and attributes
- Style definitions map to tags and classes
- Shallow option merging
"""

from __future__ import annotations

import pytest

from src.components.richtext import (
    SanitizationPolicy,
    build_policy,
    derive_allowed_attributes,
    derive_allowed_classes,
    derive_allowed_tags,
    get_style_classes,
    merge_options,
)

LINK_ATTRIBUTES = {"href", "id", "name", "target"}


# --- Allowed Tags ---


class TestAllowedTags:
    """Toolbar to allowed tags."""

    @pytest.mark.parametrize(
        "toolbar",
        [None, [], ["bold"], ["styles"], ["|", "undo", "redo"], ["no-such-tool"]],
    )
    def test_baseline_always_present(self, toolbar: list[str] | None) -> None:
        tags = derive_allowed_tags(toolbar, None)
        assert "br" in tags
        assert "p" in tags

    def test_empty_toolbar_is_baseline_only(self) -> None:
        assert set(derive_allowed_tags([], [])) == {"br", "p"}

    def test_bold_and_link(self) -> None:
        tags = derive_allowed_tags(["bold", "link"], [])
        assert set(tags) == {"br", "p", "b", "strong", "a"}

    def test_lists_share_li_once(self) -> None:
        tags = derive_allowed_tags(["bullet_list", "ordered_list"], [])
        assert {"br", "p", "ul", "li", "ol"} <= set(tags)
        assert tags.count("li") == 1

    def test_full_table(self) -> None:
        toolbar = [
            "bold",
            "italic",
            "strike",
            "link",
            "horizontal_rule",
            "bullet_list",
            "ordered_list",
            "blockquote",
            "code_block",
        ]
        tags = derive_allowed_tags(toolbar, [])
        assert set(tags) == {
            "br", "p", "b", "strong", "i", "em", "s", "a", "hr",
            "ul", "li", "ol", "blockquote", "pre", "code",
        }

    def test_styles_add_style_tags(self) -> None:
        styles = [{"tag": "h2", "class": "big bold"}, {"tag": "h3"}]
        assert set(derive_allowed_tags(["styles"], styles)) == {"br", "p", "h2", "h3"}

    def test_styles_ignored_without_styles_item(self) -> None:
        styles = [{"tag": "h2"}]
        assert set(derive_allowed_tags(["bold"], styles)) == {"br", "p", "b", "strong"}

    def test_styles_item_with_no_styles(self) -> None:
        assert set(derive_allowed_tags(["styles"], None)) == {"br", "p"}

    def test_unknown_item_changes_nothing(self) -> None:
        with_unknown = derive_allowed_tags(["bold", "sparkles"], [])
        without = derive_allowed_tags(["bold"], [])
        assert with_unknown == without

    def test_order_is_deterministic(self) -> None:
        tags = derive_allowed_tags(["link", "bold"], [])
        assert tags == ["br", "p", "a", "b", "strong"]

    def test_style_without_tag_is_skipped(self) -> None:
        assert set(derive_allowed_tags(["styles"], [{"label": "Broken"}])) == {"br", "p"}


# --- Allowed Attributes ---


class TestAllowedAttributes:
    """Toolbar to allowed attributes."""

    def test_link_attributes(self) -> None:
        attrs = derive_allowed_attributes(["bold", "link"])
        assert set(attrs) == {"a"}
        assert set(attrs["a"]) == LINK_ATTRIBUTES

    def test_no_link_no_entries(self) -> None:
        assert derive_allowed_attributes(["bold", "styles"]) == {}

    def test_none_toolbar(self) -> None:
        assert derive_allowed_attributes(None) == {}

    def test_repeated_item_accumulates_without_duplicates(self) -> None:
        attrs = derive_allowed_attributes(["link", "link"])
        assert sorted(attrs["a"]) == sorted(LINK_ATTRIBUTES)

    def test_unknown_item_changes_nothing(self) -> None:
        assert derive_allowed_attributes(["link", "sparkles"]) == derive_allowed_attributes(
            ["link"]
        )


# --- Allowed Classes ---


class TestAllowedClasses:
    """Style definitions to allowed classes."""

    def test_style_classes(self) -> None:
        classes = derive_allowed_classes(["styles"], [{"tag": "h2", "class": "big bold"}])
        assert {tag: set(v) for tag, v in classes.items()} == {"h2": {"big", "bold"}}

    def test_requires_styles_item(self) -> None:
        assert derive_allowed_classes(["bold"], [{"tag": "h2", "class": "big"}]) == {}

    def test_shared_tag_accumulates(self) -> None:
        styles = [
            {"tag": "p", "class": "lead"},
            {"tag": "p", "class": "lead  muted"},
        ]
        classes = derive_allowed_classes(["styles"], styles)
        assert classes == {"p": ["lead", "muted"]}

    def test_style_without_class_gets_empty_bucket(self) -> None:
        styles = [{"tag": "h3"}, {"tag": "h2", "class": ""}]
        assert derive_allowed_classes(["styles"], styles) == {"h3": [], "h2": []}

    def test_no_styles(self) -> None:
        assert derive_allowed_classes(["styles"], []) == {}


class TestStyleClasses:
    """Class tokens of a style definition."""

    def test_missing(self) -> None:
        assert get_style_classes({"tag": "p"}) == []

    def test_none(self) -> None:
        assert get_style_classes({"tag": "p", "class": None}) == []

    def test_runs_of_whitespace(self) -> None:
        assert get_style_classes({"tag": "p", "class": " a\tb \n c "}) == ["a", "b", "c"]


# --- Merge ---


class TestMergeOptions:
    """Shallow option merge."""

    def test_override_wins(self) -> None:
        merged = merge_options({"toolbar": ["bold"], "styles": []}, {"toolbar": ["link"]})
        assert merged == {"toolbar": ["link"], "styles": []}

    def test_inputs_not_mutated(self) -> None:
        defaults = {"toolbar": ["bold"]}
        overrides = {"styles": [{"tag": "h2"}]}
        merge_options(defaults, overrides)
        assert defaults == {"toolbar": ["bold"]}
        assert overrides == {"styles": [{"tag": "h2"}]}

    def test_none_inputs(self) -> None:
        assert merge_options(None, None) == {}
        assert merge_options({"a": 1}, None) == {"a": 1}

    def test_is_shallow(self) -> None:
        merged = merge_options({"styles": [{"tag": "h2"}]}, {"styles": [{"tag": "h3"}]})
        assert merged["styles"] == [{"tag": "h3"}]


# --- Build Policy ---


class TestBuildPolicy:
    """Combined policy."""

    def test_empty_options(self) -> None:
        policy = build_policy({"toolbar": [], "styles": []})
        assert set(policy.allowed_tags) == {"br", "p"}
        assert policy.allowed_attributes == {}
        assert policy.allowed_classes == {}

    def test_none_options(self) -> None:
        policy = build_policy(None)
        assert policy == SanitizationPolicy()

    def test_styles_scenario(self) -> None:
        policy = build_policy(
            {"toolbar": ["styles"], "styles": [{"tag": "h2", "class": "big bold"}]}
        )
        assert set(policy.allowed_tags) == {"br", "p", "h2"}
        assert set(policy.allowed_classes["h2"]) == {"big", "bold"}

    def test_is_pure(self) -> None:
        options = {
            "toolbar": ["styles", "link", "bold"],
            "styles": [{"tag": "h2", "class": "big"}],
        }
        assert build_policy(options) == build_policy(options)
        assert options["toolbar"] == ["styles", "link", "bold"]

    def test_to_dict(self) -> None:
        policy = build_policy({"toolbar": ["link"]})
        assert policy.to_dict() == {
            "allowedTags": ["br", "p", "a"],
            "allowedAttributes": {"a": ["href", "id", "name", "target"]},
            "allowedClasses": {},
        }

    def test_to_sanitizer_kwargs_uses_sets(self) -> None:
        policy = build_policy(
            {"toolbar": ["styles", "link"], "styles": [{"tag": "h2", "class": "big"}]}
        )
        kwargs = policy.to_sanitizer_kwargs()
        assert kwargs["tags"] == {"br", "p", "h2", "a"}
        assert kwargs["attributes"] == {"a": LINK_ATTRIBUTES}
        assert kwargs["allowed_classes"] == {"h2": {"big"}}


# --- Malformed Options ---


class TestMalformedOptions:
    """Malformed options degrade to the baseline instead of raising."""

    def test_non_mapping_styles_skipped(self) -> None:
        policy = build_policy({"toolbar": ["styles"], "styles": ["h2", None, 3]})
        assert policy.allowed_tags == ["br", "p"]
        assert policy.allowed_classes == {}

    def test_non_mapping_styles_mixed_with_valid(self) -> None:
        policy = build_policy(
            {"toolbar": ["styles"], "styles": ["h2", {"tag": "h3", "class": "big"}]}
        )
        assert policy.allowed_tags == ["br", "p", "h3"]
        assert policy.allowed_classes == {"h3": ["big"]}

    def test_unhashable_toolbar_items_skipped(self) -> None:
        policy = build_policy({"toolbar": [{"x": 1}, ["bold"], "link"]})
        assert policy.allowed_tags == ["br", "p", "a"]
        assert set(policy.allowed_attributes) == {"a"}

    def test_non_list_toolbar(self) -> None:
        assert build_policy({"toolbar": "bold"}) == SanitizationPolicy()
        assert build_policy({"toolbar": {"bold": True}}) == SanitizationPolicy()

    def test_non_list_styles(self) -> None:
        policy = build_policy({"toolbar": ["styles"], "styles": {"tag": "h2"}})
        assert policy.allowed_tags == ["br", "p"]
        assert policy.allowed_classes == {}

    def test_non_mapping_options(self) -> None:
        assert build_policy(["bold"]) == SanitizationPolicy()  # type: ignore[arg-type]

    def test_list_class_yields_no_tokens(self) -> None:
        assert get_style_classes({"tag": "h2", "class": ["a", "b"]}) == []
        classes = derive_allowed_classes(["styles"], [{"tag": "h2", "class": ["a", "b"]}])
        assert classes == {"h2": []}

    def test_non_string_tag_skipped(self) -> None:
        styles = [{"tag": ["h2"]}, {"tag": 5, "class": "big"}]
        assert derive_allowed_tags(["styles"], styles) == ["br", "p"]
        assert derive_allowed_classes(["styles"], styles) == {}
