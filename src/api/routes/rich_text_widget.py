"""
Rich Text Widget API Routes.

Endpoints used by the page editor: browser data for the editing UI,
sanitization on save, the derived policy, and search text extraction.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.deps import get_rich_text_widget
from src.components.richtext import RichTextWidget, SearchText

router = APIRouter()


# --- Request/Response Models ---


class SanitizeRequest(BaseModel):
    """Raw widget as submitted by the editor, plus area options."""

    input: dict[str, Any] = Field(..., description="Raw widget data")
    options: dict[str, Any] = Field(default_factory=dict, description="Area widget options")


class PolicyRequest(BaseModel):
    """Area options to derive a policy for."""

    options: dict[str, Any] = Field(default_factory=dict)


class PolicyResponse(BaseModel):
    allowedTags: list[str]
    allowedAttributes: dict[str, list[str]]
    allowedClasses: dict[str, list[str]]


class SearchTextItem(BaseModel):
    weight: int
    text: str
    silent: bool


class SearchTextsRequest(BaseModel):
    widget: dict[str, Any]


class SearchTextsResponse(BaseModel):
    texts: list[SearchTextItem]
    is_empty: bool


# --- Routes ---


@router.get("/browser-data")
def get_browser_data(
    widget: RichTextWidget = Depends(get_rich_text_widget),
) -> dict[str, Any]:
    """Component names, editor tools and default options for the editing UI."""
    return widget.get_browser_data(None)


@router.post("/sanitize")
def sanitize_widget(
    request: SanitizeRequest,
    widget: RichTextWidget = Depends(get_rich_text_widget),
) -> dict[str, Any]:
    """Sanitize a widget on save."""
    return widget.sanitize(None, request.input, request.options)


@router.post("/policy", response_model=PolicyResponse)
def get_policy(
    request: PolicyRequest,
    widget: RichTextWidget = Depends(get_rich_text_widget),
) -> PolicyResponse:
    """Sanitization policy for the effective options."""
    policy = widget.options_to_policy(widget.effective_options(request.options))
    return PolicyResponse(**policy.to_dict())


@router.post("/search-texts", response_model=SearchTextsResponse)
def get_search_texts(
    request: SearchTextsRequest,
    widget: RichTextWidget = Depends(get_rich_text_widget),
) -> SearchTextsResponse:
    """Search texts and emptiness for a widget."""
    texts: list[SearchText] = []
    widget.add_search_texts(request.widget, texts)
    return SearchTextsResponse(
        texts=[
            SearchTextItem(weight=t.weight, text=t.text, silent=t.silent) for t in texts
        ],
        is_empty=widget.is_empty(request.widget),
    )
