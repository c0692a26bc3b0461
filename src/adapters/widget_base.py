"""
Generic widget type adapter.

Minimal stand-in for the CMS widget type base: assigns identity fields and
exposes the widget's display options to the editing UI. Satisfies
WidgetTypePort of the richtext component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from src.rules.models import WidgetConfig

logger = logging.getLogger(__name__)


@dataclass
class BaseWidgetType:
    """Generic widget behavior shared by all widget types."""

    name: str
    config: WidgetConfig

    def sanitize(
        self,
        ctx: Any,
        raw_input: dict[str, Any],
        options: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Keep only the generic widget fields.

        Type-specific fields are left for the widget type to fill in.
        """
        widget_id = raw_input.get("_id")
        if not isinstance(widget_id, str) or not widget_id:
            widget_id = uuid4().hex
            logger.debug("Assigned new id %s to %s widget", widget_id, self.name)

        return {
            "_id": widget_id,
            "metaType": "widget",
            "type": self.name,
        }

    def get_browser_data(self, ctx: Any) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.config.label,
            "icon": self.config.icon,
            "contextual": self.config.contextual,
            "className": self.config.class_name,
            "defaultData": dict(self.config.default_data),
        }
