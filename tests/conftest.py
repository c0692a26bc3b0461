from pathlib import Path

import pytest

from src.components.richtext import RichTextWidget, create_rich_text_widget
from src.rules.loader import load_widget_config
from src.rules.models import WidgetConfig

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def widget_config() -> WidgetConfig:
    """
    Widget config loaded from the REAL rules.yaml at the project root.
    """
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")

    return load_widget_config(rules_path)


@pytest.fixture
def rich_text(widget_config: WidgetConfig) -> RichTextWidget:
    """Rich text widget wired to nh3 and the generic widget type."""
    return create_rich_text_widget(widget_config)
