import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.components.richtext import RichTextWidget, create_rich_text_widget
from src.rules.loader import load_widget_config
from src.rules.models import WidgetConfig

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("RICH_TEXT_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Config ---
def load_config_or_default(path: Path) -> WidgetConfig:
    if not path.exists():
        logger.info("No widget config at %s, using built-in defaults", path)
        return WidgetConfig()
    return load_widget_config(path)


@lru_cache
def get_widget_config() -> WidgetConfig:
    return load_config_or_default(get_settings().rules_path)


# --- Widget ---
def get_rich_text_widget(
    config: WidgetConfig = Depends(get_widget_config),
) -> RichTextWidget:
    return create_rich_text_widget(config)
