from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import WidgetConfig


def _strip_yaml_fence(content: str) -> str:
    """Return the first ```yaml block if the file has one, else the whole file."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_widget_config(path: Path) -> WidgetConfig:
    """
    Load and validate the rich text widget configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Widget config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_yaml_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in widget config file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return WidgetConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Widget config validation failed:\n{e}") from e
