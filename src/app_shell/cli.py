import argparse
import json
import logging
import sys
from pathlib import Path

from src.components.richtext import RichTextWidget, create_rich_text_widget
from src.rules.loader import load_widget_config
from src.rules.models import WidgetConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_widget(rules_path: str) -> RichTextWidget:
    path = Path(rules_path)
    if not path.exists():
        if rules_path != RULES_PATH:
            logger.error("Rules file %s not found.", rules_path)
            sys.exit(1)
        return create_rich_text_widget(WidgetConfig())

    return create_rich_text_widget(load_widget_config(path))


def parse_toolbar(value: str | None) -> dict[str, list[str]]:
    if value is None:
        return {}
    return {"toolbar": [item.strip() for item in value.split(",") if item.strip()]}


def handle_sanitize(widget: RichTextWidget, args: argparse.Namespace) -> None:
    source = Path(args.file)
    if not source.exists():
        logger.error("File %s not found.", source)
        sys.exit(1)

    content = source.read_text(encoding="utf-8")
    output = widget.sanitize(None, {"content": content}, parse_toolbar(args.toolbar))
    print(output["content"])


def handle_policy(widget: RichTextWidget, args: argparse.Namespace) -> None:
    options = widget.effective_options(parse_toolbar(args.toolbar))
    policy = widget.options_to_policy(options)
    print(json.dumps(policy.to_dict(), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Rich Text Widget CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Widget config YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # sanitize
    sanitize_parser = subparsers.add_parser("sanitize", help="Sanitize an HTML file")
    sanitize_parser.add_argument("file", help="HTML file to sanitize")
    sanitize_parser.add_argument("--toolbar", help="Comma separated toolbar items")

    # policy
    policy_parser = subparsers.add_parser("policy", help="Print the derived policy")
    policy_parser.add_argument("--toolbar", help="Comma separated toolbar items")

    args = parser.parse_args()
    widget = get_widget(args.rules)

    if args.command == "sanitize":
        handle_sanitize(widget, args)
    elif args.command == "policy":
        handle_policy(widget, args)


if __name__ == "__main__":
    main()
