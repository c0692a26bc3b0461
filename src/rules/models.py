from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StyleDefinition(BaseModel):
    tag: str
    label: str | None = None
    # "class" is a keyword; the YAML/browser key stays "class"
    class_: str | None = Field(default=None, alias="class")
    type: str | None = None
    type_parameters: dict[str, Any] | None = Field(default=None, alias="typeParameters")
    command: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    def to_option(self) -> dict[str, Any]:
        """Plain dict form used in widget options and browser data."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EditorTool(BaseModel):
    component: str
    label: str | None = None
    icon: str | None = None
    command: str | None = None


class RichTextOptions(BaseModel):
    toolbar: list[str] = Field(default_factory=list)
    styles: list[StyleDefinition] = Field(default_factory=list)

    def to_options(self) -> dict[str, Any]:
        return {
            "toolbar": list(self.toolbar),
            "styles": [style.to_option() for style in self.styles],
        }


def _default_minimum_options() -> RichTextOptions:
    return RichTextOptions(
        toolbar=[
            "styles",
            "bold",
            "italic",
            "strike",
            "link",
            "bullet_list",
            "ordered_list",
            "blockquote",
        ],
        styles=[
            StyleDefinition(
                tag="p", label="Paragraph (P)", type="paragraph", command="setParagraph"
            ),
            StyleDefinition(
                tag="h2",
                label="Heading 2 (H2)",
                type="heading",
                type_parameters={"level": 2},
                command="toggleHeading",
            ),
            StyleDefinition(
                tag="h3",
                label="Heading 3 (H3)",
                type="heading",
                type_parameters={"level": 3},
                command="toggleHeading",
            ),
            StyleDefinition(
                tag="h4",
                label="Heading 4 (H4)",
                type="heading",
                type_parameters={"level": 4},
                command="toggleHeading",
            ),
        ],
    )


def _button(label: str, icon: str, command: str | None = None) -> EditorTool:
    return EditorTool(component="AposTiptapButton", label=label, icon=icon, command=command)


def _default_editor_tools() -> dict[str, EditorTool]:
    return {
        "styles": EditorTool(component="AposTiptapStyles", label="Styles"),
        "|": EditorTool(component="AposTiptapDivider"),
        "bold": _button("Bold", "format-bold-icon", "toggleBold"),
        "italic": _button("Italic", "format-italic-icon", "toggleItalic"),
        "underline": _button("Underline", "format-underline-icon", "toggleUnderline"),
        "horizontal_rule": _button("Horizontal Rule", "minus-icon", "setHorizontalRule"),
        "link": EditorTool(component="AposTiptapLink", label="Link", icon="link-icon"),
        "bullet_list": _button("Bulleted List", "format-list-bulleted-icon", "toggleBulletList"),
        "ordered_list": _button(
            "Ordered List", "format-list-numbered-icon", "toggleOrderedList"
        ),
        "strike": _button("Strike", "format-strikethrough-variant-icon", "toggleStrike"),
        "blockquote": _button("Blockquote", "format-quote-close-icon", "toggleBlockquote"),
        "code_block": _button("Code Block", "code-tags-icon", "toggleCode"),
        "undo": _button("Undo", "undo-icon"),
        "redo": _button("Redo", "redo-icon"),
    }


class WidgetConfig(BaseModel):
    icon: str = "format-text-icon"
    label: str = "Rich Text"
    contextual: bool = True
    default_data: dict[str, Any] = Field(default_factory=lambda: {"content": ""})
    class_name: str | bool = False
    minimum_default_options: RichTextOptions = Field(default_factory=_default_minimum_options)
    # Partial overrides; keys present here win over minimum_default_options
    default_options: dict[str, Any] = Field(default_factory=dict)
    components: dict[str, str] = Field(
        default_factory=lambda: {
            "widgetEditor": "AposRichTextWidgetEditor",
            "widget": "AposRichTextWidget",
        }
    )
    editor_tools: dict[str, EditorTool] = Field(default_factory=_default_editor_tools)
    icons: dict[str, str] = Field(default_factory=lambda: {"format-text-icon": "FormatText"})

    def tools_data(self) -> dict[str, dict[str, Any]]:
        return {
            name: tool.model_dump(exclude_none=True) for name, tool in self.editor_tools.items()
        }
