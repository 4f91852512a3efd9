"""XML generator producing an indented element tree."""

import re
from typing import Any, List
from ..types import ConversionOptions, FormatGenerator, IRNode
from ..utils.serialization import Serialization

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_UNSAFE_TAG_CHARS = re.compile(r"[^a-zA-Z0-9_-]")
_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


class XMLGenerator(FormatGenerator):
    """
    Generator for XML documents.

    Object keys become child elements, array elements become ``<item>``
    children, and null or empty values become self-closing tags.
    """

    name = "xml"
    description = "XML format"
    DEFAULT_ROOT_NAME = "root"
    ITEM_TAG = "item"
    INDENT = "  "

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        root_name = options.root_name or self.DEFAULT_ROOT_NAME
        lines = [XML_DECLARATION]
        self._element_lines(ir.value, root_name, 0, lines)
        return "\n".join(lines) + "\n"

    def _element_lines(self, value: Any, tag: str, depth: int, lines: List[str]) -> None:
        indent = self.INDENT * depth

        if value is None or (isinstance(value, (dict, list)) and not value):
            lines.append(f"{indent}<{tag} />")
        elif isinstance(value, bool):
            lines.append(f"{indent}<{tag}>{Serialization.format_boolean(value)}</{tag}>")
        elif Serialization.is_number(value):
            lines.append(f"{indent}<{tag}>{Serialization.format_number(value)}</{tag}>")
        elif isinstance(value, str):
            lines.append(f"{indent}<{tag}>{self.escape(value)}</{tag}>")
        elif isinstance(value, list):
            lines.append(f"{indent}<{tag}>")
            for item in value:
                self._element_lines(item, self.ITEM_TAG, depth + 1, lines)
            lines.append(f"{indent}</{tag}>")
        elif isinstance(value, dict):
            lines.append(f"{indent}<{tag}>")
            for key, item in value.items():
                self._element_lines(item, self.sanitize_tag(str(key)), depth + 1, lines)
            lines.append(f"{indent}</{tag}>")
        else:
            lines.append(f"{indent}<{tag} />")

    @staticmethod
    def escape(text: str) -> str:
        for char, entity in _ENTITIES:
            text = text.replace(char, entity)
        return text

    @staticmethod
    def sanitize_tag(key: str) -> str:
        return _UNSAFE_TAG_CHARS.sub("_", key)
