"""YAML generator producing block-style YAML 1.2."""

import re
from typing import Any, List
from ..types import ConversionOptions, FormatGenerator, IRNode
from ..utils.serialization import Serialization

_INDICATOR_START = re.compile(r"[\s,:{}\[\]&*#?|<>%'\"`]")
_DIGITS_ONLY = re.compile(r"[0-9]+")
_RESERVED_WORDS = frozenset({"true", "false", "null"})


class YAMLGenerator(FormatGenerator):
    """
    Generator for block-style YAML.

    Non-empty mappings and sequences are written as indented blocks; a
    collection inside a sequence gets a bare ``-`` line with its block
    beneath. Empty collections are written inline as ``[]`` and ``{}``.
    """

    name = "yaml"
    description = "YAML 1.2 format"
    DEFAULT_INDENT = 2

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        indent = options.indent or self.DEFAULT_INDENT
        value = ir.value
        if self._is_block(value):
            return "\n".join(self._block_lines(value, 0, indent))
        return self.format_scalar(value)

    def _block_lines(self, value: Any, level: int, indent: int) -> List[str]:
        padding = " " * (level * indent)
        lines = []

        if isinstance(value, dict):
            for key, item in value.items():
                key_text = self.format_string(str(key))
                if self._is_block(item):
                    lines.append(f"{padding}{key_text}:")
                    lines.extend(self._block_lines(item, level + 1, indent))
                else:
                    lines.append(f"{padding}{key_text}: {self.format_scalar(item)}")
        else:
            for item in value:
                if self._is_block(item):
                    lines.append(f"{padding}-")
                    lines.extend(self._block_lines(item, level + 1, indent))
                else:
                    lines.append(f"{padding}- {self.format_scalar(item)}")

        return lines

    @staticmethod
    def _is_block(value: Any) -> bool:
        return isinstance(value, (dict, list)) and len(value) > 0

    @classmethod
    def format_scalar(cls, value: Any) -> str:
        """Render a scalar or an empty collection inline."""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return Serialization.format_boolean(value)
        if Serialization.is_number(value):
            return Serialization.format_number(value)
        if isinstance(value, str):
            return cls.format_string(value)
        if isinstance(value, list):
            return "[]"
        if isinstance(value, dict):
            return "{}"
        return "null"

    @staticmethod
    def needs_quotes(text: str) -> bool:
        """True when a plain scalar would be misread or is not a valid plain scalar."""
        if text == "":
            return True
        if _INDICATOR_START.match(text):
            return True
        if text in _RESERVED_WORDS:
            return True
        return _DIGITS_ONLY.fullmatch(text) is not None

    @classmethod
    def format_string(cls, text: str) -> str:
        if cls.needs_quotes(text):
            escaped = text.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return text
