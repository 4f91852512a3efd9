"""TOML generator producing TOML v1.0 documents."""

import re
from typing import Any, Dict, List, Tuple
from ..types import ConversionOptions, FormatGenerator, IRNode
from ..utils.serialization import Serialization

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")
_BASIC_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


class TOMLGenerator(FormatGenerator):
    """
    Generator for TOML documents.

    Nested objects become ``[dotted.path]`` tables and arrays of objects
    become ``[[dotted.path]]`` arrays of tables. Plain key/value pairs are
    written before any sub-table so they stay attached to their own table.
    TOML has no null, so null values are left out.

    Strings containing a newline or a double quote are written as ``'''``
    literal strings without escaping; content holding ``'''`` itself cannot
    be represented this way.
    """

    name = "toml"
    description = "TOML v1.0 format"

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        value = ir.value
        if isinstance(value, dict):
            lines = self._table_lines(value, "")
            return "\n".join(lines) + "\n" if lines else ""
        if value is None:
            return ""
        return self.format_inline(value)

    def _table_lines(self, table: Dict[str, Any], prefix: str) -> List[str]:
        lines = []
        sub_tables: List[Tuple[str, Any]] = []

        for key, value in table.items():
            if value is None:
                continue
            if isinstance(value, dict) or self._is_table_array(value):
                sub_tables.append((key, value))
            else:
                lines.append(f"{self.format_key(key)} = {self.format_inline(value)}")

        for key, value in sub_tables:
            key_text = self.format_key(key)
            path = f"{prefix}.{key_text}" if prefix else key_text
            if isinstance(value, dict):
                self._append_header(lines, f"[{path}]")
                lines.extend(self._table_lines(value, path))
            else:
                for item in value:
                    self._append_header(lines, f"[[{path}]]")
                    lines.extend(self._table_lines(item, path))

        return lines

    @staticmethod
    def _append_header(lines: List[str], header: str) -> None:
        if lines:
            lines.append("")
        lines.append(header)

    @staticmethod
    def _is_table_array(value: Any) -> bool:
        return (isinstance(value, list) and len(value) > 0
                and all(isinstance(item, dict) for item in value))

    @classmethod
    def format_inline(cls, value: Any) -> str:
        """Render a value as an inline TOML value."""
        if isinstance(value, bool):
            return Serialization.format_boolean(value)
        if Serialization.is_number(value):
            return Serialization.format_number(value)
        if isinstance(value, str):
            return cls.format_string(value)
        if isinstance(value, list):
            items = [cls.format_inline(item) for item in value if item is not None]
            return f"[{', '.join(items)}]"
        if isinstance(value, dict):
            pairs = [
                f"{cls.format_key(key)} = {cls.format_inline(item)}"
                for key, item in value.items()
                if item is not None
            ]
            return "{ " + ", ".join(pairs) + " }" if pairs else "{}"
        return ""

    @staticmethod
    def format_string(text: str) -> str:
        if "\n" in text or '"' in text:
            return f"'''{text}'''"
        return '"' + _escape_basic(text) + '"'

    @staticmethod
    def format_key(key: str) -> str:
        if _BARE_KEY.fullmatch(key):
            return key
        return '"' + _escape_basic(key) + '"'


def _escape_basic(text: str) -> str:
    """Escape text for a TOML basic (double-quoted) string."""
    out = []
    for char in text:
        if char in _BASIC_ESCAPES:
            out.append(_BASIC_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    return "".join(out)
