"""JSON decoding and text serialization helpers shared across the converter."""

import json
import math
import re
from typing import Any, Union

_EXPONENT_PADDING = re.compile(r"e([+-])0+(\d)")
# String literals are matched first so constants inside them are skipped
_NON_STANDARD_CONSTANT = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)')


def _reject_constant(text: str, constant: str) -> None:
    """parse_constant hook: NaN and the infinities are not JSON."""
    position = 0
    for match in _NON_STANDARD_CONSTANT.finditer(text):
        if match.group(1):
            position = match.start(1)
            break
    raise json.JSONDecodeError(f"Invalid constant {constant}", text, position)


class Serialization:
    """Utility class for decoding JSON and rendering JSON values as text fragments."""

    @staticmethod
    def parse_json(text: str) -> Any:
        """
        Decode strict JSON text.

        Args:
            text: JSON text

        Returns:
            Decoded value

        Raises:
            json.JSONDecodeError: If the text is malformed or uses NaN or Infinity
        """
        return json.loads(text, parse_constant=lambda constant: _reject_constant(text, constant))

    @staticmethod
    def compact_json(value: Any) -> str:
        """
        Serialize a value to JSON without insignificant whitespace.

        Args:
            value: JSON-compatible value

        Returns:
            Compact JSON text with non-ASCII characters kept as-is
        """
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))

    @staticmethod
    def format_number(value: Union[int, float]) -> str:
        """
        Format a number the way JavaScript's ``String(number)`` does.

        Integral floats drop their fractional part (``30.0`` -> ``30``) and
        exponents lose zero padding (``1e-07`` -> ``1e-7``).
        """
        if isinstance(value, int):
            return str(value)
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _EXPONENT_PADDING.sub(r"e\1\2", repr(value))

    @staticmethod
    def format_boolean(value: bool) -> str:
        return "true" if value else "false"

    @staticmethod
    def is_number(value: Any) -> bool:
        """True for ints and floats, False for booleans."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)
