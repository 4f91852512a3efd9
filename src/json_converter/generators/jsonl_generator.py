"""JSON Lines generator."""

from ..types import ConversionOptions, FormatGenerator, IRNode, IRType
from ..utils.serialization import Serialization


class JSONLGenerator(FormatGenerator):
    """
    Generator for newline-delimited JSON.

    A top-level array yields one line per object (or nested array) element.
    A top-level object is written whole on a single line, and a scalar is
    wrapped as ``{"value": ...}``.
    """

    name = "jsonl"
    description = "JSON Lines (newline-delimited JSON)"

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        if ir.type == IRType.ARRAY:
            return "\n".join(
                Serialization.compact_json(item)
                for item in ir.value
                if isinstance(item, (dict, list))
            )
        if ir.type == IRType.OBJECT:
            return Serialization.compact_json(ir.value)
        return Serialization.compact_json({"value": ir.value})
