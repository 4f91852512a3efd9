"""CSV generator for flattened row sets."""

import logging
from typing import Any, Optional
from ..flattener import Flattener, collect_columns
from ..types import ConversionOptions, FormatGenerator, IRNode
from ..utils.serialization import Serialization


class CSVGenerator(FormatGenerator):
    """
    Generator for comma-separated values.

    Rows come from the flattener; the header is the union of all row keys
    in first-seen order and missing cells are left empty.
    """

    name = "csv"
    description = "Comma-separated values (flat structure only)"

    def __init__(self, flattener: Optional[Flattener] = None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.flattener = flattener or Flattener(self.logger)

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        rows = self.flattener.flatten(ir)
        if not rows:
            return ""

        columns = collect_columns(rows)
        lines = [",".join(columns)]
        for row in rows:
            lines.append(",".join(self.format_cell(row.get(column)) for column in columns))

        self.logger.debug(f"Generated CSV with {len(columns)} columns and {len(rows)} rows")
        return "\n".join(lines)

    @staticmethod
    def format_cell(value: Any) -> str:
        """Render one cell, quoting only where CSV requires it."""
        if value is None:
            return ""
        if isinstance(value, str):
            escaped = value.replace('"', '""')
            if "," in escaped or '"' in escaped or "\n" in escaped:
                return f'"{escaped}"'
            return escaped
        if isinstance(value, (dict, list)):
            return '"' + Serialization.compact_json(value).replace('"', '""') + '"'
        if isinstance(value, bool):
            return Serialization.format_boolean(value)
        if Serialization.is_number(value):
            return Serialization.format_number(value)
        return str(value)
