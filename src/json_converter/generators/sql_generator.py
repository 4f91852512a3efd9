"""SQL generator producing INSERT statements."""

import logging
import re
from typing import Any, Optional
from ..flattener import Flattener, collect_columns
from ..types import ConversionOptions, FormatGenerator, IRNode
from ..utils.serialization import Serialization

_UNSAFE_IDENTIFIER_CHARS = re.compile(r"[^a-zA-Z0-9_]")


class SQLGenerator(FormatGenerator):
    """
    Generator for PostgreSQL/MySQL compatible INSERT statements.

    Each flattened row becomes one statement listing only its non-null
    columns; rows without any such column are skipped.
    """

    name = "sql"
    description = "SQL INSERT statements"
    DEFAULT_TABLE_NAME = "data"

    def __init__(self, flattener: Optional[Flattener] = None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.flattener = flattener or Flattener(self.logger)

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        table_name = options.table_name or self.DEFAULT_TABLE_NAME
        rows = self.flattener.flatten(ir)
        if not rows:
            return ""

        table = self.escape_identifier(table_name)
        all_columns = collect_columns(rows)
        statements = []
        for row in rows:
            columns = []
            values = []
            for column in all_columns:
                value = row.get(column)
                if value is not None:
                    columns.append(self.escape_identifier(column))
                    values.append(self.escape_value(value))

            if columns:
                statements.append(
                    f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({', '.join(values)});"
                )

        self.logger.debug(f"Generated {len(statements)} INSERT statements for {table}")
        return "\n".join(statements)

    @staticmethod
    def escape_identifier(name: str) -> str:
        return '"' + _UNSAFE_IDENTIFIER_CHARS.sub("_", name) + '"'

    @staticmethod
    def escape_value(value: Any) -> str:
        """Render a value as a SQL literal."""
        if value is None:
            return "NULL"
        if isinstance(value, str):
            return "'" + value.replace("'", "''") + "'"
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if Serialization.is_number(value):
            return Serialization.format_number(value)
        if isinstance(value, (dict, list)):
            return "'" + Serialization.compact_json(value).replace("'", "''") + "'"
        return "NULL"
