"""Flattening of IR trees into single-level rows for tabular formats."""

import logging
from typing import Any, Dict, List, Optional
from .parser import JSONParser
from .types import IRNode, IRType
from .utils.serialization import Serialization

Row = Dict[str, Any]


class Flattener:
    """
    Reduces an IR tree to a row set.

    Nested objects become dot-joined keys (``{"a": {"b": 1}}`` ->
    ``{"a.b": 1}``) and arrays become compact JSON strings, so every row is a
    flat mapping of string keys to scalars.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._parser = JSONParser(self.logger)

    def flatten(self, node: Any, max_depth: Optional[int] = None) -> List[Row]:
        """
        Flatten an IR node into rows.

        Args:
            node: IRNode, or a decoded JSON value which is built into IR first
            max_depth: Nesting levels to flatten; None means unlimited

        Returns:
            List of flat row mappings
        """
        if not isinstance(node, IRNode):
            node = self._parser.to_ir(node)

        if node.type == IRType.ARRAY:
            rows = self._rows_from_list(node.value, max_depth)
        elif node.type == IRType.OBJECT:
            entries = list(node.value.items())
            if len(entries) == 1 and isinstance(entries[0][1], list):
                # A lone array property is the row set
                rows = self._rows_from_list(entries[0][1], max_depth)
            else:
                rows = [self.flatten_object(node.value, 0, max_depth)]
        else:
            rows = [{"value": node.value}]

        self.logger.debug(f"Flattened {node.type.value} node into {len(rows)} rows")
        return rows

    def flatten_object(self, obj: Dict[str, Any], depth: int = 0,
                       max_depth: Optional[int] = None) -> Row:
        """
        Flatten one object into a single-level row.

        Args:
            obj: Mapping to flatten
            depth: Current nesting depth
            max_depth: Depth limit; None means unlimited

        Returns:
            Flat row mapping
        """
        result: Row = {}
        within_limit = max_depth is None or depth < max_depth

        for key, value in obj.items():
            if value is None:
                result[key] = None
            elif isinstance(value, dict) and within_limit:
                nested = self.flatten_object(value, depth + 1, max_depth)
                for nested_key, nested_value in nested.items():
                    result[f"{key}.{nested_key}"] = nested_value
            elif isinstance(value, list) and within_limit:
                result[key] = Serialization.compact_json(value)
            else:
                result[key] = value

        return result

    def _rows_from_list(self, items: List[Any], max_depth: Optional[int]) -> List[Row]:
        """Build one row per object element, dropping scalars and nested lists."""
        return [
            self.flatten_object(item, 0, max_depth)
            for item in items
            if isinstance(item, dict)
        ]


def collect_columns(rows: List[Row]) -> List[str]:
    """Union of row keys in first-seen order."""
    columns: Dict[str, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)


_default_flattener = Flattener()


def flatten(node: Any, max_depth: Optional[int] = None) -> List[Row]:
    """Flatten with a shared module-level Flattener."""
    return _default_flattener.flatten(node, max_depth)
