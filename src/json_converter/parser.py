"""JSON parser producing the intermediate representation."""

import logging
from typing import Any, Dict, List, Optional
from .types import (
    IRArray,
    IRNode,
    IRObject,
    IRPath,
    IRScalar,
    IRType,
    NodeMetadata
)
from .utils.serialization import Serialization

_REQUIRED = NodeMetadata(is_required=True)


class JSONParser:
    """
    JSON parser that converts decoded JSON into typed IR nodes.

    Every node records its structural path from the root. Arrays keep a
    single sampled child, built from their first non-null element, which
    stands for the element schema of the whole array.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> IRNode:
        """
        Parse JSON text and build its IR tree.

        Args:
            json_string: JSON text to parse

        Returns:
            Root IRNode

        Raises:
            JSONSyntaxError: If the text is not well-formed JSON
        """
        data = Serialization.parse_json(json_string)
        node = self.to_ir(data)
        self.logger.debug(f"Parsed JSON with root type: {node.type.value}")
        return node

    def to_ir(self, value: Any, path: IRPath = ()) -> IRNode:
        """
        Convert a decoded JSON value to an IR node.

        Args:
            value: Decoded JSON value
            path: Path of this value from the root

        Returns:
            IRNode for the value

        Raises:
            TypeError: If value is not a JSON type
        """
        path = tuple(path)

        if value is None:
            return self._build_scalar(value, IRType.NULL, path)

        if isinstance(value, list):
            return self._build_array(value, path)

        if isinstance(value, dict):
            return self._build_object(value, path)

        # bool is checked before number because bool subclasses int
        if isinstance(value, bool):
            return self._build_scalar(value, IRType.BOOLEAN, path)

        if isinstance(value, (int, float)):
            return self._build_scalar(value, IRType.NUMBER, path)

        if isinstance(value, str):
            return self._build_scalar(value, IRType.STRING, path)

        raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")

    def _build_object(self, obj: Dict[str, Any], path: IRPath) -> IRObject:
        children = tuple(self.to_ir(value, path + (key,)) for key, value in obj.items())
        return IRObject(
            type=IRType.OBJECT,
            path=path,
            value=obj,
            children=children,
            metadata=_REQUIRED
        )

    def _build_array(self, arr: List[Any], path: IRPath) -> IRArray:
        children = ()
        sample = next((item for item in arr if item is not None), None)
        if sample is not None:
            children = (self.to_ir(sample, path + ("0",)),)

        return IRArray(
            type=IRType.ARRAY,
            path=path,
            value=arr,
            children=children,
            metadata=_REQUIRED
        )

    def _build_scalar(self, value: Any, ir_type: IRType, path: IRPath) -> IRScalar:
        return IRScalar(
            type=ir_type,
            path=path,
            value=value,
            metadata=NodeMetadata(is_required=True, example=value)
        )
