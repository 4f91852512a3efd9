"""Core type definitions for the JSON Converter."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Tuple, Union


class IRType(Enum):
    """Enumeration of JSON value kinds carried by IR nodes."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


SCALAR_TYPES = frozenset({IRType.STRING, IRType.NUMBER, IRType.BOOLEAN, IRType.NULL})


class Format(Enum):
    """Enumeration of output format identifiers."""
    CSV = "csv"
    SQL = "sql"
    XML = "xml"
    YAML = "yaml"
    TOML = "toml"
    TYPESCRIPT = "typescript"
    JSONL = "jsonl"
    # Reserved identifiers without a shipped generator
    GO = "go"
    RUST = "rust"
    JAVA = "java"
    CSHARP = "csharp"
    PYTHON = "python"
    GRAPHQL = "graphql"
    PROTOBUF = "protobuf"
    AVRO = "avro"


FormatId = Union[Format, str]


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    FORMAT = "format"
    OPTIONS = "options"


IRPath = Tuple[str, ...]


@dataclass(frozen=True)
class NodeMetadata:
    """Lightweight metadata attached to every IR node."""
    is_required: bool = False
    example: Any = None
    description: Optional[str] = None


@dataclass(frozen=True)
class IRNode:
    """
    Base class of the intermediate representation.

    ``value`` is the original decoded JSON value and is never mutated.
    ``path`` is the sequence of keys (and ``"0"`` placeholders for array
    elements) leading from the root to this node.
    """
    type: IRType
    path: IRPath
    value: Any
    children: Tuple["IRNode", ...] = ()
    metadata: NodeMetadata = field(default_factory=NodeMetadata)

    allowed_types: ClassVar[FrozenSet[IRType]] = frozenset(IRType)

    def __post_init__(self):
        if self.type not in self.allowed_types:
            raise ValueError(f"{type(self).__name__} cannot carry type {self.type}")

    @property
    def name(self) -> Optional[str]:
        """Last path segment, or None for the root."""
        return self.path[-1] if self.path else None

    @property
    def is_scalar(self) -> bool:
        return self.type in SCALAR_TYPES


@dataclass(frozen=True)
class IRScalar(IRNode):
    """String, number, boolean or null leaf."""

    allowed_types: ClassVar[FrozenSet[IRType]] = SCALAR_TYPES


@dataclass(frozen=True)
class IRObject(IRNode):
    """Mapping node with one child per key, in key order."""

    allowed_types: ClassVar[FrozenSet[IRType]] = frozenset({IRType.OBJECT})


@dataclass(frozen=True)
class IRArray(IRNode):
    """Sequence node with at most one sampled child describing its elements."""

    allowed_types: ClassVar[FrozenSet[IRType]] = frozenset({IRType.ARRAY})

    @property
    def element(self) -> Optional[IRNode]:
        """Inferred element schema, or None for empty and all-null arrays."""
        return self.children[0] if self.children else None


@dataclass
class ConversionOptions:
    """Options accepted by every generator."""
    format: Optional[FormatId] = None
    indent: int = 2
    table_name: str = "data"
    root_name: Optional[str] = None
    pretty: bool = False
    stream: bool = False
    input: Optional[str] = None
    output: Optional[str] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class UnsupportedFormatError(ConversionError):
    """Raised when no generator is registered for a format id."""

    def __init__(self, format_id: str):
        super().__init__(f"Unsupported format: {format_id}", ErrorType.FORMAT,
                         context={"format": format_id})
        self.format = format_id


# Malformed input surfaces as the decoder's own exception.
JSONSyntaxError = json.JSONDecodeError
ParseError = JSONSyntaxError


def format_key(format_id: FormatId) -> str:
    """Normalize a Format member or string to its registry key."""
    if isinstance(format_id, Format):
        return format_id.value
    return str(format_id)


class FormatGenerator(ABC):
    """
    Abstract interface for output format generators.

    Subclasses set ``name`` and ``description`` and implement ``generate``.
    Generators must not raise for any IR built from valid JSON.
    """

    name: str = ""
    description: str = ""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        """Render an IR tree to text."""
        pass
