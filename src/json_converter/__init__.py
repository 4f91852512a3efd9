"""
JSON Converter - Convert JSON to CSV, SQL, YAML, XML, TOML, TypeScript and JSON Lines.

JSON text is parsed once into a typed intermediate representation and
rendered by the generator registered for the requested format.
"""

from .converter import JSONConverter, converter
from .flattener import Flattener, flatten
from .parser import JSONParser
from .registry import GeneratorRegistry, default_generators
from .generators import (
    CSVGenerator,
    JSONLGenerator,
    SQLGenerator,
    TOMLGenerator,
    TypeScriptGenerator,
    XMLGenerator,
    YAMLGenerator
)
from .types import (
    ConversionError,
    ConversionOptions,
    Format,
    FormatGenerator,
    IRArray,
    IRNode,
    IRObject,
    IRScalar,
    IRType,
    JSONSyntaxError,
    NodeMetadata,
    ParseError,
    UnsupportedFormatError
)

__version__ = "1.0.0"

convert = converter.convert
convert_object = converter.convert_object
get_supported_formats = converter.get_supported_formats
get_format_description = converter.get_format_description
is_format_supported = converter.is_format_supported
register_generator = converter.register_generator

__all__ = [
    "JSONConverter",
    "converter",
    "convert",
    "convert_object",
    "get_supported_formats",
    "get_format_description",
    "is_format_supported",
    "register_generator",
    "JSONParser",
    "Flattener",
    "flatten",
    "GeneratorRegistry",
    "default_generators",
    "CSVGenerator",
    "SQLGenerator",
    "YAMLGenerator",
    "XMLGenerator",
    "TOMLGenerator",
    "TypeScriptGenerator",
    "JSONLGenerator",
    "ConversionOptions",
    "Format",
    "FormatGenerator",
    "IRNode",
    "IRScalar",
    "IRObject",
    "IRArray",
    "IRType",
    "NodeMetadata",
    "ConversionError",
    "UnsupportedFormatError",
    "JSONSyntaxError",
    "ParseError",
]
