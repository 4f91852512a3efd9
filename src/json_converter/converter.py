"""Main JSON Converter implementation."""

import dataclasses
import json
import logging
from typing import Any, List, Optional
from .parser import JSONParser
from .registry import GeneratorRegistry, default_generators
from .types import (
    ConversionOptions,
    FormatGenerator,
    FormatId,
    UnsupportedFormatError,
    format_key
)

UNKNOWN_FORMAT_DESCRIPTION = "Unknown format"


class JSONConverter:
    """
    Dispatcher from JSON text to a registered output format.

    Each conversion parses the input once into IR, looks up the generator
    for the requested format and renders. Instances hold no per-call
    state, so one converter may serve concurrent callers.
    """

    def __init__(self, registry: Optional[GeneratorRegistry] = None,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            registry: Generator registry (defaults to the shipped generators)
            parser: Optional JSONParser instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        if registry is None:
            registry = GeneratorRegistry(default_generators(), self.logger)
        self.registry = registry
        self.parser = parser or JSONParser(self.logger)

    def register_generator(self, generator: FormatGenerator) -> None:
        """Register a custom generator; the last registration for a name wins."""
        self.registry.register(generator)

    def get_supported_formats(self) -> List[str]:
        return self.registry.names()

    def get_format_description(self, format_id: FormatId) -> str:
        generator = self.registry.get(format_id)
        if generator is None or not generator.description:
            return UNKNOWN_FORMAT_DESCRIPTION
        return generator.description

    def is_format_supported(self, format_id: FormatId) -> bool:
        return format_id in self.registry

    def convert(self, json_string: str, format_id: FormatId,
                options: Optional[ConversionOptions] = None) -> str:
        """
        Convert JSON text to the requested format.

        Args:
            json_string: JSON text to convert
            format_id: Target format name or Format member
            options: Optional ConversionOptions; ``format`` is filled in

        Returns:
            Rendered output text

        Raises:
            UnsupportedFormatError: If no generator is registered for the format
            JSONSyntaxError: If the input is not well-formed JSON
        """
        key = format_key(format_id)
        generator = self.registry.get(key)
        if generator is None:
            raise UnsupportedFormatError(key)

        ir = self.parser.parse(json_string)
        full_options = dataclasses.replace(options or ConversionOptions(), format=key)

        output = generator.generate(ir, full_options)
        self.logger.info(f"Converted {len(json_string)} characters of JSON to {key} "
                         f"({len(output)} characters)")
        return output

    def convert_object(self, value: Any, format_id: FormatId,
                       options: Optional[ConversionOptions] = None) -> str:
        """
        Convert an already-decoded value by serializing it and calling convert().

        Raises:
            TypeError: If the value is not JSON serializable
            ValueError: If the value holds NaN or infinite floats
        """
        json_string = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
        return self.convert(json_string, format_id, options)


# Shared default instance
converter = JSONConverter()
