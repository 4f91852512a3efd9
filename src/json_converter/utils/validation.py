"""Validation utilities for conversion input and options."""

import json
from typing import Any, List, Tuple
from ..types import ConversionOptions, ErrorType, ValidationError, ValidationResult
from .serialization import Serialization

# Nesting beyond this only produces a warning; generators recurse once per level.
DEPTH_WARNING_THRESHOLD = 100


class ValidationUtils:
    """Utility class for validating conversion input before it reaches the core."""

    @staticmethod
    def validate_json_string(json_string: str,
                             depth_warning: int = DEPTH_WARNING_THRESHOLD) -> ValidationResult:
        """
        Validate JSON string syntax and nesting.

        Args:
            json_string: JSON string to validate
            depth_warning: Nesting depth above which a warning is reported

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = Serialization.parse_json(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="JSON nesting is too deep to decode",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        structure_errors, structure_warnings = ValidationUtils._validate_json_structure(
            data, depth_warning)
        errors.extend(structure_errors)
        warnings.extend(structure_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _validate_json_structure(data: Any,
                                 depth_warning: int) -> Tuple[List[ValidationError], List[str]]:
        """Check the nesting depth of decoded JSON."""
        errors = []
        warnings = []

        try:
            max_depth = ValidationUtils.calculate_max_depth(data)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="JSON nesting is too deep to convert",
                location="input"
            ))
            return errors, warnings

        if max_depth > depth_warning:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). "
                            "Conversion may exhaust the call stack.")

        return errors, warnings

    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        max_child_depth = current_depth
        values = data.values() if isinstance(data, dict) else data
        for value in values:
            child_depth = ValidationUtils.calculate_max_depth(value, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

    @staticmethod
    def validate_options(options: ConversionOptions) -> ValidationResult:
        """
        Validate conversion options.

        Args:
            options: ConversionOptions to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if isinstance(options.indent, bool) or not isinstance(options.indent, int):
            errors.append(ValidationError(
                type=ErrorType.OPTIONS,
                message="Indent must be an integer",
                location="indent"
            ))
        elif options.indent <= 0:
            errors.append(ValidationError(
                type=ErrorType.OPTIONS,
                message="Indent must be positive",
                location="indent"
            ))
        elif options.indent > 8:
            warnings.append(f"Indent of {options.indent} spaces is unusually wide.")

        if not options.table_name:
            errors.append(ValidationError(
                type=ErrorType.OPTIONS,
                message="Table name cannot be empty",
                location="table_name"
            ))

        if options.root_name is not None and not options.root_name.strip():
            errors.append(ValidationError(
                type=ErrorType.OPTIONS,
                message="Root name cannot be blank",
                location="root_name"
            ))

        if options.stream:
            warnings.append("Streaming is not supported; input is converted in memory.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
