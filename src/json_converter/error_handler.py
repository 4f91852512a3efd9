"""Error handling for callers of the JSON Converter."""

import json
import logging
from typing import Optional
from .types import (
    ConversionError,
    ConversionOptions,
    ErrorResponse,
    ErrorType,
    UnsupportedFormatError,
    ValidationError,
    ValidationResult
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Validation and error reporting for conversion callers.

    The converter itself raises and never prints; this class turns input
    problems and raised errors into messages and suggested actions that a
    front end such as the CLI can show to the user.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def validate_options(self, options: ConversionOptions) -> ValidationResult:
        """
        Validate conversion options.

        Args:
            options: ConversionOptions to validate

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_options(options)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_conversion_error(self, error: Exception) -> ErrorResponse:
        """
        Map an error raised by a conversion to a suggested action.

        Args:
            error: Exception raised by convert() or convert_object()

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Conversion error: {type(error).__name__} - {error}")

        if isinstance(error, UnsupportedFormatError):
            return ErrorResponse(
                can_recover=True,
                suggested_action=f"Format '{error.format}' has no generator. "
                                 "Run with --list-formats to see all options."
            )
        if isinstance(error, json.JSONDecodeError):
            return ErrorResponse(
                can_recover=True,
                suggested_action=f"Fix the JSON syntax at line {error.lineno}, "
                                 f"column {error.colno} and retry."
            )
        if isinstance(error, RecursionError):
            return ErrorResponse(
                can_recover=False,
                suggested_action="Input nesting is too deep to convert. "
                                 "Reduce nesting depth before converting."
            )
        if isinstance(error, ConversionError):
            return ErrorResponse(
                can_recover=False,
                suggested_action=f"Conversion failed ({error.error_type.value}). "
                                 "Please check logs and retry."
            )
        return ErrorResponse(
            can_recover=False,
            suggested_action="Unknown error type. Please check logs and retry."
        )
