"""Tests for error handler."""

import json
import logging
import pytest
from json_converter.converter import JSONConverter
from json_converter.error_handler import ErrorHandler
from json_converter.types import ConversionError, ConversionOptions, ErrorType, UnsupportedFormatError


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_input('{"users": [{"name": "Alice"}]}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_invalid_json(self):
        """Test validation of invalid JSON input."""
        json_string = '{"users": {"user1": {"name": "Alice"}'  # Missing closing brace
        result = self.error_handler.validate_input(json_string)

        assert not result.is_valid
        assert len(result.errors) > 0
        assert result.errors[0].type == ErrorType.SYNTAX

    def test_validate_input_logs_warnings(self, caplog):
        """Test validation warnings are logged."""
        depth = 150
        with caplog.at_level(logging.WARNING):
            result = self.error_handler.validate_input("[" * depth + "]" * depth)

        assert result.is_valid
        assert "Deep nesting detected" in caplog.text

    def test_validate_options(self, caplog):
        """Test option validation and warning logs."""
        assert not self.error_handler.validate_options(ConversionOptions(indent=0)).is_valid

        with caplog.at_level(logging.WARNING):
            result = self.error_handler.validate_options(ConversionOptions(stream=True))

        assert result.is_valid
        assert "Streaming is not supported" in caplog.text

    def test_handle_unsupported_format(self):
        """Test handling of unsupported format errors."""
        response = self.error_handler.handle_conversion_error(UnsupportedFormatError("go"))

        assert response.can_recover
        assert "'go'" in response.suggested_action
        assert "--list-formats" in response.suggested_action

    def test_handle_syntax_error(self):
        """Test handling of JSON syntax errors."""
        with pytest.raises(json.JSONDecodeError) as exc_info:
            JSONConverter().convert('{\n  "a": }', "csv")

        response = self.error_handler.handle_conversion_error(exc_info.value)

        assert response.can_recover
        assert "line 2" in response.suggested_action

    def test_handle_recursion_error(self):
        """Test handling of nesting beyond the call stack."""
        response = self.error_handler.handle_conversion_error(RecursionError("too deep"))

        assert not response.can_recover
        assert "too deep" in response.suggested_action.lower()

    def test_handle_generic_conversion_error(self):
        """Test handling of other conversion errors."""
        error = ConversionError("Bad options", ErrorType.OPTIONS)
        response = self.error_handler.handle_conversion_error(error)

        assert not response.can_recover
        assert "options" in response.suggested_action

    def test_handle_unknown_error(self):
        """Test handling of unknown error types."""
        response = self.error_handler.handle_conversion_error(ValueError("boom"))

        assert not response.can_recover
        assert "unknown" in response.suggested_action.lower()

    def test_errors_are_logged(self, caplog):
        """Test handled errors are logged at error level."""
        with caplog.at_level(logging.ERROR):
            self.error_handler.handle_conversion_error(UnsupportedFormatError("rust"))

        assert "UnsupportedFormatError" in caplog.text
