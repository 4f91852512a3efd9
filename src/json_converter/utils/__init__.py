"""Utility functions for the JSON Converter."""

from .serialization import Serialization
from .validation import ValidationUtils

__all__ = ["Serialization", "ValidationUtils"]
