"""Report formatters."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter

__all__ = ["BaseFormatter", "JsonFormatter", "TextFormatter"]
