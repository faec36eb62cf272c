"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_engine import (
    DiffEngine,
    DiffInputTooLargeError,
    compare_texts,
    normalize_line,
    read_lines,
    split_lines,
    summarize,
)
from .diff_exporter import DiffFormatError, export_unified_text, parse_unified_text
from .diff_renderer import build_side_by_side
from .sample_texts import get_sample_texts

__all__ = [
    "ConfigManager",
    "DiffEngine",
    "DiffInputTooLargeError",
    "compare_texts",
    "normalize_line",
    "read_lines",
    "split_lines",
    "summarize",
    "DiffFormatError",
    "export_unified_text",
    "parse_unified_text",
    "build_side_by_side",
    "get_sample_texts",
]
