"""Report rendering for scan results."""

from .json_report import build_json_report, write_json_report
from .table import (
    GLYPHS,
    UNREACHABLE_MARK,
    build_details,
    build_results_table,
    build_row,
    glyph_for,
)

__all__ = [
    "GLYPHS",
    "UNREACHABLE_MARK",
    "build_details",
    "build_json_report",
    "build_results_table",
    "build_row",
    "glyph_for",
    "write_json_report",
]
