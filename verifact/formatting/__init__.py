"""Formatting of model answers and reports into displayable structure."""

from verifact.formatting.response_formatter import format_response, render_blocks
from verifact.formatting.report_renderer import (
    REPORT_TABS,
    render_report,
    select_tab,
)

__all__ = [
    "format_response",
    "render_blocks",
    "REPORT_TABS",
    "render_report",
    "select_tab",
]
