"""
Plain-text report export for analysis results.
"""

from backend_neroguard.reporting.report_text import format_timestamp, render_report

__all__ = ["format_timestamp", "render_report"]
