"""Reporting module: terminal output and display formatting.

Re-exports all public functions so consumers can import directly:
    from Silent_Surge.reporting import render_scan_report
"""

from Silent_Surge.reporting.formatters import (
    format_delivery,
    format_mention_counts,
    format_r2_proximity,
    format_signed_percent,
    status_label,
)
from Silent_Surge.reporting.terminal import render_scan_report, render_settings, render_universe

__all__ = [
    # Formatters
    "format_delivery",
    "format_mention_counts",
    "format_r2_proximity",
    "format_signed_percent",
    "status_label",
    # Terminal
    "render_scan_report",
    "render_settings",
    "render_universe",
]
