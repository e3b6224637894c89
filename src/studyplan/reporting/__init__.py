"""Reporting utilities."""

from .reports import build_error_report, build_error_report_with_validation, build_success_report
from .timetable import render_timetable

__all__ = ["build_error_report", "build_error_report_with_validation", "build_success_report", "render_timetable"]
