"""
jsscan Report Package

Trace formatting for scan events and the structured JSON report.
"""

from .reporter import Reporter, ScanReport, ReportWriteError
from .trace import TraceSink, NullSink, format_token, format_warning

__all__ = [
    "Reporter", "ScanReport", "ReportWriteError",
    "TraceSink", "NullSink", "format_token", "format_warning",
]
