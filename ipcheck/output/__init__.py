"""
Output modules for IPCheck
"""

from .console import ConsoleOutput
from .json_export import JsonExporter
from .report import build_lines, format_report

__all__ = ['ConsoleOutput', 'JsonExporter', 'build_lines', 'format_report']
