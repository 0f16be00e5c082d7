"""
Reporters package - output formatting for connection checks.

Provides multiple output formats:
- Console: Rich terminal output with colors and formatting
- JSON: Machine-readable records for monitoring jobs
"""

from dbfactory.reporters.console import ConsoleReporter, print_report
from dbfactory.reporters.json_report import JSONReporter, save_report


__all__ = [
    'ConsoleReporter',
    'print_report',
    'JSONReporter',
    'save_report',
]
