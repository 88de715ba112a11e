"""
PassLens Output Module
=======================

Console display and report generation for PassLens results.
"""

from passlens.output.console import PassLensConsoleOutput
from passlens.output.report import PassLensReportGenerator

__all__ = [
    "PassLensConsoleOutput",
    "PassLensReportGenerator",
]
