"""
==============================================================================
Utilities Package
==============================================================================

Utility classes for the console shell.

Modules:
--------
- validators: Numeric input validation
- report_formatter: Report text rendering

==============================================================================
"""

from .validators import IntegerInputValidator, PriceInputValidator
from .report_formatter import ReportFormatter

__all__ = [
    "IntegerInputValidator",
    "PriceInputValidator",
    "ReportFormatter",
]
