"""
Presentation of pricing runs (console, text file, CSV).
"""

from mc_option_pricing.reporting.output import RunReporter, file_suffix, record_to_dict

__all__ = [
    "RunReporter",
    "file_suffix",
    "record_to_dict",
]
