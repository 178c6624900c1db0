"""
Input acquisition.
"""

from mc_option_pricing.io.input import parameters_from_mapping

__all__ = ["parameters_from_mapping"]
