"""
Utility modules for the job recommender application.
"""

from .config import Config, merge_settings, flatten_settings, parse_value

__all__ = [
    "Config",
    "merge_settings",
    "flatten_settings",
    "parse_value",
]
