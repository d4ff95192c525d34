"""
Sample data for demonstrations and tests.
"""

from .sample_data import (
    load_sample_data,
    SAMPLE_USER_IDS,
    SAMPLE_JOB_TITLES,
    SAMPLE_SKILLS,
    SAMPLE_LOCATIONS,
)

__all__ = [
    "load_sample_data",
    "SAMPLE_USER_IDS",
    "SAMPLE_JOB_TITLES",
    "SAMPLE_SKILLS",
    "SAMPLE_LOCATIONS",
]
