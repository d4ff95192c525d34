"""Core data structures and the recommendation engine."""

from .models import (
    Job,
    User,
    JobRecommendation,
    CareerPathStep,
    SystemStats,
    haversine_km,
)
from .prefix_index import PrefixIndex
from .location_graph import LocationGraph, UnknownLocation, UNREACHABLE
from .ranker import ScoredRanker
from .matcher import JobScorer, calculate_job_score
from .engine import RecommendationEngine

__all__ = [
    "Job",
    "User",
    "JobRecommendation",
    "CareerPathStep",
    "SystemStats",
    "haversine_km",
    "PrefixIndex",
    "LocationGraph",
    "UnknownLocation",
    "UNREACHABLE",
    "ScoredRanker",
    "JobScorer",
    "calculate_job_score",
    "RecommendationEngine",
]
