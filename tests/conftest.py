"""
Test configuration for Job Recommender.

Shared engine and entity fixtures.
"""

import pytest

from job_recommender.core import Job, RecommendationEngine, User
from job_recommender.data import load_sample_data


@pytest.fixture
def engine():
    """Engine seeded with the sample users, jobs and roads."""
    return load_sample_data(RecommendationEngine())


@pytest.fixture
def empty_engine():
    return RecommendationEngine()


@pytest.fixture
def tech_user():
    """User with tech skills and no coordinates."""
    user = User(id="TEST001", name="Tech User", age=25, education="Graduate", location="City C")
    user.add_skill("java", 8)
    user.add_skill("python", 7)
    user.add_skill("database", 6)
    return user


@pytest.fixture
def java_developer():
    return Job(
        id="JD",
        title="Java Developer",
        company="Tech Solutions",
        location="City C",
        salary=45000,
        required_skills={"java", "database", "english"},
        experience_level=3,
    )


@pytest.fixture
def farm_worker():
    return Job(
        id="FW",
        title="Farm Worker",
        company="Green Farms Ltd",
        location="Village A",
        salary=18000,
        required_skills={"farming"},
        experience_level=1,
    )
