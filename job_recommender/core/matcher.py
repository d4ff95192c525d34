"""
Job Scorer - Scoring function used to rank jobs for a user.

Combines four sub-scores, each on a 0-100 scale:
- Skill match: share of required skills the user has, plus their proficiency
- Distance: exponential decay up to the user's maximum travel distance
- Salary: linear position between a fixed floor and ceiling
- Experience fit: age-based experience estimate against the job's level

The weighted sum is the overall score, also 0-100.
"""

import math

from .models import Job, User


class JobScorer:
    """Scores jobs for a single user."""

    # Weights for overall score calculation
    WEIGHTS = {
        "skill_match": 0.4,
        "distance": 0.3,
        "salary": 0.2,
        "experience": 0.1,
    }

    NEUTRAL_SKILL_SCORE = 50.0

    SALARY_FLOOR = 20000
    SALARY_CEILING = 200000

    def __init__(self, user: User):
        self.user = user

    def score(self, job: Job, distance: float) -> float:
        """Calculate the overall score (0-100) of a job at the given distance in km."""
        return (
            self._calculate_skill_match(job) * self.WEIGHTS["skill_match"] +
            self._calculate_distance_score(distance) * self.WEIGHTS["distance"] +
            self._calculate_salary_score(job.salary) * self.WEIGHTS["salary"] +
            self._calculate_experience_score(job.experience_level) * self.WEIGHTS["experience"]
        )

    def _calculate_skill_match(self, job: Job) -> float:
        """Calculate skill match score (0-100)."""
        if not job.required_skills:
            return self.NEUTRAL_SKILL_SCORE

        matched = job.required_skills & self.user.skill_set
        if not matched:
            return 0.0

        match_fraction = len(matched) / len(job.required_skills)
        avg_proficiency = sum(self.user.skill_proficiency(s) for s in matched) / len(matched)

        # Proficiency tops out at 10, so this peaks at 100
        return match_fraction * 70 + avg_proficiency * 3

    def _calculate_distance_score(self, distance: float) -> float:
        """Calculate distance score (0-100)."""
        if distance <= 0:
            return 100.0

        max_distance = self.user.max_distance
        if distance > max_distance:
            return 0.0

        return 100.0 * math.exp(-distance / (max_distance / 3))

    def _calculate_salary_score(self, salary: float) -> float:
        """Calculate salary score (0-100)."""
        if salary <= self.SALARY_FLOOR:
            return 0.0
        if salary >= self.SALARY_CEILING:
            return 100.0
        return (salary - self.SALARY_FLOOR) / (self.SALARY_CEILING - self.SALARY_FLOOR) * 100

    def _calculate_experience_score(self, job_level: int) -> float:
        """Calculate experience fit score (0-100)."""
        estimated_experience = self.estimated_experience_level
        difference = abs(job_level - estimated_experience)

        if difference == 0:
            return 100.0
        elif difference == 1:
            return 80.0
        elif difference == 2:
            return 60.0
        else:
            return max(0.0, 40.0 - (difference - 2) * 10)

    @property
    def estimated_experience_level(self) -> int:
        """Rough experience estimate: one level per five years past 18."""
        return max(0, (self.user.age - 18) // 5)

    def breakdown(self, job: Job, distance: float) -> dict:
        """Get the individual sub-scores behind a job's overall score."""
        return {
            "skill_match": self._calculate_skill_match(job),
            "distance": self._calculate_distance_score(distance),
            "salary": self._calculate_salary_score(job.salary),
            "experience": self._calculate_experience_score(job.experience_level),
            "overall": self.score(job, distance),
        }


def calculate_job_score(job: Job, user: User, distance: float) -> float:
    """Score a job (0-100) for a user at the given distance in km."""
    return JobScorer(user).score(job, distance)
