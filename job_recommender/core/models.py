"""
Core data models for the job recommendation engine.
"""

from dataclasses import dataclass, field
from typing import Optional
import math


EARTH_RADIUS_KM = 6371.0

MIN_PROFICIENCY = 1
MAX_PROFICIENCY = 10

MIN_EXPERIENCE_LEVEL = 1
MAX_EXPERIENCE_LEVEL = 5

DEFAULT_MAX_DISTANCE_KM = 50.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two coordinate pairs."""
    lat_distance = math.radians(lat2 - lat1)
    lon_distance = math.radians(lon2 - lon1)

    a = (math.sin(lat_distance / 2) ** 2
         + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
         * math.sin(lon_distance / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def clamp_proficiency(proficiency: int) -> int:
    return min(MAX_PROFICIENCY, max(MIN_PROFICIENCY, int(proficiency)))


@dataclass(eq=False)
class Job:
    """Represents a job posting."""
    id: str
    title: str
    company: str = ""
    location: str = ""
    salary: float = 0.0
    required_skills: set[str] = field(default_factory=set)
    description: str = ""
    job_type: str = "full-time"  # full-time, part-time, contract
    latitude: float = 0.0
    longitude: float = 0.0
    experience_level: int = 1  # 1 (entry) to 5 (senior)
    benefits: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.salary = max(0.0, float(self.salary))
        self.experience_level = min(
            MAX_EXPERIENCE_LEVEL, max(MIN_EXPERIENCE_LEVEL, int(self.experience_level))
        )
        self.required_skills = {skill.lower() for skill in self.required_skills}

        benefits = self.benefits
        self.benefits = []
        for benefit in benefits:
            self.add_benefit(benefit)

    def add_required_skill(self, skill: str) -> None:
        self.required_skills.add(skill.lower())

    def requires_skill(self, skill: str) -> bool:
        return skill.lower() in self.required_skills

    def add_benefit(self, benefit: str) -> None:
        if benefit not in self.benefits:
            self.benefits.append(benefit)

    @property
    def has_coordinates(self) -> bool:
        """False only for the (0, 0) pair, which means the position is unset."""
        return self.latitude != 0.0 or self.longitude != 0.0

    def distance_to(self, latitude: float, longitude: float) -> float:
        return haversine_km(self.latitude, self.longitude, latitude, longitude)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "salary": self.salary,
            "required_skills": sorted(self.required_skills),
            "description": self.description,
            "job_type": self.job_type,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "experience_level": self.experience_level,
            "benefits": self.benefits,
        }


@dataclass(eq=False)
class User:
    """A job seeker and the skills they bring."""
    id: str
    name: str = ""
    age: int = 18
    education: str = ""
    location: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    skills: dict[str, int] = field(default_factory=dict)  # skill -> proficiency (1-10)
    preferences: list[str] = field(default_factory=list)
    max_distance: float = DEFAULT_MAX_DISTANCE_KM

    def __post_init__(self):
        self.skills = {
            name.lower(): clamp_proficiency(level) for name, level in self.skills.items()
        }
        self.max_distance = max(0.0, float(self.max_distance))

        preferences = self.preferences
        self.preferences = []
        for preference in preferences:
            self.add_preference(preference)

    def add_skill(self, skill: str, proficiency: int) -> None:
        self.skills[skill.lower()] = clamp_proficiency(proficiency)

    def skill_proficiency(self, skill: str) -> int:
        return self.skills.get(skill.lower(), 0)

    @property
    def skill_set(self) -> set[str]:
        return set(self.skills)

    def add_preference(self, preference: str) -> None:
        if preference not in self.preferences:
            self.preferences.append(preference)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "education": self.education,
            "location": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "skills": dict(self.skills),
            "preferences": self.preferences,
            "max_distance": self.max_distance,
        }


@dataclass(frozen=True)
class JobRecommendation:
    """A ranked job together with its score (0-100) and distance in km."""
    job: Job
    score: float
    distance: float

    def to_dict(self) -> dict:
        return {
            "job": self.job.to_dict(),
            "score": round(self.score, 2),
            "distance": self.distance,
        }


@dataclass(frozen=True)
class CareerPathStep:
    """A skill gap towards a target job and the entry-level jobs that teach it."""
    target_job: Job
    training_steps: int
    description: str
    skill: Optional[str] = None
    training_jobs: tuple[Job, ...] = ()

    def to_dict(self) -> dict:
        return {
            "target_job": self.target_job.title,
            "training_steps": self.training_steps,
            "description": self.description,
            "skill": self.skill,
            "training_jobs": [job.title for job in self.training_jobs],
        }


@dataclass(frozen=True)
class SystemStats:
    job_count: int = 0
    user_count: int = 0
    unique_title_count: int = 0
    unique_skill_count: int = 0
    location_count: int = 0

    def to_dict(self) -> dict:
        return {
            "job_count": self.job_count,
            "user_count": self.user_count,
            "unique_title_count": self.unique_title_count,
            "unique_skill_count": self.unique_skill_count,
            "location_count": self.location_count,
        }
