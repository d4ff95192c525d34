"""
Engine Store - Saves engine state to JSON and rebuilds it by replaying registrations.
"""

from pathlib import Path
from typing import Optional
import json
import logging

from job_recommender.core.engine import RecommendationEngine
from job_recommender.core.models import Job, User


class StoreError(Exception):
    """Raised when a store file cannot be read or parsed."""


class EngineStore:
    """Persists jobs, users, locations and roads in a single JSON file."""

    FORMAT_VERSION = 1

    def __init__(self, path: str = "./engine_data.json"):
        """
        Initialize the store.

        Args:
            path: JSON file holding the engine state
        """
        self.path = Path(path)
        self.logger = logging.getLogger(self.__class__.__name__)

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, engine: RecommendationEngine) -> Path:
        """
        Write the engine state to disk.

        Locations are written in registration order so the first-registered
        coordinates survive a reload.

        Returns:
            Path of the written file
        """
        graph = engine.location_graph
        data = {
            "version": self.FORMAT_VERSION,
            "locations": [
                {"name": loc.name, "latitude": loc.latitude, "longitude": loc.longitude}
                for loc in graph.locations
            ],
            "users": [user.to_dict() for user in engine.users],
            "jobs": [job.to_dict() for job in engine.jobs],
            "roads": [
                {"start": road.start, "end": road.end, "distance": road.distance}
                for road in graph.roads
            ],
        }

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

        self.logger.info(
            f"Saved {len(data['jobs'])} jobs, {len(data['users'])} users and "
            f"{len(data['roads'])} roads to {self.path}"
        )
        return self.path

    def load(self, engine: Optional[RecommendationEngine] = None) -> RecommendationEngine:
        """
        Rebuild an engine from disk.

        A missing file yields an empty engine.

        Args:
            engine: Engine to register into (a new one if omitted)

        Returns:
            The populated engine

        Raises:
            StoreError: if the file is not valid store JSON
        """
        engine = engine if engine is not None else RecommendationEngine()

        if not self.path.exists():
            self.logger.info(f"No store at {self.path}, starting empty")
            return engine

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Cannot read store {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Cannot read store {self.path}: expected a JSON object")

        try:
            graph = engine.location_graph
            for loc in data.get("locations", []):
                graph.add_location(loc["name"], loc.get("latitude", 0.0), loc.get("longitude", 0.0))

            for user_data in data.get("users", []):
                engine.register_user(self._dict_to_user(user_data))

            for job_data in data.get("jobs", []):
                engine.register_job(self._dict_to_job(job_data))

            for road in data.get("roads", []):
                engine.add_road(road["start"], road["end"], road["distance"])
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Invalid record in store {self.path}: {e}") from e

        stats = engine.get_stats()
        self.logger.info(f"Loaded {stats.job_count} jobs and {stats.user_count} users from {self.path}")
        return engine

    def _dict_to_job(self, data: dict) -> Job:
        """Convert a dictionary to a Job object."""
        return Job(
            id=data["id"],
            title=data.get("title", ""),
            company=data.get("company", ""),
            location=data.get("location", ""),
            salary=data.get("salary", 0.0),
            required_skills=set(data.get("required_skills", [])),
            description=data.get("description", ""),
            job_type=data.get("job_type", "full-time"),
            latitude=data.get("latitude", 0.0),
            longitude=data.get("longitude", 0.0),
            experience_level=data.get("experience_level", 1),
            benefits=data.get("benefits", []),
        )

    def _dict_to_user(self, data: dict) -> User:
        """Convert a dictionary to a User object."""
        return User(
            id=data["id"],
            name=data.get("name", ""),
            age=data.get("age", 18),
            education=data.get("education", ""),
            location=data.get("location", ""),
            latitude=data.get("latitude", 0.0),
            longitude=data.get("longitude", 0.0),
            skills=data.get("skills", {}),
            preferences=data.get("preferences", []),
            max_distance=data.get("max_distance", 50.0),
        )
