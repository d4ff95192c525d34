"""
Recommendation Engine - Ties the prefix indexes, location graph and ranker
together over the registered jobs and users.

Registration fans out to:
- a title index and a skill index (PrefixIndex)
- the location graph (first registration of a location name fixes its coordinates)

Queries read the current in-memory state only. Unknown user ids and
unknown titles produce empty results rather than errors.

Indexes hold what was registered: changing a job's title or skills after
registration, or registering the same id again, does not update or purge
earlier index entries.
"""

from typing import Iterable, Optional
import logging

from .location_graph import LocationGraph, UNREACHABLE
from .matcher import JobScorer
from .models import CareerPathStep, Job, JobRecommendation, SystemStats, User
from .prefix_index import PrefixIndex
from .ranker import ScoredRanker


DEFAULT_FALLBACK_DISTANCE_KM = 50.0

TRAINING_MAX_EXPERIENCE_LEVEL = 2


class RecommendationEngine:
    """In-memory job recommendation engine."""

    def __init__(self):
        self._jobs: dict[str, Job] = {}
        self._users: dict[str, User] = {}
        self._title_index = PrefixIndex()
        self._skill_index = PrefixIndex()
        self._location_graph = LocationGraph()
        self.logger = logging.getLogger(self.__class__.__name__)

    # Registration

    def register_job(self, job: Job) -> None:
        """
        Add a job and index its title, skills and location.

        Time Complexity: O(m + s) for title length m and s skill characters
        """
        if job.id in self._jobs:
            self.logger.debug(f"Re-registering job {job.id}; earlier index entries are kept")

        self._jobs[job.id] = job
        self._title_index.insert(job.title)
        for skill in job.required_skills:
            self._skill_index.insert(skill)

        if job.location:
            self._location_graph.add_location(job.location, job.latitude, job.longitude)
        self.logger.debug(f"Registered job {job.id}: {job.title} at {job.company}")

    def register_user(self, user: User) -> None:
        """Add a user and their home location."""
        if user.id in self._users:
            self.logger.debug(f"Re-registering user {user.id}")

        self._users[user.id] = user
        if user.location:
            self._location_graph.add_location(user.location, user.latitude, user.longitude)
        self.logger.debug(f"Registered user {user.id}: {user.name}")

    def register_all(self, jobs: Iterable[Job] = (), users: Iterable[User] = ()) -> None:
        for user in users:
            self.register_user(user)
        for job in jobs:
            self.register_job(job)

    def add_road(self, start: str, end: str, distance: float) -> None:
        """Connect two registered locations. Raises UnknownLocation otherwise."""
        self._location_graph.add_road(start, end, distance)

    # Lookup

    def get_job(self, job_id: str) -> Optional[Job]:
        return self._jobs.get(job_id)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs.values())

    @property
    def users(self) -> list[User]:
        return list(self._users.values())

    @property
    def location_graph(self) -> LocationGraph:
        return self._location_graph

    # Queries

    def recommend(self, user_id: str, limit: int = 5) -> list[JobRecommendation]:
        """
        Rank every job for a user.

        Time Complexity: O(n log n) for n jobs

        Args:
            user_id: Registered user id
            limit: Maximum number of recommendations (negative means none)

        Returns:
            Recommendations sorted by score, highest first; empty for unknown users
        """
        user = self._users.get(user_id)
        if user is None:
            self.logger.debug(f"No recommendations: unknown user {user_id}")
            return []

        return self._rank(user, self._with_distances(user, self._jobs.values()), limit)

    def search_by_title(self, prefix: str) -> list[Job]:
        """Jobs whose title starts with prefix (case-insensitive). Empty prefix matches nothing."""
        matching_titles = set(self._title_index.words_with_prefix(prefix))
        if not matching_titles:
            return []

        return [job for job in self._jobs.values() if job.title in matching_titles]

    def search_by_skill(self, prefix: str) -> list[Job]:
        """Jobs requiring any skill that starts with prefix, each job at most once."""
        matching_skills = self._skill_index.words_with_prefix(prefix)
        if not matching_skills:
            return []

        return [
            job for job in self._jobs.values()
            if any(job.requires_skill(skill) for skill in matching_skills)
        ]

    def find_near_location(self, location: str, max_distance: float) -> list[Job]:
        """
        Jobs located within max_distance km of a location by road.

        Time Complexity: O(V + E) for the graph search plus O(n) over jobs
        """
        nearby = set(self._location_graph.nearby_within(location, max(0.0, max_distance)))
        return [job for job in self._jobs.values() if job.location in nearby]

    def personalized_recommend(
        self,
        user_id: str,
        min_salary: float,
        max_distance: float,
        preferred_skills: Optional[list[str]] = None,
        limit: int = 5,
    ) -> list[JobRecommendation]:
        """
        Rank jobs for a user after filtering on salary and distance.

        Args:
            user_id: Registered user id
            min_salary: Jobs paying less are dropped
            max_distance: Jobs further away (km) are dropped
            preferred_skills: Jobs requiring more of these are queued first; this
                only settles the order among equal scores
            limit: Maximum number of recommendations

        Returns:
            Recommendations sorted by score, highest first; empty for unknown users
        """
        user = self._users.get(user_id)
        if user is None:
            self.logger.debug(f"No personalized recommendations: unknown user {user_id}")
            return []

        max_distance = max(0.0, max_distance)
        well_paid = [job for job in self._jobs.values() if job.salary >= min_salary]
        candidates = [
            (job, distance) for job, distance in self._with_distances(user, well_paid)
            if distance <= max_distance
        ]

        if preferred_skills:
            candidates.sort(
                key=lambda pair: sum(1 for skill in preferred_skills if pair[0].requires_skill(skill)),
                reverse=True,
            )

        return self._rank(user, candidates, limit)

    def suggest_career_paths(self, user_id: str, target_job_title: str) -> list[CareerPathStep]:
        """
        Analyze the skill gap between a user and a target job.

        The first job whose title equals target_job_title (ignoring case) is the
        target. For every missing skill that entry-level jobs (experience level
        2 or lower) require, one step names the skill and counts those jobs.
        Missing skills with no such jobs are left out.

        Returns:
            A single zero-step "Direct application possible" entry when nothing is
            missing, otherwise one entry per trainable missing skill
        """
        user = self._users.get(user_id)
        if user is None:
            self.logger.debug(f"No career paths: unknown user {user_id}")
            return []

        target_lower = target_job_title.lower()
        target_job = next(
            (job for job in self._jobs.values() if job.title.lower() == target_lower),
            None,
        )
        if target_job is None:
            self.logger.debug(f"No career paths: no job titled {target_job_title!r}")
            return []

        missing_skills = target_job.required_skills - user.skill_set
        if not missing_skills:
            return [CareerPathStep(target_job, 0, "Direct application possible")]

        paths = []
        for skill in sorted(missing_skills):
            training_jobs = self._find_training_jobs(skill)
            if training_jobs:
                paths.append(CareerPathStep(
                    target_job=target_job,
                    training_steps=len(training_jobs),
                    description=f"Training needed for: {skill}",
                    skill=skill,
                    training_jobs=tuple(training_jobs),
                ))

        return paths

    def suggest_titles(self, prefix: str) -> list[str]:
        return sorted(self._title_index.words_with_prefix(prefix))

    def suggest_skills(self, prefix: str) -> list[str]:
        return sorted(self._skill_index.words_with_prefix(prefix))

    def shortest_route(self, start: str, end: str) -> tuple[list[str], float]:
        """Shortest road route between two locations and its length in km."""
        path = self._location_graph.shortest_path(start, end)
        if not path:
            return [], UNREACHABLE
        return path, self._location_graph.path_distance(path)

    def distance_of(self, user: User, job: Job) -> float:
        """
        Distance in km between a user and a job.

        Uses, in order: straight-line distance when the job has coordinates,
        road distance when both locations are in the graph, then 0 for the
        same location name or a fixed 50 km otherwise.
        """
        road_distances = {} if job.has_coordinates else self._road_distances(user)
        return self._distance(user, job, road_distances)

    def get_stats(self) -> SystemStats:
        return SystemStats(
            job_count=len(self._jobs),
            user_count=len(self._users),
            unique_title_count=self._title_index.size(),
            unique_skill_count=self._skill_index.size(),
            location_count=len(self._location_graph),
        )

    def reset(self) -> None:
        """Clear all jobs, users, indexes and locations."""
        self._jobs.clear()
        self._users.clear()
        self._title_index.clear()
        self._skill_index.clear()
        self._location_graph = LocationGraph()
        self.logger.info("Engine reset")

    def _rank(self, user: User, jobs_with_distance: Iterable[tuple[Job, float]],
              limit: int) -> list[JobRecommendation]:
        scorer = JobScorer(user)
        ranker = ScoredRanker()

        for job, distance in jobs_with_distance:
            ranker.add((job, distance), scorer.score(job, distance))

        return [
            JobRecommendation(job, score, distance)
            for (job, distance), score in ranker.top_k(max(0, limit))
        ]

    def _with_distances(self, user: User, jobs: Iterable[Job]) -> list[tuple[Job, float]]:
        """
        Pair each job with its distance from the user.

        Road distances from the user's location are computed at most once,
        and only if some job lacks coordinates.
        """
        road_distances = None
        pairs = []
        for job in jobs:
            if road_distances is None and not job.has_coordinates:
                road_distances = self._road_distances(user)
            pairs.append((job, self._distance(user, job, road_distances or {})))
        return pairs

    def _road_distances(self, user: User) -> dict[str, float]:
        """Road distance from the user's location to every location; empty if it is not in the graph."""
        if not self._location_graph.has_location(user.location):
            return {}
        return self._location_graph.shortest_distances(user.location)

    @staticmethod
    def _distance(user: User, job: Job, road_distances: dict[str, float]) -> float:
        if job.has_coordinates:
            return job.distance_to(user.latitude, user.longitude)

        if job.location in road_distances:
            return road_distances[job.location]

        return 0.0 if user.location == job.location else DEFAULT_FALLBACK_DISTANCE_KM

    def _find_training_jobs(self, skill: str) -> list[Job]:
        return [
            job for job in self._jobs.values()
            if job.requires_skill(skill) and job.experience_level <= TRAINING_MAX_EXPERIENCE_LEVEL
        ]
