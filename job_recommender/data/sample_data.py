"""
Sample Data - Realistic rural job seekers, postings and roads.

Five users and sixteen jobs spread over five locations near Delhi,
connected by a small road network.
"""

import logging

from job_recommender.core.engine import RecommendationEngine
from job_recommender.core.models import Job, User


logger = logging.getLogger(__name__)


VILLAGE_A = ("Village A", 28.6139, 77.2090)
TOWN_B = ("Town B", 28.7041, 77.1025)
CITY_C = ("City C", 28.4595, 77.0266)
VILLAGE_D = ("Village D", 28.5355, 77.3910)
TOWN_E = ("Town E", 28.6562, 77.2410)

SAMPLE_LOCATIONS = [VILLAGE_A[0], TOWN_B[0], CITY_C[0], VILLAGE_D[0], TOWN_E[0]]

# (start, end, km)
SAMPLE_ROADS = [
    ("Village A", "Town B", 15.0),
    ("Town B", "City C", 25.0),
    ("Village D", "Town E", 12.0),
    ("Town E", "City C", 20.0),
    ("Village A", "Village D", 18.0),
]


def _user(user_id, name, age, education, place, skills, preferences, max_distance) -> User:
    location, latitude, longitude = place
    return User(
        id=user_id,
        name=name,
        age=age,
        education=education,
        location=location,
        latitude=latitude,
        longitude=longitude,
        skills=skills,
        preferences=preferences,
        max_distance=max_distance,
    )


def _job(job_id, title, company, place, salary, skills, description,
         job_type="full-time", experience_level=1, benefits=()) -> Job:
    location, latitude, longitude = place
    return Job(
        id=job_id,
        title=title,
        company=company,
        location=location,
        salary=salary,
        required_skills=set(skills),
        description=description,
        job_type=job_type,
        latitude=latitude,
        longitude=longitude,
        experience_level=experience_level,
        benefits=list(benefits),
    )


def create_sample_users() -> list[User]:
    return [
        _user("U001", "Rahul Kumar", 22, "High School", VILLAGE_A,
              {"farming": 8, "driving": 7, "basic computer": 5},
              ["agriculture"], 30.0),
        _user("U002", "Priya Singh", 25, "Diploma", TOWN_B,
              {"sewing": 9, "cooking": 8, "english": 6, "basic computer": 7},
              ["textile", "food"], 25.0),
        _user("U003", "Amit Patel", 28, "Graduate", CITY_C,
              {"java": 8, "python": 7, "database": 6, "web development": 7, "english": 8},
              ["technology"], 50.0),
        _user("U004", "Sunita Devi", 20, "High School", VILLAGE_D,
              {"farming": 6, "cooking": 8, "cleaning": 9},
              ["agriculture", "domestic"], 20.0),
        _user("U005", "Rajesh Verma", 30, "ITI", TOWN_E,
              {"welding": 9, "electrical": 8, "plumbing": 7, "driving": 8},
              ["manufacturing", "construction"], 40.0),
    ]


def create_sample_jobs() -> list[Job]:
    return [
        # Agriculture
        _job("J001", "Farm Worker", "Green Farms Ltd", VILLAGE_A, 18000, ["farming"],
             "Work in agricultural fields, crop management",
             experience_level=1, benefits=["Free accommodation"]),
        _job("J002", "Tractor Driver", "Modern Agriculture", TOWN_B, 22000, ["driving", "farming"],
             "Operate tractors and farm machinery", experience_level=2),

        # Textile and garments
        _job("J003", "Tailor", "Fashion Stitch", TOWN_B, 20000, ["sewing"],
             "Stitch and alter garments", experience_level=2),
        _job("J004", "Garment Worker", "Textile Factory", CITY_C, 25000, ["sewing", "basic computer"],
             "Work in garment manufacturing unit",
             experience_level=1, benefits=["Health insurance"]),

        # Technology
        _job("J005", "Java Developer", "Tech Solutions", CITY_C, 45000, ["java", "database", "english"],
             "Develop Java applications",
             experience_level=3, benefits=["Health insurance", "Work from home"]),
        _job("J006", "Python Developer", "Data Analytics Corp", CITY_C, 50000,
             ["python", "database", "english"],
             "Develop Python applications and data analysis",
             experience_level=3, benefits=["Health insurance", "Flexible hours"]),
        _job("J007", "Web Developer", "Digital Creations", CITY_C, 40000,
             ["web development", "basic computer", "english"],
             "Develop websites and web applications", experience_level=2),

        # Food and hospitality
        _job("J008", "Cook", "Village Restaurant", VILLAGE_D, 18000, ["cooking"],
             "Prepare food in restaurant kitchen", experience_level=2),
        _job("J009", "Kitchen Helper", "Food Court", TOWN_E, 15000, ["cooking", "cleaning"],
             "Assist in kitchen operations", job_type="part-time", experience_level=1),

        # Domestic services
        _job("J010", "Housekeeper", "Home Services", VILLAGE_D, 16000, ["cleaning", "cooking"],
             "Domestic cleaning and cooking services", experience_level=1),

        # Manufacturing and technical
        _job("J011", "Welder", "Metal Works Ltd", TOWN_E, 28000, ["welding"],
             "Metal welding and fabrication work",
             experience_level=3, benefits=["Safety equipment provided"]),
        _job("J012", "Electrician", "Power Solutions", TOWN_E, 32000, ["electrical", "basic computer"],
             "Electrical installation and maintenance",
             experience_level=3, benefits=["Health insurance"]),
        _job("J013", "Plumber", "Water Works", TOWN_E, 25000, ["plumbing"],
             "Plumbing installation and repair", experience_level=2),

        # Transportation
        _job("J014", "Truck Driver", "Logistics Corp", TOWN_B, 30000, ["driving", "english"],
             "Drive trucks for goods transportation",
             experience_level=2, benefits=["Travel allowance"]),

        # Entry level, used as training steps in career paths
        _job("J015", "Data Entry Operator", "Office Solutions", CITY_C, 20000,
             ["basic computer", "english"],
             "Enter data into computer systems", experience_level=1),
        _job("J016", "Computer Operator", "Tech Support", CITY_C, 22000,
             ["basic computer", "english"],
             "Basic computer operations and support", experience_level=1),
    ]


SAMPLE_USER_IDS = [user.id for user in create_sample_users()]

SAMPLE_JOB_TITLES = [job.title for job in create_sample_jobs()]

SAMPLE_SKILLS = [
    "farming", "driving", "basic computer", "sewing", "cooking",
    "english", "java", "python", "database", "web development",
    "cleaning", "welding", "electrical", "plumbing",
]


def load_sample_data(engine: RecommendationEngine) -> RecommendationEngine:
    """
    Register the sample users, jobs and roads into an engine.

    Args:
        engine: Engine to populate

    Returns:
        The same engine, for chaining
    """
    engine.register_all(jobs=create_sample_jobs(), users=create_sample_users())

    for start, end, distance in SAMPLE_ROADS:
        engine.add_road(start, end, distance)

    stats = engine.get_stats()
    logger.info(
        f"Loaded sample data: {stats.user_count} users, {stats.job_count} jobs, "
        f"{stats.location_count} locations"
    )
    return engine
