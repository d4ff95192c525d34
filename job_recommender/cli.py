"""
Job Recommender CLI - Command line interface for the recommendation engine.

Usage:
    python -m job_recommender.cli [command] [options]

Commands:
    recommend       Rank jobs for a user
    search          Search jobs by title or skill prefix
    near            Find jobs near a location by road
    personalized    Rank jobs after salary and distance filters
    career          Show skill gaps towards a target job
    route           Shortest road route between two locations
    stats           Show engine statistics
    data            Export or show the loaded data
    config          Manage configuration

Examples:
    python -m job_recommender.cli recommend --user U003 --limit 5
    python -m job_recommender.cli search --skill cook
    python -m job_recommender.cli near --location "City C" --distance 30
    python -m job_recommender.cli career --user U001 --target "Java Developer"
"""

import argparse
import json
import logging
import sys
from typing import Optional

from job_recommender.core import RecommendationEngine, JobRecommendation, Job
from job_recommender.data import load_sample_data
from job_recommender.storage import EngineStore
from job_recommender.utils import Config, parse_value


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Job Recommender - Match job seekers to nearby, well-fitting jobs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--data", "-d", help="Engine store file (JSON) to load instead of sample data")
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Recommend command
    rec_parser = subparsers.add_parser("recommend", help="Rank jobs for a user")
    rec_parser.add_argument("--user", "-u", required=True, help="User ID")
    rec_parser.add_argument("--limit", "-n", type=int, help="Number of recommendations")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search jobs by prefix")
    search_group = search_parser.add_mutually_exclusive_group(required=True)
    search_group.add_argument("--title", "-t", help="Job title prefix")
    search_group.add_argument("--skill", "-s", help="Skill prefix")

    # Near command
    near_parser = subparsers.add_parser("near", help="Find jobs near a location")
    near_parser.add_argument("--location", "-l", required=True, help="Location name")
    near_parser.add_argument("--distance", "-r", type=float, help="Maximum road distance (km)")

    # Personalized command
    pers_parser = subparsers.add_parser("personalized", help="Filtered recommendations")
    pers_parser.add_argument("--user", "-u", required=True, help="User ID")
    pers_parser.add_argument("--min-salary", type=float, default=0.0, help="Minimum salary")
    pers_parser.add_argument("--max-distance", type=float, default=50.0, help="Maximum distance (km)")
    pers_parser.add_argument("--skills", help="Comma-separated preferred skills")
    pers_parser.add_argument("--limit", "-n", type=int, help="Number of recommendations")

    # Career command
    career_parser = subparsers.add_parser("career", help="Suggest career paths")
    career_parser.add_argument("--user", "-u", required=True, help="User ID")
    career_parser.add_argument("--target", "-t", required=True, help="Target job title")

    # Route command
    route_parser = subparsers.add_parser("route", help="Shortest route between locations")
    route_parser.add_argument("--from", dest="start", required=True, help="Start location")
    route_parser.add_argument("--to", dest="end", required=True, help="End location")

    # Stats command
    subparsers.add_parser("stats", help="Show engine statistics")

    # Data command
    data_parser = subparsers.add_parser("data", help="Export or show loaded data")
    data_parser.add_argument("--export", "-e", help="Write the loaded data to a store file")
    data_parser.add_argument("--show", action="store_true", help="List users, jobs and locations")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "recommend": cmd_recommend,
        "search": cmd_search,
        "near": cmd_near,
        "personalized": cmd_personalized,
        "career": cmd_career,
        "route": cmd_route,
        "stats": cmd_stats,
        "data": cmd_data,
    }

    # Execute command
    try:
        config = Config(args.config)
        if args.command == "config":
            cmd_config(args, config)
        else:
            configure_logging(config, args.verbose)
            engine = build_engine(args.data or config.get_store_path())
            commands[args.command](args, engine, config)

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def configure_logging(config: Config, verbose: bool = False) -> None:
    """Set up root logging from --verbose or the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_engine(store_path: Optional[str] = None) -> RecommendationEngine:
    """Load an engine from a store file, or seed it with the sample data."""
    engine = RecommendationEngine()
    if store_path:
        return EngineStore(store_path).load(engine)
    return load_sample_data(engine)


def print_recommendations(recommendations: list[JobRecommendation]) -> None:
    if not recommendations:
        print("No recommendations found.")
        return

    for i, rec in enumerate(recommendations, 1):
        print(f"{i:2}. {rec.job.title} @ {rec.job.company}")
        print(f"    Location: {rec.job.location} | Distance: {rec.distance:.1f} km")
        print(f"    Salary: {rec.job.salary:.0f} | Score: {rec.score:.2f}/100")
        print(f"    Skills: {', '.join(sorted(rec.job.required_skills))}")
        print()


def print_jobs(jobs: list[Job]) -> None:
    for i, job in enumerate(jobs, 1):
        print(f"{i:2}. {job.title} - {job.company} ({job.location}, {job.salary:.0f})")


def cmd_recommend(args, engine: RecommendationEngine, config: Config):
    """Execute recommend command."""
    limit = config.clamp_limit(args.limit)
    recommendations = engine.recommend(args.user, limit)

    print(f"\n🎯 Top {limit} recommendations for {args.user}\n")
    print("-" * 80)
    print_recommendations(recommendations)


def cmd_search(args, engine: RecommendationEngine, config: Config):
    """Execute search command."""
    if args.title is not None:
        label, jobs = f"title '{args.title}'", engine.search_by_title(args.title)
    else:
        label, jobs = f"skill '{args.skill}'", engine.search_by_skill(args.skill)

    print(f"\n🔍 Jobs matching {label}: {len(jobs)}\n")
    if jobs:
        print_jobs(jobs)
    else:
        print("No jobs found.")


def cmd_near(args, engine: RecommendationEngine, config: Config):
    """Execute near command."""
    distance = args.distance
    if distance is None:
        distance = float(config.get("search.default_radius_km", 25.0))

    jobs = engine.find_near_location(args.location, distance)

    print(f"\n📍 Jobs within {distance:g} km of '{args.location}': {len(jobs)}\n")
    if jobs:
        print_jobs(jobs)
    else:
        print("No jobs found.")


def cmd_personalized(args, engine: RecommendationEngine, config: Config):
    """Execute personalized command."""
    preferred = None
    if args.skills:
        preferred = [s.strip() for s in args.skills.split(",") if s.strip()]

    limit = config.clamp_limit(args.limit)
    recommendations = engine.personalized_recommend(
        args.user,
        min_salary=args.min_salary,
        max_distance=args.max_distance,
        preferred_skills=preferred,
        limit=limit,
    )

    print(f"\n🎯 Personalized recommendations for {args.user}")
    print(f"   Salary >= {args.min_salary:.0f} | Distance <= {args.max_distance:g} km\n")
    print("-" * 80)
    print_recommendations(recommendations)


def cmd_career(args, engine: RecommendationEngine, config: Config):
    """Execute career command."""
    paths = engine.suggest_career_paths(args.user, args.target)

    print(f"\n🛤️ Career paths to '{args.target}' for {args.user}\n")
    if not paths:
        print("No career path found.")
        return

    for i, path in enumerate(paths, 1):
        print(f"{i}. {path.description}")
        print(f"   Training steps: {path.training_steps}")
        if path.training_jobs:
            print(f"   Entry jobs: {', '.join(job.title for job in path.training_jobs)}")


def cmd_route(args, engine: RecommendationEngine, config: Config):
    """Execute route command."""
    path, distance = engine.shortest_route(args.start, args.end)

    if not path:
        print(f"No route from '{args.start}' to '{args.end}'")
        return

    print(f"\n🛣️ {' -> '.join(path)} ({distance:g} km)")


def cmd_stats(args, engine: RecommendationEngine, config: Config):
    """Execute stats command."""
    stats = engine.get_stats()
    print("\n📈 Engine Statistics")
    print("=" * 40)
    print(f"Total Jobs: {stats.job_count}")
    print(f"Total Users: {stats.user_count}")
    print(f"Unique Job Titles: {stats.unique_title_count}")
    print(f"Unique Skills: {stats.unique_skill_count}")
    print(f"Total Locations: {stats.location_count}")


def cmd_data(args, engine: RecommendationEngine, config: Config):
    """Execute data command."""
    if args.export:
        path = EngineStore(args.export).save(engine)
        print(f"✅ Exported engine data to {path}")

    elif args.show:
        print("\n👥 Users:")
        for user in engine.users:
            print(f"  - {user.id}: {user.name} ({user.location})")

        print("\n💼 Jobs:")
        for job in engine.jobs:
            print(f"  - {job.id}: {job.title} @ {job.company}")

        print("\n🔧 Skills:")
        for skill in sorted({s for job in engine.jobs for s in job.required_skills}):
            print(f"  - {skill}")

        print("\n📍 Locations:")
        for location in engine.location_graph.locations:
            print(f"  - {location.name}")

    else:
        print("Use --export or --show")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        path = Config.create_default_config(str(config.config_path)).config_path
        print(f"✅ Created config at: {path}")

    elif args.show:
        overridden = set(config.overridden_keys())
        print(f"\n📋 Configuration ({config.config_path})\n")
        for key, value in config.effective().items():
            source = f"  [env {Config.ENV_OVERRIDES[key]}]" if key in overridden else ""
            print(f"  {key} = {json.dumps(value)}{source}")

    elif args.set:
        key, raw = args.set
        value = parse_value(raw)
        config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {json.dumps(value)}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()
