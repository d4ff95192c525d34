"""
Tests for the JSON engine store.
"""

import json

import pytest

from job_recommender.core import Job, RecommendationEngine, User
from job_recommender.storage import EngineStore, StoreError


class TestEngineStore:
    """Test save/load round trips and error handling."""

    def test_round_trip_reproduces_engine(self, engine, tmp_path):
        store = EngineStore(str(tmp_path / "engine.json"))
        store.save(engine)

        restored = store.load()

        assert restored.get_stats() == engine.get_stats()
        assert restored.suggest_titles("t") == engine.suggest_titles("t")
        assert restored.suggest_skills("c") == engine.suggest_skills("c")
        for start in ["Village A", "City C"]:
            assert (restored.location_graph.shortest_distances(start)
                    == engine.location_graph.shortest_distances(start))

    def test_round_trip_preserves_rankings(self, engine, tmp_path):
        store = EngineStore(str(tmp_path / "engine.json"))
        store.save(engine)
        restored = store.load()

        for user_id in ["U001", "U003"]:
            original = [(rec.job.id, rec.score) for rec in engine.recommend(user_id, 5)]
            reloaded = [(rec.job.id, rec.score) for rec in restored.recommend(user_id, 5)]
            assert reloaded == original

    def test_round_trip_keeps_first_location_coordinates(self, tmp_path):
        engine = RecommendationEngine()
        engine.register_user(User(id="U1", location="Town", latitude=1.0, longitude=2.0))
        engine.register_job(Job(id="J1", title="Cook", location="Town", latitude=3.0, longitude=4.0))

        store = EngineStore(str(tmp_path / "engine.json"))
        store.save(engine)
        location = store.load().location_graph.get_location("Town")

        assert (location.latitude, location.longitude) == (1.0, 2.0)

    def test_round_trip_keeps_entity_fields(self, engine, tmp_path):
        store = EngineStore(str(tmp_path / "engine.json"))
        store.save(engine)
        restored = store.load()

        job = restored.get_job("J005")
        assert job.required_skills == {"java", "database", "english"}
        assert job.benefits == ["Health insurance", "Work from home"]
        assert job.experience_level == 3

        user = restored.get_user("U002")
        assert user.skills == {"sewing": 9, "cooking": 8, "english": 6, "basic computer": 7}
        assert user.preferences == ["textile", "food"]
        assert user.max_distance == 25.0

    def test_load_into_existing_engine(self, engine, tmp_path):
        store = EngineStore(str(tmp_path / "engine.json"))
        store.save(engine)

        target = RecommendationEngine()
        assert store.load(target) is target
        assert target.get_stats().job_count == 16

    def test_missing_file_loads_empty(self, tmp_path):
        store = EngineStore(str(tmp_path / "missing.json"))

        assert not store.exists()
        assert store.load().get_stats().job_count == 0

    def test_save_creates_parent_directories(self, engine, tmp_path):
        path = EngineStore(str(tmp_path / "nested" / "dir" / "engine.json")).save(engine)
        assert path.exists()

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(StoreError, match="broken.json"):
            EngineStore(str(path)).load()

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"jobs": [{"title": "No id"}]}))

        with pytest.raises(StoreError):
            EngineStore(str(path)).load()

    def test_road_to_unknown_location(self, tmp_path):
        path = tmp_path / "bad_road.json"
        path.write_text(json.dumps({
            "locations": [{"name": "A", "latitude": 0, "longitude": 0}],
            "roads": [{"start": "A", "end": "B", "distance": 5}],
        }))

        with pytest.raises(StoreError):
            EngineStore(str(path)).load()

    def test_non_object_document(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")

        with pytest.raises(StoreError):
            EngineStore(str(path)).load()
