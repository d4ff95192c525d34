"""
Tests for the ScoredRanker max-heap.
"""

from job_recommender.core import ScoredRanker


class TestScoredRanker:
    """Test heap ordering and the non-destructive top-k."""

    def setup_method(self):
        self.ranker = ScoredRanker()
        for item, score in [("b", 40.0), ("a", 90.0), ("d", 10.0), ("c", 65.5)]:
            self.ranker.add(item, score)

    def test_pop_max_order(self):
        popped = [self.ranker.pop_max() for _ in range(4)]
        assert popped == ["a", "c", "b", "d"]
        assert self.ranker.is_empty()

    def test_peek(self):
        assert self.ranker.peek_max() == "a"
        assert self.ranker.peek_max_score() == 90.0
        assert self.ranker.size() == 4

    def test_empty_ranker(self):
        ranker = ScoredRanker()
        assert ranker.pop_max() is None
        assert ranker.peek_max() is None
        assert ranker.peek_max_score() == 0.0
        assert ranker.top_k(3) == []
        assert ranker.is_empty()

    def test_top_k_pairs_descending(self):
        assert self.ranker.top_k(2) == [("a", 90.0), ("c", 65.5)]

    def test_top_k_larger_than_size(self):
        top = self.ranker.top_k(10)
        assert [item for item, _ in top] == ["a", "c", "b", "d"]

    def test_top_k_zero_and_negative(self):
        assert self.ranker.top_k(0) == []
        assert self.ranker.top_k(-3) == []

    def test_top_k_leaves_ranker_untouched(self):
        self.ranker.top_k(3)

        assert self.ranker.size() == 4
        assert self.ranker.pop_max() == "a"
        assert self.ranker.top_k(1) == [("c", 65.5)]

    def test_ties_keep_insertion_order(self):
        ranker = ScoredRanker()
        for item in ["first", "second", "third"]:
            ranker.add(item, 50.0)
        ranker.add("best", 75.0)

        assert [item for item, _ in ranker.top_k(4)] == ["best", "first", "second", "third"]

    def test_items_need_not_be_comparable(self):
        ranker = ScoredRanker()
        ranker.add({"job": 1}, 5.0)
        ranker.add({"job": 2}, 5.0)

        assert ranker.pop_max() == {"job": 1}

    def test_clear(self):
        self.ranker.clear()
        assert self.ranker.size() == 0
        assert len(self.ranker) == 0
        assert self.ranker.pop_max() is None
