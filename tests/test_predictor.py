"""Tests for trend prediction."""

import pytest

from research_trends.analyzers import TrendPredictor


@pytest.fixture
def corpus(make_paper):
    papers = []
    papers.append(make_paper(year=2024, venue="NeurIPS", tags=("rising",), citations=100))
    papers += [make_paper(year=2025, venue="NeurIPS", tags=("rising",), citations=100) for _ in range(3)]
    papers += [make_paper(year=2024, venue="Workshop", tags=("fading",)) for _ in range(3)]
    papers.append(make_paper(year=2025, venue="Workshop", tags=("fading",)))
    papers += [make_paper(year=2025, tags=("tiny",)) for _ in range(2)]
    return papers


class TestTrendPredictor:
    """Test cases for TrendPredictor."""

    def test_predictions(self, corpus):
        """Test scores, momentum and reasons for a growing and a shrinking tag."""
        predictions = TrendPredictor().predict(corpus)

        assert [p["direction"] for p in predictions] == ["rising", "fading"]

        rising = predictions[0]
        assert rising["score"] == 70
        assert rising["momentum"] == "rising"
        assert rising["growth_pct"] == 200
        assert rising["avg_citations"] == 100
        assert rising["paper_count"] == 4
        assert rising["top_venues"] == ["NeurIPS"]
        assert rising["reason"] == (
            "Strong growth (+200%) with high top-venue acceptance. Hot area for submissions."
        )

        fading = predictions[1]
        assert fading["growth_pct"] == -67
        assert fading["momentum"] == "declining"
        assert fading["score"] == 8
        assert fading["reason"] == (
            "Declining momentum. Consider combining with trending topics for better reception."
        )

    def test_needs_two_years(self, make_paper):
        """Test that a single year of data gives no predictions."""
        papers = [make_paper(year=2025, tags=("x",)) for _ in range(5)]
        assert TrendPredictor().predict(papers) == []
        assert TrendPredictor().predict([]) == []

    def test_top_n(self, make_paper):
        papers = []
        for i in range(10):
            papers += [make_paper(year=2024 + j % 2, tags=(f"t{i}",)) for j in range(3)]
        assert len(TrendPredictor().predict(papers)) == 8
        assert len(TrendPredictor().predict(papers, top_n=2)) == 2

    def test_acceleration(self, make_paper):
        """Test that faster growth than the year before raises the score."""
        def papers_for(tag, older, prev, latest):
            return (
                [make_paper(year=2023, tags=(tag,)) for _ in range(older)]
                + [make_paper(year=2024, tags=(tag,)) for _ in range(prev)]
                + [make_paper(year=2025, tags=(tag,)) for _ in range(latest)]
            )

        papers = papers_for("speeding", 4, 2, 4) + papers_for("slowing", 1, 2, 4)
        scores = {p["direction"]: p["score"] for p in TrendPredictor().predict(papers)}
        assert scores["speeding"] > scores["slowing"]

    def test_composite_score(self):
        """Test the weighted score and its clamping."""
        predictor = TrendPredictor()
        assert predictor.composite_score(0, 0, 0, 0) == 28
        assert predictor.composite_score(500, 5000, 1, 5) == 100
        assert predictor.composite_score(-500, 0, 0, -5) == 0

    def test_reasons(self):
        """Test every rationale branch."""
        reason = TrendPredictor.reason
        assert reason("rising", 25, 0.1, 0).startswith("Rapidly growing topic (+25% YoY)")
        assert reason("rising", 25, 0.3, 0).startswith("Rapidly growing topic")
        assert reason("rising", 25, 0.31, 0).startswith("Strong growth (+25%)")
        assert reason("stable", 0, 0.0, 51).startswith("Mature research area")
        assert reason("stable", -5, 0.0, 50).startswith("Steady research area")
        assert reason("declining", -40, 0.9, 100).startswith("Declining momentum")
