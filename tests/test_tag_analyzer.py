"""Tests for the selected-tag profile."""

from research_trends.analyzers import TagAnalyzer


class TestTagAnalyzer:
    """Test cases for TagAnalyzer."""

    def test_profile(self, sample_papers):
        """Test every field of the profile for one tag."""
        result = TagAnalyzer().analyze(sample_papers, ["agents"])

        assert result["total_papers"] == 4
        assert result["total_citations"] == 183
        assert result["avg_citations"] == 46
        assert result["max_citations"] == 120
        assert result["year_trend"] == [(2023, 2), (2024, 1), (2025, 1)]
        assert result["top_authors"][0] == ("Bo", 2)
        assert result["top_methods"] == [("rl", 2), ("prompting", 2), ("retrieval", 1)]
        assert [t for t, _ in result["related_tags"]] == ["planning", "memory", "tool use", "multi-agent"]
        assert [p.id for p in result["top_cited"]] == ["s1", "s2", "s3", "s5"]
        assert result["growth_rate"] == 0
        assert len(result["top_venues"]) == 4

    def test_selected_tags_match_any(self, sample_papers):
        result = TagAnalyzer().analyze(sample_papers, ["memory", "safety"])
        assert result["total_papers"] == 2
        assert result["growth_rate"] == 0

    def test_growth_needs_two_years(self, sample_papers):
        result = TagAnalyzer().analyze(sample_papers, ["benchmark"])
        assert result["total_papers"] == 1
        assert result["growth_rate"] is None

    def test_not_applicable(self, sample_papers):
        """Test that no tags or no matches give None."""
        assert TagAnalyzer().analyze(sample_papers, []) is None
        assert TagAnalyzer().analyze(sample_papers, ["quantum"]) is None
        assert TagAnalyzer().analyze([], ["agents"]) is None
