"""Tests for paper filtering."""

from research_trends.analyzers import PaperFilter, filter_papers


class TestPaperFilter:
    """Test cases for PaperFilter."""

    def test_no_criteria_returns_everything_in_order(self, sample_papers):
        """Test that an empty filter keeps every paper in input order."""
        result = filter_papers(sample_papers)
        assert [p.id for p in result] == [p.id for p in sample_papers]
        assert result is not sample_papers

    def test_year_range_is_inclusive(self, sample_papers):
        """Test year_from and year_to bounds."""
        result = filter_papers(sample_papers, year_from=2024, year_to=2024)
        assert [p.id for p in result] == ["s3", "s4"]

    def test_zero_year_bound_is_ignored(self, sample_papers):
        """Test that a zero year bound counts as absent."""
        assert len(filter_papers(sample_papers, year_from=0, year_to=0)) == len(sample_papers)

    def test_tags_match_any(self, sample_papers):
        """Test that a paper needs only one of the requested tags."""
        result = filter_papers(sample_papers, tags=["memory", "safety"])
        assert [p.id for p in result] == ["s2", "s6"]

    def test_methods_match_any(self, sample_papers):
        """Test method filtering."""
        result = filter_papers(sample_papers, methods=["rl"])
        assert [p.id for p in result] == ["s1", "s3"]

    def test_single_string_is_one_value(self, sample_papers):
        """Test that a bare string is treated as a one-element list."""
        assert [p.id for p in filter_papers(sample_papers, tags="memory")] == ["s2"]
        assert [p.id for p in filter_papers(sample_papers, methods="rl")] == ["s1", "s3"]
        assert len(filter_papers(sample_papers, tags="")) == len(sample_papers)

    def test_text_query_is_case_insensitive(self, sample_papers):
        """Test that q searches title, abstract, authors, tags and methods."""
        assert [p.id for p in filter_papers(sample_papers, q="TOOL USE")] == ["s3", "s6"]
        assert [p.id for p in filter_papers(sample_papers, q="language agents")] == ["s1"]
        assert [p.id for p in filter_papers(sample_papers, q="dee")] == ["s4"]
        assert [p.id for p in filter_papers(sample_papers, q="red team")] == ["s6"]

    def test_criteria_compose(self, sample_papers):
        """Test that filtering twice equals filtering once with both criteria."""
        pf = PaperFilter()
        twice = pf.filter(pf.filter(sample_papers, tags=["agents"]), year_from=2024)
        once = pf.filter(sample_papers, tags=["agents"], year_from=2024)
        assert twice == once
        assert [p.id for p in once] == ["s3", "s5"]

    def test_no_match(self, sample_papers):
        """Test that unmatched criteria return an empty list."""
        assert filter_papers(sample_papers, q="quantum") == []
        assert filter_papers([], tags=["agents"]) == []
