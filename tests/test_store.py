"""Tests for the PaperStore."""

import json
import logging

import pytest

from research_trends import store as store_module
from research_trends.models import Paper
from research_trends.store import PaperStore


class TestPaperModel:
    """Test cases for the Paper record."""

    def test_defaults(self):
        paper = Paper()
        assert paper.id == "unknown"
        assert paper.title == "Untitled"
        assert paper.year == 2023
        assert paper.month == 1
        assert paper.venue == "Unknown"
        assert paper.tags == ()
        assert paper.citations == 0

    def test_lists_become_tuples(self):
        paper = Paper.model_validate({"id": "x", "tags": ["a", "b"], "authors": ["Ada"]})
        assert paper.tags == ("a", "b")
        assert paper.authors == ("Ada",)

    def test_frozen(self):
        paper = Paper()
        with pytest.raises(Exception):
            paper.year = 2024


class TestPaperStore:
    """Test cases for PaperStore."""

    def test_load_file(self, corpus_file, sample_papers):
        """Test loading a valid corpus from disk."""
        store = PaperStore(corpus_file)
        papers = store.load()

        assert papers == sample_papers
        assert store.get_validation_errors() == []

    def test_load_is_cached(self, corpus_file):
        """Test that the file is parsed once until cleared."""
        store = PaperStore(corpus_file)
        first = store.load()
        corpus_file.write_text("[]", encoding="utf-8")

        assert store.load() is first
        store.clear()
        assert store.load() == []

    def test_invalid_fields_fall_back_to_defaults(self, caplog):
        """Test that only the invalid fields are replaced."""
        store = PaperStore.from_records([
            {"id": "ok", "year": 2024, "tags": ["x"]},
            {"id": "bad", "year": 1999, "month": 13, "tags": ["x", 1], "citations": -3, "venue": "ICML"},
        ])
        with caplog.at_level(logging.WARNING):
            papers = store.load()

        assert papers[0].year == 2024
        bad = papers[1]
        assert bad.id == "bad"
        assert bad.venue == "ICML"
        assert bad.year == 2023
        assert bad.month == 1
        assert bad.tags == ()
        assert bad.citations == 0

        errors = store.get_validation_errors()
        assert any(e.startswith("1.year:") for e in errors)
        assert any(e.startswith("1.month:") for e in errors)
        assert any(e.startswith("1.tags.1:") for e in errors)
        assert any(e.startswith("1.citations:") for e in errors)
        assert "Paper validation warnings" in caplog.text

    def test_non_object_record(self):
        """Test that a record that is not an object becomes a default paper."""
        store = PaperStore.from_records(["nope"])
        assert store.load() == [Paper()]
        assert store.get_validation_errors() == ["0: expected an object, got str"]

    def test_missing_file(self, tmp_path, caplog):
        """Test that a missing file gives an empty corpus."""
        store = PaperStore(tmp_path / "missing.json")
        with caplog.at_level(logging.ERROR):
            assert store.load() == []
        assert "Failed to load papers" in caplog.text

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "papers.json"
        path.write_text(json.dumps({"papers": []}), encoding="utf-8")
        assert PaperStore(path).load() == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "papers.json"
        path.write_text("{not json", encoding="utf-8")
        assert PaperStore(path).load() == []

    def test_lookups(self, sample_papers):
        """Test id lookup, tag and method lists and the year range."""
        store = PaperStore.from_records([p.model_dump() for p in sample_papers])

        assert store.get_paper_by_id("s3").title == "Tool Use at Scale"
        assert store.get_paper_by_id("nope") is None
        assert store.get_all_tags() == [
            "agents", "benchmark", "memory", "multi-agent", "planning", "safety", "tool use",
        ]
        assert store.get_all_methods() == [
            "evaluation", "prompting", "red teaming", "retrieval", "rl",
        ]
        assert store.get_year_range() == {"min": 2023, "max": 2025}

    def test_empty_year_range(self):
        assert PaperStore.from_records([]).get_year_range() == {"min": 2020, "max": 2026}


class TestDefaultStore:
    """Test cases for the process-wide store."""

    def test_singleton_and_reset(self, monkeypatch, corpus_file):
        monkeypatch.setattr(store_module.config, "DATA_PATH", corpus_file)
        store_module.reset_default_store()
        try:
            first = store_module.get_default_store()
            assert store_module.get_default_store() is first
            assert first.path == corpus_file
            assert len(first.load()) == 6

            store_module.reset_default_store()
            assert store_module.get_default_store() is not first
        finally:
            store_module.reset_default_store()
