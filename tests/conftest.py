"""Shared fixtures for the research_trends tests."""

import itertools
import json

import pytest

from research_trends.models import Paper

_ids = itertools.count(1)


def _make_paper(**fields) -> Paper:
    """Build a Paper, generating an id when none is given."""
    fields.setdefault("id", f"p{next(_ids)}")
    return Paper(**fields)


@pytest.fixture
def make_paper():
    return _make_paper


@pytest.fixture
def sample_papers():
    """Small corpus spanning three years, several tags, methods and venues."""
    return [
        _make_paper(id="s1", title="Agents that Plan", authors=("Ada", "Bo"), year=2023, month=2,
                   venue="NeurIPS", tags=("agents", "planning"), methods=("rl",), citations=120,
                   abstract="Planning with language agents."),
        _make_paper(id="s2", title="Memory for Agents", authors=("Bo",), year=2023, month=11,
                   venue="ICML", tags=("agents", "memory"), methods=("retrieval",), citations=40),
        _make_paper(id="s3", title="Tool Use at Scale", authors=("Cy",), year=2024, month=3,
                   venue="ACL", tags=("agents", "tool use"), methods=("prompting", "rl"), citations=15),
        _make_paper(id="s4", title="Planning Benchmarks", authors=("Ada", "Dee"), year=2024, month=3,
                   venue="Workshop on Agents", tags=("planning", "benchmark"), methods=("evaluation",),
                   citations=3),
        _make_paper(id="s5", title="Multi-Agent Debate", authors=("Eve",), year=2025, month=1,
                   venue="arXiv", tags=("agents", "multi-agent"), methods=("prompting",), citations=8),
        _make_paper(id="s6", title="Safe Tool Use", authors=("Cy", "Eve"), year=2025, month=7,
                   venue="ICLR", tags=("tool use", "safety"), methods=("prompting", "red teaming"),
                   citations=2),
    ]


@pytest.fixture
def corpus_file(tmp_path, sample_papers):
    """The sample corpus written to a JSON file."""
    path = tmp_path / "papers.json"
    path.write_text(
        json.dumps([p.model_dump(mode="json") for p in sample_papers]),
        encoding="utf-8",
    )
    return path
