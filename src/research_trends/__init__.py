"""
Research Trends - Research Trend Analytics over a Paper Corpus
==============================================================

Analyze a fixed collection of academic papers.

Features:
- Filtering by text, tags, methods and year range
- Publication and citation trends by year or month
- Tag distributions and tag x time heatmaps
- Tag / method co-occurrence networks
- Similar-paper search (Jaccard similarity)
- Narrative insights
- Research advisor for a selected set of tags
- Trend prediction (publish-worthiness scores)
- Interactive Streamlit dashboard

Usage:
    # Command line
    research-trends trends --data data/papers.json --group-by year
    research-trends advise --data data/papers.json --tags "multi-agent"
    research-trends-dashboard --data data/papers.json

    # Python API
    from research_trends import PaperStore, ResearchAnalyzer

    papers = PaperStore("data/papers.json").load()
    results = ResearchAnalyzer(papers).analyze(group_by="year")
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

from research_trends.models import Paper
from research_trends.store import PaperStore
from research_trends.analyzer import ResearchAnalyzer

__all__ = [
    "__version__",
    "Paper",
    "PaperStore",
    "ResearchAnalyzer",
]
