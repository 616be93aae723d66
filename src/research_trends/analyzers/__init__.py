"""
Analysis Modules
================

Pure, stateless analyzers over a list of Paper records.

- PaperFilter: Text, tag, method and year-range filtering
- TrendAnalyzer: Time series, tag distribution, tag heatmap data
- NetworkAnalyzer: Tag / method co-occurrence graphs
- SimilarityFinder: Jaccard similarity search
- InsightGenerator: Narrative insights
- TagAnalyzer: Profile of selected tags
- ResearchAdvisor: Sub-topics, method gaps, cross-topic opportunities, suggestions
- TrendPredictor: Publish-worthiness scoring per tag
"""

from research_trends.analyzers.paper_filter import PaperFilter, filter_papers
from research_trends.analyzers.trend_analyzer import TrendAnalyzer
from research_trends.analyzers.network_analyzer import NetworkAnalyzer
from research_trends.analyzers.similarity import SimilarityFinder, jaccard_similarity
from research_trends.analyzers.insight_generator import InsightGenerator
from research_trends.analyzers.tag_analyzer import TagAnalyzer
from research_trends.analyzers.gap_analyzer import ResearchAdvisor
from research_trends.analyzers.impact_predictor import TrendPredictor

__all__ = [
    "PaperFilter",
    "filter_papers",
    "TrendAnalyzer",
    "NetworkAnalyzer",
    "SimilarityFinder",
    "jaccard_similarity",
    "InsightGenerator",
    "TagAnalyzer",
    "ResearchAdvisor",
    "TrendPredictor",
]
