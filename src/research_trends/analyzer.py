"""
Research Analyzer
=================

Runs every analysis module over a paper collection.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from research_trends.analyzers import (
    InsightGenerator,
    NetworkAnalyzer,
    ResearchAdvisor,
    TagAnalyzer,
    TrendAnalyzer,
    TrendPredictor,
)
from research_trends.models import Paper, json_default

logger = logging.getLogger(__name__)


class ResearchAnalyzer:
    """Analyzer for a paper collection with multiple analysis modules."""

    def __init__(
        self,
        papers: List[Paper],
        all_papers: Optional[List[Paper]] = None,
        output_dir: Optional[str] = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            papers: Papers to analyze (typically already filtered).
            all_papers: Unfiltered corpus used as the advisor's baseline.
                Defaults to papers.
            output_dir: Directory to save analysis results. Nothing is
                written when omitted.
        """
        self.papers = papers
        self.all_papers = all_papers if all_papers is not None else papers
        self.output_dir = output_dir

        self.trend_analyzer = TrendAnalyzer()
        self.network_analyzer = NetworkAnalyzer()
        self.insight_generator = InsightGenerator()
        self.tag_analyzer = TagAnalyzer()
        self.advisor = ResearchAdvisor()
        self.predictor = TrendPredictor()

    def analyze(
        self,
        group_by: str = "year",
        metric: str = "count",
        selected_tags: Optional[Sequence[str]] = None,
        cooccurrence_type: str = "tags",
        min_count: int = 2,
    ) -> Dict[str, Any]:
        """Run all analysis modules.

        Args:
            group_by: "year" or "month" bucketing for time series.
            metric: "count" or "citations" for the trend series.
            selected_tags: Tags for the tag analysis and the advisor.
            cooccurrence_type: "tags" or "methods".
            min_count: Minimum pair count for co-occurrence links.

        Returns:
            Dictionary of analysis results.
        """
        selected_tags = list(selected_tags or [])
        results: Dict[str, Any] = {}

        logger.info("Analyzing %d papers", len(self.papers))

        results["trends"] = {
            "data": self.trend_analyzer.compute_trends(self.papers, group_by, metric),
            "metric": metric,
            "group_by": group_by,
        }
        results["tags"] = {
            "distribution": self.trend_analyzer.compute_tag_distribution(self.papers),
            "time_series": self.trend_analyzer.compute_tag_time_series(self.papers, group_by),
            "group_by": group_by,
        }
        results["cooccurrence"] = {
            **self.network_analyzer.compute_cooccurrence(self.papers, cooccurrence_type, min_count),
            "type": cooccurrence_type,
        }
        results["insights"] = self.insight_generator.generate_insights(self.papers)
        results["predictions"] = self.predictor.predict(self.papers)

        if selected_tags:
            results["tag_analysis"] = self.tag_analyzer.analyze(self.papers, selected_tags)
            results["advice"] = self.advisor.advise(self.papers, self.all_papers, selected_tags)

        if self.output_dir:
            self._save_results(results)

        return results

    def _save_results(self, results: Dict[str, Any]) -> None:
        """Save analysis results to files."""
        analysis_dir = os.path.join(self.output_dir, "analysis")
        os.makedirs(analysis_dir, exist_ok=True)

        for name, data in results.items():
            filepath = os.path.join(analysis_dir, f"{name}_analysis.json")
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False, default=json_default)

        logger.info("Analysis saved to %s", analysis_dir)
