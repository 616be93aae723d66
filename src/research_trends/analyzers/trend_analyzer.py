"""
Trend Analysis Module
=====================
Aggregate papers over time:
- Publication / citation time series by year or month
- Tag distribution (top N tags)
- Tag x period counts for heatmaps
"""

from collections import Counter, defaultdict
from typing import Dict, List
import logging

from research_trends.models import Paper

logger = logging.getLogger(__name__)


class TrendAnalyzer:
    """Compute time series and tag aggregates over a set of papers."""

    DEFAULT_TOP_TAGS = 15

    def analyze_trends(self, papers: List[Paper], group_by: str = "month") -> Dict:
        """Run all trend aggregations."""
        logger.debug("Analyzing trends for %d papers", len(papers))

        return {
            "papers_over_time": self.compute_trends(papers, group_by, "count"),
            "citations_over_time": self.compute_trends(papers, group_by, "citations"),
            "tag_distribution": self.compute_tag_distribution(papers),
            "tag_time_series": self.compute_tag_time_series(papers, group_by),
            "group_by": group_by,
        }

    @staticmethod
    def get_period(paper: Paper, group_by: str) -> str:
        """Period key for a paper: "2024" or "2024-03"."""
        if group_by == "year":
            return f"{paper.year}"
        return f"{paper.year}-{paper.month:02d}"

    def compute_trends(self, papers: List[Paper], group_by: str, metric: str) -> List[Dict]:
        """Paper count or citation sum per period, in chronological order.

        Only periods that occur in the input are returned; gaps are not filled.
        """
        totals: Dict[str, int] = defaultdict(int)

        for paper in papers:
            period = self.get_period(paper, group_by)
            totals[period] += paper.citations if metric == "citations" else 1

        return [
            {"period": period, "value": value}
            for period, value in sorted(totals.items())
        ]

    def compute_tag_distribution(self, papers: List[Paper], top_n: int = DEFAULT_TOP_TAGS) -> List[Dict]:
        """Top tags by paper count; ties keep discovery order."""
        tag_counts: Counter = Counter()
        for paper in papers:
            tag_counts.update(paper.tags)

        ranked = sorted(tag_counts.items(), key=lambda x: x[1], reverse=True)
        return [{"tag": tag, "count": count} for tag, count in ranked[:top_n]]

    def compute_tag_time_series(self, papers: List[Paper], group_by: str) -> List[Dict]:
        """Paper count for every (tag, period) pair, sorted by period."""
        counts: Dict[tuple, int] = defaultdict(int)

        for paper in papers:
            period = self.get_period(paper, group_by)
            for tag in paper.tags:
                counts[(tag, period)] += 1

        points = [
            {"tag": tag, "period": period, "count": count}
            for (tag, period), count in counts.items()
        ]
        points.sort(key=lambda x: x["period"])
        return points
