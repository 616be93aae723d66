"""
Insight Generation Module
=========================
Short narrative findings about a paper collection:
- Fastest-growing topic between the two most recent years
- Peak publication year
- Most-cited paper
- Emerging topic (only seen in the last two years)
- Dominant topic
"""

from collections import Counter, defaultdict
from typing import Dict, List, Optional
import logging

from research_trends.analyzers._math import round_half_up
from research_trends.analyzers.trend_analyzer import TrendAnalyzer
from research_trends.models import Paper

logger = logging.getLogger(__name__)


class InsightGenerator:
    """Generate up to five insights, in a fixed priority order."""

    MAX_INSIGHTS = 5

    def __init__(self):
        self.trend_analyzer = TrendAnalyzer()

    def generate_insights(self, papers: List[Paper]) -> List[Dict]:
        """Generate every insight whose preconditions hold."""
        if not papers:
            return []

        logger.debug("Generating insights for %d papers", len(papers))

        candidates = [
            self._fastest_growing_tag(papers),
            self._peak_year(papers),
            self._most_cited(papers),
            self._emerging_topic(papers),
            self._dominant_topic(papers),
        ]
        return [c for c in candidates if c is not None][:self.MAX_INSIGHTS]

    def _fastest_growing_tag(self, papers: List[Paper]) -> Optional[Dict]:
        years = sorted({p.year for p in papers})
        if len(years) < 2:
            return None

        last_year, prev_year = years[-1], years[-2]
        growth = defaultdict(lambda: {"prev": 0, "last": 0})

        for paper in papers:
            if paper.year not in (last_year, prev_year):
                continue
            for tag in paper.tags:
                if paper.year == last_year:
                    growth[tag]["last"] += 1
                else:
                    growth[tag]["prev"] += 1

        fastest_tag = ""
        max_rate = 0.0
        for tag, counts in growth.items():
            if counts["prev"] > 0:
                rate = (counts["last"] - counts["prev"]) / counts["prev"]
                if rate > max_rate:
                    max_rate = rate
                    fastest_tag = tag

        if not fastest_tag:
            return None

        pct = round_half_up(max_rate * 100)
        return {
            "type": "growth",
            "icon": "📈",
            "text": f'"{fastest_tag}" is the fastest-growing topic, up {pct}% from {prev_year} to {last_year}.',
            "value": f"+{pct}%",
        }

    def _peak_year(self, papers: List[Paper]) -> Optional[Dict]:
        year_counts = Counter(p.year for p in papers)
        year, count = max(year_counts.items(), key=lambda x: x[1])
        return {
            "type": "peak",
            "icon": "🏔️",
            "text": f"{year} was the peak year with {count} papers published.",
            "value": f"{count} papers",
        }

    def _most_cited(self, papers: List[Paper]) -> Optional[Dict]:
        top = max(papers, key=lambda p: p.citations)
        return {
            "type": "milestone",
            "icon": "🏆",
            "text": f'"{top.title}" is the most-cited paper with {top.citations:,} citations.',
            "value": f"{top.citations:,} citations",
        }

    def _emerging_topic(self, papers: List[Paper]) -> Optional[Dict]:
        latest_year = max(p.year for p in papers)

        recent_tags: Counter = Counter()
        older_tags = set()
        for paper in papers:
            if paper.year >= latest_year - 1:
                recent_tags.update(paper.tags)
            else:
                older_tags.update(paper.tags)

        emerging = [(tag, n) for tag, n in recent_tags.items() if tag not in older_tags]
        if not emerging:
            return None

        tag, _ = max(emerging, key=lambda x: x[1])
        return {
            "type": "emerging",
            "icon": "🌟",
            "text": f'"{tag}" is an emerging topic, first appearing in {latest_year - 1}-{latest_year}.',
            "value": "New",
        }

    def _dominant_topic(self, papers: List[Paper]) -> Optional[Dict]:
        top = self.trend_analyzer.compute_tag_distribution(papers, 1)
        if not top:
            return None

        tag, count = top[0]["tag"], top[0]["count"]
        share = round_half_up(count / len(papers) * 100)
        return {
            "type": "milestone",
            "icon": "🔬",
            "text": f'"{tag}" is the most researched topic, appearing in {count} papers ({share}% of the collection).',
            "value": f"{count} papers",
        }
