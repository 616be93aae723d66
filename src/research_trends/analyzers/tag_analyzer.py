"""
Tag Analysis Module
===================
Profile of the papers carrying a selected set of tags: citation totals,
venues, yearly volume, authors, methods, related tags and growth.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from research_trends.analyzers._math import round_half_up
from research_trends.models import Paper


class TagAnalyzer:
    """Summarize the papers matching any of the selected tags."""

    def analyze(self, papers: List[Paper], selected_tags: Sequence[str]) -> Optional[Dict]:
        if not selected_tags or not papers:
            return None

        matched = [p for p in papers if any(t in p.tags for t in selected_tags)]
        if not matched:
            return None

        total_citations = sum(p.citations for p in matched)

        venues = Counter(p.venue for p in matched)
        years = Counter(p.year for p in matched)
        authors = Counter(a for p in matched for a in p.authors)
        methods = Counter(m for p in matched for m in p.methods)
        related = Counter(t for p in matched for t in p.tags if t not in selected_tags)

        return {
            "total_papers": len(matched),
            "total_citations": total_citations,
            "avg_citations": round_half_up(total_citations / len(matched)),
            "max_citations": max(p.citations for p in matched),
            "top_venues": self._top(venues, 8),
            "year_trend": sorted(years.items()),
            "top_authors": self._top(authors, 10),
            "top_methods": self._top(methods, 8),
            "related_tags": self._top(related, 8),
            "top_cited": sorted(matched, key=lambda p: p.citations, reverse=True)[:5],
            "growth_rate": self._growth_rate(years),
        }

    @staticmethod
    def _top(counter: Counter, n: int) -> List[tuple]:
        return sorted(counter.items(), key=lambda x: x[1], reverse=True)[:n]

    @staticmethod
    def _growth_rate(year_counts: Counter) -> Optional[int]:
        years = sorted(year_counts)
        if len(years) < 2:
            return None
        last, prev = year_counts[years[-1]], year_counts[years[-2]]
        if prev <= 0:
            return None
        return round_half_up((last - prev) / prev * 100)
