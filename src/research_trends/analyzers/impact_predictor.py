"""
Impact Prediction Module
========================
Rank tags by how promising they are to publish in:
- Year-over-year growth and its acceleration
- Citation impact
- Share of papers at prestige venues
- Composite 0-100 score with a short rationale
"""

from collections import Counter, defaultdict
from typing import Dict, List
import logging

from research_trends.analyzers._math import growth_pct, round_half_up
from research_trends.models import Paper
from research_trends.venues import PREDICTION_TOP_VENUES, is_top_venue

logger = logging.getLogger(__name__)


class TrendPredictor:
    """Score every sufficiently common tag for publish-worthiness."""

    MIN_TAG_PAPERS = 3
    DEFAULT_TOP_N = 8

    # Composite score weights
    GROWTH_WEIGHT = 0.40
    CITATION_WEIGHT = 0.25
    VENUE_WEIGHT = 0.20
    ACCELERATION_WEIGHT = 0.15

    def predict(self, papers: List[Paper], top_n: int = DEFAULT_TOP_N) -> List[Dict]:
        """Predictions for the top scoring tags; empty with fewer than two years of data."""
        years = sorted({p.year for p in papers})
        if len(years) < 2:
            return []

        logger.debug("Scoring tags over %d papers (%d years)", len(papers), len(years))

        latest_year, prev_year = years[-1], years[-2]
        older_year = years[-3] if len(years) >= 3 else None

        tags = defaultdict(lambda: {
            "total": 0, "latest": 0, "prev": 0, "older": 0,
            "citations": 0, "top_venue_papers": 0, "venues": Counter(),
        })

        for paper in papers:
            top_venue = is_top_venue(paper.venue, PREDICTION_TOP_VENUES)
            for tag in paper.tags:
                a = tags[tag]
                a["total"] += 1
                a["citations"] += paper.citations
                if paper.year == latest_year:
                    a["latest"] += 1
                elif paper.year == prev_year:
                    a["prev"] += 1
                elif older_year is not None and paper.year == older_year:
                    a["older"] += 1
                if top_venue:
                    a["top_venue_papers"] += 1
                a["venues"][paper.venue] += 1

        results = []
        for tag, a in tags.items():
            if a["total"] < self.MIN_TAG_PAPERS:
                continue
            results.append(self._score_tag(tag, a, has_older=older_year is not None))

        results.sort(key=lambda x: x["score"], reverse=True)
        return results[:top_n]

    def _score_tag(self, tag: str, a: Dict, has_older: bool) -> Dict:
        growth = growth_pct(a["latest"], a["prev"])

        acceleration = 0.0
        if has_older and a["older"] > 0 and a["prev"] > 0:
            prev_rate = (a["prev"] - a["older"]) / a["older"]
            curr_rate = (a["latest"] - a["prev"]) / a["prev"]
            acceleration = curr_rate - prev_rate

        if growth > 20:
            momentum = "rising"
        elif growth >= -10:
            momentum = "stable"
        else:
            momentum = "declining"

        avg_citations = round_half_up(a["citations"] / a["total"])
        top_venue_ratio = a["top_venue_papers"] / a["total"]

        score = self.composite_score(growth, avg_citations, top_venue_ratio, acceleration)

        top_venues = [
            v for v, _ in sorted(a["venues"].items(), key=lambda x: x[1], reverse=True)[:3]
        ]

        return {
            "direction": tag,
            "score": score,
            "momentum": momentum,
            "reason": self.reason(momentum, growth, top_venue_ratio, avg_citations),
            "top_venues": top_venues,
            "paper_count": a["total"],
            "avg_citations": avg_citations,
            "growth_pct": growth,
        }

    def composite_score(
        self,
        growth: float,
        avg_citations: float,
        top_venue_ratio: float,
        acceleration: float,
    ) -> int:
        """Weighted 0-100 score from the four normalized factors."""
        growth_score = min(max(growth + 50, 0), 100)
        citation_score = min(avg_citations / 10, 100)
        venue_score = top_venue_ratio * 100
        accel_score = min(max((acceleration + 1) * 50, 0), 100)

        return round_half_up(
            growth_score * self.GROWTH_WEIGHT
            + citation_score * self.CITATION_WEIGHT
            + venue_score * self.VENUE_WEIGHT
            + accel_score * self.ACCELERATION_WEIGHT
        )

    @staticmethod
    def reason(momentum: str, growth: int, top_venue_ratio: float, avg_citations: int) -> str:
        """Rationale text for a prediction."""
        signed = f"+{growth}" if growth > 0 else f"{growth}"
        if momentum == "rising" and top_venue_ratio > 0.3:
            return f"Strong growth ({signed}%) with high top-venue acceptance. Hot area for submissions."
        if momentum == "rising":
            return f"Rapidly growing topic ({signed}% YoY). Early mover advantage for top venue submissions."
        if momentum == "stable" and avg_citations > 50:
            return "Mature research area with strong citation impact. Reliable path to publication."
        if momentum == "stable":
            return "Steady research area. Novel angles or cross-topic work may improve acceptance odds."
        return "Declining momentum. Consider combining with trending topics for better reception."
