"""
Research Gap Analysis Module
============================
Advise on research directions for a selected set of tags:
- Sub-topic landscape (co-occurring tags and methods, YoY growth)
- Method-usage gaps against the whole corpus
- Cross-topic intersections (established, emerging, rare)
- Concrete topic suggestions
- Venue strategy
"""

from collections import Counter, defaultdict
from typing import Dict, List, Optional, Sequence
import logging

from research_trends.analyzers._math import growth_pct, round_half_up
from research_trends.models import Paper
from research_trends.venues import ADVISOR_TOP_VENUES, is_top_venue

logger = logging.getLogger(__name__)

METHOD_PREFIX = "⚙️"

TREND_ORDER = {"emerging": 0, "rare": 1, "established": 2}


class ResearchAdvisor:
    """Identify research gaps and opportunities around selected tags."""

    MIN_TAG_PAPERS = 3
    MIN_SUBTOPIC_COUNT = 2
    MAX_SUBTOPICS = 12
    HOT_GROWTH_PCT = 30
    HOT_MIN_LATEST = 2
    MIN_GLOBAL_USAGE_PCT = 5
    MAX_METHOD_GAPS = 6
    SUGGESTION_GAP_PCT = 10
    MIN_CROSS_TOTAL = 5
    MAX_CROSS = 6
    SURVEY_MIN_PAPERS = 20
    MAX_VENUES = 5

    def advise(
        self,
        papers: List[Paper],
        all_papers: List[Paper],
        selected_tags: Sequence[str],
    ) -> Optional[Dict]:
        """Run the full advisor analysis.

        Args:
            papers: Current (filtered) papers.
            all_papers: Unfiltered corpus, used for global baselines.
            selected_tags: Tags the user is interested in.

        Returns:
            Analysis dictionary, or None when there are no selected tags or
            fewer than three matching papers.
        """
        selected_tags = list(selected_tags)
        if not selected_tags or not papers or not all_papers:
            return None

        tag_papers = [p for p in papers if self._has_any_tag(p, selected_tags)]
        if len(tag_papers) < self.MIN_TAG_PAPERS:
            return None

        logger.debug(
            "Advising on %s: %d matching papers of %d",
            "+".join(selected_tags), len(tag_papers), len(all_papers),
        )

        sub_topics = self.find_sub_topics(tag_papers, all_papers, selected_tags)
        method_gaps = self.find_method_gaps(tag_papers, all_papers, selected_tags)
        cross_opportunities = self.find_cross_opportunities(all_papers, selected_tags)

        return {
            "sub_topics": sub_topics,
            "method_gaps": method_gaps,
            "cross_opportunities": cross_opportunities,
            "suggestions": self.suggest_topics(
                tag_papers, all_papers, selected_tags,
                sub_topics, method_gaps, cross_opportunities,
            ),
            "venue_strategy": self.venue_strategy(tag_papers),
            "tag_paper_count": len(tag_papers),
        }

    @staticmethod
    def _has_any_tag(paper: Paper, tags: Sequence[str]) -> bool:
        return any(t in paper.tags for t in tags)

    def find_sub_topics(
        self,
        tag_papers: List[Paper],
        all_papers: List[Paper],
        selected_tags: Sequence[str],
    ) -> List[Dict]:
        """Co-occurring tags and methods ranked by year-over-year growth."""
        years = sorted({p.year for p in all_papers})
        latest_year = years[-1]
        prev_year = years[-2] if len(years) >= 2 else None

        stats = defaultdict(lambda: {"count": 0, "latest": 0, "prev": 0, "citations": 0})

        for paper in tag_papers:
            keys = [t for t in paper.tags if t not in selected_tags]
            keys += [f"{METHOD_PREFIX}{m}" for m in paper.methods]
            for key in keys:
                st = stats[key]
                st["count"] += 1
                st["citations"] += paper.citations
                if paper.year == latest_year:
                    st["latest"] += 1
                if prev_year is not None and paper.year == prev_year:
                    st["prev"] += 1

        sub_topics = []
        for name, st in stats.items():
            if st["count"] < self.MIN_SUBTOPIC_COUNT:
                continue
            growth = growth_pct(st["latest"], st["prev"])
            sub_topics.append({
                "name": name,
                "count": st["count"],
                "growth": growth,
                "avg_citations": round_half_up(st["citations"] / st["count"]),
                "is_hot": growth > self.HOT_GROWTH_PCT and st["latest"] >= self.HOT_MIN_LATEST,
            })

        sub_topics.sort(key=lambda x: x["growth"], reverse=True)
        return sub_topics[:self.MAX_SUBTOPICS]

    def find_method_gaps(
        self,
        tag_papers: List[Paper],
        all_papers: List[Paper],
        selected_tags: Sequence[str],
    ) -> List[Dict]:
        """Methods common in the corpus but under-used for the selected tags."""
        global_counts = Counter(m for p in all_papers for m in p.methods)
        tag_counts = Counter(m for p in tag_papers for m in p.methods)
        label = "+".join(selected_tags)

        gaps = []
        for method, global_count in global_counts.items():
            global_usage = round_half_up(global_count / len(all_papers) * 100)
            if global_usage < self.MIN_GLOBAL_USAGE_PCT:
                continue
            tag_usage = round_half_up(tag_counts[method] / len(tag_papers) * 100)
            gap = global_usage - tag_usage

            gaps.append({
                "method": method,
                "global_usage": global_usage,
                "tag_usage": tag_usage,
                "gap": gap,
                "opportunity": self._gap_opportunity(method, label, global_usage, tag_usage, gap),
            })

        gaps.sort(key=lambda x: x["gap"], reverse=True)
        return gaps[:self.MAX_METHOD_GAPS]

    @staticmethod
    def _gap_opportunity(method: str, label: str, global_usage: int, tag_usage: int, gap: int) -> str:
        if gap > 15:
            return (
                f'"{method}" is widely used in AI agent research ({global_usage}%) but '
                f"underexplored in {label} ({tag_usage}%). Strong opportunity for novel contributions."
            )
        if gap > 5:
            return f'Moderate gap — "{method}" could be better integrated with {label} work.'
        if gap < -10:
            return (
                f'"{method}" is already heavily used here ({tag_usage}%) — '
                "consider more novel methodological choices."
            )
        return "Well-balanced usage. Consider combining with other methods for differentiation."

    def find_cross_opportunities(self, all_papers: List[Paper], selected_tags: Sequence[str]) -> List[Dict]:
        """How strongly every other tag already overlaps with the selected tags."""
        cross = defaultdict(lambda: {"overlap": 0, "total": 0})
        label = "+".join(selected_tags)

        for paper in all_papers:
            has_selected = self._has_any_tag(paper, selected_tags)
            for tag in paper.tags:
                if tag in selected_tags:
                    continue
                cross[tag]["total"] += 1
                if has_selected:
                    cross[tag]["overlap"] += 1

        opportunities = []
        for tag, c in cross.items():
            if c["total"] < self.MIN_CROSS_TOTAL:
                continue
            overlap_pct = round_half_up(c["overlap"] / c["total"] * 100)

            if overlap_pct >= 30:
                trend = "established"
                suggestion = (
                    "Already well-studied combination. Need a very novel angle or strong "
                    "empirical contribution to stand out."
                )
            elif overlap_pct >= 10:
                trend = "emerging"
                suggestion = (
                    f"Growing intersection — good timing to publish! Combine {label} with {tag} "
                    "for a distinctive contribution."
                )
            else:
                trend = "rare"
                suggestion = (
                    "Very few papers explore this combination. High novelty potential but "
                    "needs strong motivation."
                )

            opportunities.append({
                "tag": tag,
                "overlap": c["overlap"],
                "total": c["total"],
                "overlap_pct": overlap_pct,
                "trend": trend,
                "suggestion": suggestion,
            })

        opportunities.sort(key=lambda x: (TREND_ORDER[x["trend"]], -x["overlap"]))
        return opportunities[:self.MAX_CROSS]

    def suggest_topics(
        self,
        tag_papers: List[Paper],
        all_papers: List[Paper],
        selected_tags: Sequence[str],
        sub_topics: List[Dict],
        method_gaps: List[Dict],
        cross_opportunities: List[Dict],
    ) -> List[Dict]:
        """Combine the findings above into concrete paper ideas."""
        main_tag = selected_tags[0]
        hot = [st for st in sub_topics if st["is_hot"] and not st["name"].startswith(METHOD_PREFIX)]
        gap_methods = [g for g in method_gaps if g["gap"] > self.SUGGESTION_GAP_PCT]
        emerging = [c for c in cross_opportunities if c["trend"] == "emerging"]
        rare = [c for c in cross_opportunities if c["trend"] == "rare"]

        suggestions = []

        # Hot sub-topic + under-used method
        if hot and gap_methods:
            top_hot, gap = hot[0], gap_methods[0]
            suggestions.append({
                "title": f"Apply {gap['method']} to {top_hot['name']} in {main_tag}",
                "confidence": "high",
                "reasoning": (
                    f'"{top_hot["name"]}" is growing rapidly (+{top_hot["growth"]}% YoY) and '
                    f'"{gap["method"]}" is underexplored in this area ({gap["tag_usage"]}% vs '
                    f'{gap["global_usage"]}% globally). This combination offers both novelty and timeliness.'
                ),
                "related_methods": [gap["method"]] + ([top_hot["name"]] if len(hot) > 1 else []),
                "target_venues": self.find_best_venues(tag_papers, top_hot["name"]),
            })

        # Emerging intersection
        if emerging:
            cross = emerging[0]
            suggestions.append({
                "title": f"{main_tag} × {cross['tag']}: Interdisciplinary Study",
                "confidence": "high",
                "reasoning": (
                    f"Only {cross['overlap_pct']}% overlap between {main_tag} and {cross['tag']} — "
                    f"a growing intersection with novelty potential. {cross['overlap']} existing "
                    "papers show feasibility without saturation."
                ),
                "related_methods": self.most_common_methods(all_papers, cross["tag"]),
                "target_venues": self.find_best_venues(all_papers, cross["tag"]),
            })

        # Survey
        if len(tag_papers) > self.SURVEY_MIN_PAPERS:
            years = [p.year for p in tag_papers]
            max_citations = max(p.citations for p in tag_papers)
            suggestions.append({
                "title": f"Systematic Survey of {main_tag} Research ({min(years)}-{max(years)})",
                "confidence": "medium",
                "reasoning": (
                    f"With {len(tag_papers)} papers in the corpus, the field is mature enough for a "
                    "comprehensive survey. Surveys in fast-growing areas are highly cited — the top "
                    f"paper in this space has {max_citations:,} citations."
                ),
                "related_methods": ["benchmark", "evaluation framework"],
                "target_venues": ["NeurIPS Datasets & Benchmarks", "ICLR", "CVPR"],
            })

        # Two under-used methods in one framework
        if len(gap_methods) >= 2:
            g1, g2 = gap_methods[0], gap_methods[1]
            suggestions.append({
                "title": f"Novel {g1['method']} + {g2['method']} Framework for {main_tag}",
                "confidence": "medium",
                "reasoning": (
                    f'Both "{g1["method"]}" ({g1["tag_usage"]}% local vs {g1["global_usage"]}% global) '
                    f'and "{g2["method"]}" ({g2["tag_usage"]}% local vs {g2["global_usage"]}% global) '
                    f"are underrepresented in {main_tag} research. A unified framework combining both "
                    "could fill this gap."
                ),
                "related_methods": [g1["method"], g2["method"]],
                "target_venues": self.find_best_venues(tag_papers),
            })

        # Rare intersection anchored on a hot sub-topic
        if rare and hot:
            niche = rare[0]
            suggestions.append({
                "title": f"Exploring {main_tag} through the Lens of {niche['tag']}",
                "confidence": "medium",
                "reasoning": (
                    f"Only {niche['overlap']} papers combine these two areas. High novelty but "
                    f'requires strong motivation. Leverage the hot sub-topic "{hot[0]["name"]}" '
                    "to anchor the contribution."
                ),
                "related_methods": self.most_common_methods(all_papers, niche["tag"]),
                "target_venues": self.find_best_venues(all_papers, niche["tag"]),
            })

        return suggestions

    @staticmethod
    def find_best_venues(papers: List[Paper], filter_tag: Optional[str] = None) -> List[str]:
        """Up to three most frequent prestige venues among the relevant papers."""
        if filter_tag:
            papers = [p for p in papers if filter_tag in p.tags or filter_tag in p.methods]

        venues = Counter(p.venue for p in papers)
        ranked = sorted(
            ((v, n) for v, n in venues.items() if is_top_venue(v, ADVISOR_TOP_VENUES)),
            key=lambda x: x[1],
            reverse=True,
        )
        return [v for v, _ in ranked[:3]]

    @staticmethod
    def most_common_methods(all_papers: List[Paper], tag: str, top_n: int = 2) -> List[str]:
        """Most used methods among papers carrying a tag."""
        methods = Counter(m for p in all_papers if tag in p.tags for m in p.methods)
        ranked = sorted(methods.items(), key=lambda x: x[1], reverse=True)
        return [m for m, _ in ranked[:top_n]]

    def venue_strategy(self, tag_papers: List[Paper]) -> List[Dict]:
        """Where the selected-tag papers get published, by volume."""
        stats: Dict[str, Dict[str, int]] = {}

        for paper in tag_papers:
            vs = stats.setdefault(paper.venue, {"count": 0, "avg_citations": 0})
            vs["count"] += 1
            # Running average, rounded at every step.
            vs["avg_citations"] = round_half_up(
                (vs["avg_citations"] * (vs["count"] - 1) + paper.citations) / vs["count"]
            )

        ranked = sorted(stats.items(), key=lambda x: x[1]["count"], reverse=True)

        strategy = []
        for venue, vs in ranked[:self.MAX_VENUES]:
            if is_top_venue(venue, ADVISOR_TOP_VENUES):
                strength = "top-tier"
            elif vs["count"] >= 5:
                strength = "active"
            else:
                strength = "moderate"
            strategy.append({
                "venue": venue,
                "count": vs["count"],
                "avg_citations": vs["avg_citations"],
                "strength": strength,
            })

        return strategy
