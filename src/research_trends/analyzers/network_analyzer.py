"""
Network Analysis Module
=======================
Build co-occurrence networks of tags or methods:
- Item frequency (node weight)
- Pairwise co-occurrence within papers (edge weight)
- Edge pruning by minimum count
"""

from collections import Counter
from typing import Dict, List, Tuple
import logging

from research_trends.models import COOCCURRENCE_TYPES, Paper

logger = logging.getLogger(__name__)


class NetworkAnalyzer:
    """Analyze which tags or methods appear together in papers."""

    DEFAULT_MIN_COUNT = 2

    def compute_cooccurrence(
        self,
        papers: List[Paper],
        field: str = "tags",
        min_count: int = DEFAULT_MIN_COUNT,
    ) -> Dict[str, List[Dict]]:
        """Compute the co-occurrence graph for tags or methods.

        Pairs are counted over positions in each paper's list (i < j), so an
        item listed twice in one paper pairs with every other item twice.

        Args:
            papers: Papers to analyze.
            field: "tags" or "methods".
            min_count: Minimum pair count for a link to be kept.

        Returns:
            {"nodes": [...], "links": [...]}; only items that take part in a
            surviving link become nodes, weighted by their overall frequency.
        """
        if field not in COOCCURRENCE_TYPES:
            raise ValueError(f"Unknown co-occurrence field: {field}")

        logger.debug("Building %s co-occurrence network for %d papers", field, len(papers))

        frequency: Counter = Counter()
        pair_counts: Counter = Counter()

        for paper in papers:
            items = getattr(paper, field)
            frequency.update(items)

            for i, a in enumerate(items):
                for b in items[i + 1:]:
                    pair: Tuple[str, str] = tuple(sorted((a, b)))
                    pair_counts[pair] += 1

        links = [
            {"source": source, "target": target, "value": count}
            for (source, target), count in pair_counts.items()
            if count >= min_count
        ]

        linked = {}
        for link in links:
            linked.setdefault(link["source"], None)
            linked.setdefault(link["target"], None)

        nodes = [
            {"id": name, "name": name, "value": frequency[name]}
            for name in linked
        ]

        return {"nodes": nodes, "links": links}
