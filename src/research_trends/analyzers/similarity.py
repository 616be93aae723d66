"""
Similarity Module
=================
Rank papers by Jaccard similarity of their tag + method sets.
"""

from typing import Dict, Iterable, List

from research_trends.models import Paper


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Intersection over union of two sets; 0 when both are empty."""
    set_a = set(a)
    set_b = set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


class SimilarityFinder:
    """Find papers that share tags and methods with a target paper."""

    DEFAULT_TOP_N = 8

    @staticmethod
    def features(paper: Paper) -> List[str]:
        return [*paper.tags, *paper.methods]

    def find_similar_papers(
        self,
        target: Paper,
        all_papers: List[Paper],
        top_n: int = DEFAULT_TOP_N,
    ) -> List[Dict]:
        """Most similar papers to target, excluding itself and zero matches."""
        target_features = self.features(target)

        scored = []
        for paper in all_papers:
            if paper.id == target.id:
                continue
            similarity = jaccard_similarity(target_features, self.features(paper))
            if similarity > 0:
                scored.append({"paper": paper, "similarity": similarity})

        scored.sort(key=lambda x: x["similarity"], reverse=True)
        return scored[:top_n]
