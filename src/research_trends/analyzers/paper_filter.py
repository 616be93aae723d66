"""
Paper Filter Module
===================
Predicate-based subset selection over the corpus:
- Free-text query over title, abstract, authors, tags and methods
- Tag and method filters (match any)
- Inclusive year range
"""

from typing import Iterable, List, Optional

from research_trends.models import Paper


class PaperFilter:
    """Select papers matching every supplied criterion."""

    def filter(
        self,
        papers: Iterable[Paper],
        q: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        methods: Optional[Iterable[str]] = None,
        year_from: Optional[int] = None,
        year_to: Optional[int] = None,
    ) -> List[Paper]:
        """Filter papers, preserving their original order.

        Args:
            papers: Papers to filter.
            q: Case-insensitive substring searched in title, abstract, authors,
                tags and methods.
            tags: Keep papers carrying at least one of these tags.
            methods: Keep papers using at least one of these methods.
            year_from: Inclusive lower bound on year.
            year_to: Inclusive upper bound on year.

        Returns:
            New list of matching papers.
        """
        tags = self._as_list(tags)
        methods = self._as_list(methods)
        query = q.lower() if q else ""

        return [
            p for p in papers
            if self._matches(p, query, tags, methods, year_from, year_to)
        ]

    @staticmethod
    def _as_list(values: Optional[Iterable[str]]) -> List[str]:
        # A bare string is one value, not a sequence of characters.
        if isinstance(values, str):
            return [values] if values else []
        return list(values or [])

    def _matches(
        self,
        paper: Paper,
        query: str,
        tags: List[str],
        methods: List[str],
        year_from: Optional[int],
        year_to: Optional[int],
    ) -> bool:
        if year_from and paper.year < year_from:
            return False
        if year_to and paper.year > year_to:
            return False
        if tags and not any(t in paper.tags for t in tags):
            return False
        if methods and not any(m in paper.methods for m in methods):
            return False
        if query:
            fields = [paper.title, paper.abstract, *paper.authors, *paper.tags, *paper.methods]
            if not any(query in field.lower() for field in fields):
                return False
        return True


def filter_papers(
    papers: Iterable[Paper],
    q: Optional[str] = None,
    tags: Optional[Iterable[str]] = None,
    methods: Optional[Iterable[str]] = None,
    year_from: Optional[int] = None,
    year_to: Optional[int] = None,
) -> List[Paper]:
    """Shortcut for PaperFilter().filter(...)."""
    return PaperFilter().filter(
        papers, q=q, tags=tags, methods=methods, year_from=year_from, year_to=year_to
    )
