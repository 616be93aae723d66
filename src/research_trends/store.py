"""
Paper Store
===========

Loads the paper corpus once, validates every record and keeps the result
in memory for the rest of the process.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from research_trends import config
from research_trends.models import Paper

logger = logging.getLogger(__name__)


class PaperStore:
    """Lazily-loaded, read-only paper collection."""

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        """Initialize the store.

        Args:
            path: JSON file holding an array of paper records. Defaults to the
                configured data path.
        """
        self.path = Path(path) if path is not None else config.DATA_PATH
        self._papers: Optional[List[Paper]] = None
        self._records: Optional[List[Any]] = None
        self._validation_errors: List[str] = []

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "PaperStore":
        """Build a store over in-memory records instead of a file."""
        store = cls()
        store._records = list(records)
        return store

    def load(self) -> List[Paper]:
        """Load and validate papers, parsing only on the first call."""
        if self._papers is not None:
            return self._papers

        records = self._records
        if records is None:
            records = self._read_file()

        self._validation_errors = []
        self._papers = [self._validate(i, raw) for i, raw in enumerate(records)]

        if self._validation_errors:
            logger.warning(
                "Paper validation warnings (%d): %s",
                len(self._validation_errors),
                "; ".join(self._validation_errors[:20]),
            )
        logger.debug("Loaded %d papers", len(self._papers))

        return self._papers

    def clear(self) -> None:
        """Drop the cached corpus; the next load() re-reads the source."""
        self._papers = None
        self._validation_errors = []

    def _read_file(self) -> List[Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load papers from %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.error("Expected a JSON array of papers in %s, got %s", self.path, type(data).__name__)
            return []
        return data

    def _validate(self, index: int, raw: Any) -> Paper:
        """Validate one record, substituting defaults for invalid fields."""
        if not isinstance(raw, dict):
            self._validation_errors.append(f"{index}: expected an object, got {type(raw).__name__}")
            return Paper()

        try:
            return Paper.model_validate(raw)
        except ValidationError as e:
            bad_fields = set()
            for issue in e.errors():
                loc = [str(part) for part in issue["loc"]]
                self._validation_errors.append(f"{index}.{'.'.join(loc)}: {issue['msg']}")
                if loc:
                    bad_fields.add(loc[0])

        cleaned = {k: v for k, v in raw.items() if k not in bad_fields}
        try:
            return Paper.model_validate(cleaned)
        except ValidationError:
            return Paper()

    def get_paper_by_id(self, paper_id: str) -> Optional[Paper]:
        """Get a single paper by ID."""
        for paper in self.load():
            if paper.id == paper_id:
                return paper
        return None

    def get_all_tags(self) -> List[str]:
        """All unique tags, sorted."""
        return sorted({t for p in self.load() for t in p.tags})

    def get_all_methods(self) -> List[str]:
        """All unique methods, sorted."""
        return sorted({m for p in self.load() for m in p.methods})

    def get_year_range(self) -> Dict[str, int]:
        """Min and max publication year (2020-2026 for an empty corpus)."""
        papers = self.load()
        if not papers:
            return {"min": 2020, "max": 2026}
        years = [p.year for p in papers]
        return {"min": min(years), "max": max(years)}

    def get_validation_errors(self) -> List[str]:
        """Validation messages from the last load."""
        return list(self._validation_errors)


_default_store: Optional[PaperStore] = None


def get_default_store() -> PaperStore:
    """Process-wide store for the configured data path."""
    global _default_store
    if _default_store is None:
        _default_store = PaperStore(config.DATA_PATH)
    return _default_store


def reset_default_store() -> None:
    """Tear down the process-wide store."""
    global _default_store
    _default_store = None
