"""
Query Parameter Parsing
=======================

Turns raw string parameters (URL query strings, CLI values, dashboard
widgets) into the typed inputs the analyzers expect.
"""

import math
from typing import Any, Dict, List, Mapping, Optional

from research_trends.models import COOCCURRENCE_TYPES, GROUP_BY_VALUES, METRIC_VALUES


def parse_group_by(value: Optional[str]) -> str:
    """Parse groupBy parameter, defaulting to "month"."""
    return value if value in GROUP_BY_VALUES else "month"


def parse_metric(value: Optional[str]) -> str:
    """Parse metric parameter, defaulting to "count"."""
    return value if value in METRIC_VALUES else "count"


def parse_cooccurrence_type(value: Optional[str]) -> str:
    """Parse co-occurrence type parameter, defaulting to "tags"."""
    return value if value in COOCCURRENCE_TYPES else "tags"


def parse_csv(value: Optional[str]) -> List[str]:
    """Parse a comma-separated string into a list of non-empty items."""
    if not value:
        return []
    return [s.strip() for s in value.split(",") if s.strip()]


def parse_int(value: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """Parse an integer (flooring decimals), falling back to default."""
    if not value:
        return default
    try:
        n = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(n) or math.isinf(n):
        return default
    return math.floor(n)


def parse_search_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Parse filter parameters from a query-string style mapping."""
    return {
        "q": params.get("q") or None,
        "tags": parse_csv(params.get("tags")),
        "methods": parse_csv(params.get("methods")),
        "year_from": parse_int(params.get("yearFrom")),
        "year_to": parse_int(params.get("yearTo")),
    }
