"""
Data Models
===========

Paper record and the literal parameter types shared by the analyzers.

Derived results (trend points, distributions, graphs, insights, advice and
predictions) are plain dictionaries so they can be dumped to JSON as-is.
"""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

GroupBy = Literal["month", "year"]
Metric = Literal["count", "citations"]
CooccurrenceType = Literal["tags", "methods"]

GROUP_BY_VALUES = ("month", "year")
METRIC_VALUES = ("count", "citations")
COOCCURRENCE_TYPES = ("tags", "methods")


class Paper(BaseModel):
    """One corpus record. Every field has a default so partial records load."""

    model_config = ConfigDict(frozen=True)

    id: str = "unknown"
    title: str = "Untitled"
    authors: Tuple[str, ...] = ()
    year: int = Field(default=2023, ge=2000, le=2030)
    month: int = Field(default=1, ge=1, le=12)
    venue: str = "Unknown"
    url: str = ""
    abstract: str = ""
    tags: Tuple[str, ...] = ()
    methods: Tuple[str, ...] = ()
    datasets: Tuple[str, ...] = ()
    citations: int = Field(default=0, ge=0)


def json_default(obj):
    """json.dump hook: Paper records become plain dicts, anything else a string."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    return str(obj)
