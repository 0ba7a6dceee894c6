"""
Base Types for Recall System

Provides the recall result data class and the video repository contract
that every candidate source (Mongo, in-memory corpus) implements.
"""

from abc import abstractmethod
from dataclasses import dataclass, field

from videos.constants import RECALL_SORT


@dataclass
class RecallResult:
    """Result from a single recall call.

    Attributes:
        hits: Candidate records, in repository order (views desc, createdAt desc).
        mode: Recall mode used ("broad" or "staged").
        pattern: Raw query pattern sent to the repository.
        fuzzy_terms: Fuzzy terms sent to the repository (empty in broad mode).
        conditions: Staged condition plan built for the query.
        took_ms: Time taken for the repository call in milliseconds.
    """

    hits: list[dict]
    mode: str = "broad"
    pattern: str = ""
    fuzzy_terms: list[str] = field(default_factory=list)
    conditions: dict = field(default_factory=dict)
    took_ms: float = 0.0


class VideoRepository:
    """Read-only source of video records.

    Implementations match `pattern` as a case-insensitive literal substring
    of any of `fields`, sort by views desc then createdAt desc, and cap to
    `limit`. When `fuzzy_terms` is given, a record also matches if any term's
    characters appear in order in any of `fuzzy_fields`.
    """

    sort = RECALL_SORT

    @abstractmethod
    def find_by_text_match(
        self,
        fields: list[str],
        pattern: str,
        limit: int,
        fuzzy_terms: list[str] = [],
        fuzzy_fields: list[str] = [],
    ) -> list[dict]:
        """Return records matching `pattern` in any of `fields`."""
        pass
