"""
Word Recall

Retrieves a bounded, pre-sorted candidate set for a raw query from a
VideoRepository. The repository ordering (views desc, createdAt desc) is a
pre-filter only; final order is decided by the ranker.

Recall modes:
    - broad (default): the staged condition plan is built and logged, but
      retrieval uses only the broad "any field contains query" match.
    - staged: long tokens are also sent as fuzzy terms, so records whose
      title or description contains a typo-tolerant form of them are
      retrievable too.

Failures are not retried here and propagate to the caller.
"""

import time

from tclogger import logger, dict_to_str

from recalls.base import RecallResult, VideoRepository
from recalls.conditions import StagedConditionsBuilder
from videos.constants import SEARCH_MATCH_FIELDS, FUZZY_MATCH_FIELDS
from videos.constants import SEARCH_RECALL_LIMIT
from videos.constants import RECALL_MODE_TYPE, RECALL_MODE


class WordRecall:
    """Candidate retriever over a video repository.

    Example:
        >>> recall = WordRecall(MemoryVideoRepository(videos))
        >>> res = recall.recall("react tutorial", ["react", "tutorial"])
        >>> len(res.hits) <= 100
        True
    """

    def __init__(
        self,
        repository: VideoRepository,
        mode: RECALL_MODE_TYPE = RECALL_MODE,
        verbose: bool = False,
    ):
        self.repository = repository
        self.mode = mode
        self.verbose = verbose
        self.conditions_builder = StagedConditionsBuilder()

    def recall(
        self,
        query: str,
        tokens: list[str] = [],
        match_fields: list[str] = SEARCH_MATCH_FIELDS,
        limit: int = SEARCH_RECALL_LIMIT,
        mode: RECALL_MODE_TYPE = None,
        verbose: bool = None,
    ) -> RecallResult:
        """Fetch candidates whose `match_fields` contain `query`.

        Args:
            query: Raw (un-normalized) query string.
            tokens: Normalized tokens, used for the staged condition plan.
            match_fields: Record fields to match the raw query against.
            limit: Max number of candidates.
            mode: Recall mode, defaults to the instance mode.
            verbose: Log the condition plan and recall stats.

        Returns:
            RecallResult with candidates in repository order.
        """
        mode = mode or self.mode
        verbose = self.verbose if verbose is None else verbose

        conditions = {}
        fuzzy_terms = []
        if tokens:
            conditions = self.conditions_builder.build(query, tokens)
            if mode == "staged":
                fuzzy_terms = conditions["fuzzy_terms"]
            if verbose:
                logger.note(f"> Staged conditions ({mode}):")
                logger.mesg(dict_to_str(conditions), indent=4)

        start = time.perf_counter()
        hits = self.repository.find_by_text_match(
            fields=match_fields,
            pattern=query,
            limit=limit,
            fuzzy_terms=fuzzy_terms,
            fuzzy_fields=FUZZY_MATCH_FIELDS if fuzzy_terms else [],
        )
        took_ms = round((time.perf_counter() - start) * 1000, 2)

        if verbose:
            logger.mesg(f"  * Recalled {len(hits)} candidates in {took_ms} ms")

        return RecallResult(
            hits=hits,
            mode=mode,
            pattern=query,
            fuzzy_terms=fuzzy_terms,
            conditions=conditions,
            took_ms=took_ms,
        )
