"""
Video Hits Ranker

This module provides the VideoHitsRanker class that turns a recalled
candidate list into the final search results.

Ranking steps:
    1. score: attach a transient relevance score to a copy of each hit
    2. sort: stable sort by score desc, so ties keep recall order
    3. dedup: keep the first (highest scored) occurrence of each id
    4. truncate: keep the top_k hits
    5. strip: drop the relevance score before returning

Usage:
    >>> from ranks.ranker import VideoHitsRanker
    >>> ranker = VideoHitsRanker()
    >>> results = ranker.rank(hits, query="react", tokens=["react"])
"""

import time as _time

from ranks.constants import RANK_TOP_K, RANK_SCORE_FIELD
from ranks.scorers import RelevanceScorer
from videos.structure import get_record_id


class VideoHitsRanker:
    def __init__(self, score_field: str = RANK_SCORE_FIELD):
        self.score_field = score_field
        self.relevance_scorer = RelevanceScorer()

    def score_hits(
        self, hits: list[dict], query: str, tokens: list[str], now_ts: float = None
    ) -> list[dict]:
        """Return shallow copies of `hits` with relevance score attached.

        Input hits are left untouched. All hits are scored against one `now_ts`.
        """
        if now_ts is None:
            now_ts = _time.time()
        scored_hits = []
        for hit in hits:
            score = self.relevance_scorer.calc(hit, query, tokens, now_ts=now_ts)
            scored_hits.append({**hit, self.score_field: score})
        return scored_hits

    def sort_hits(self, hits: list[dict]) -> list[dict]:
        # sorted() is stable, so reverse=True keeps recall order for ties
        return sorted(hits, key=lambda x: x.get(self.score_field, 0), reverse=True)

    def dedup_hits(self, hits: list[dict]) -> list[dict]:
        """Keep first occurrence of each id. Hits without id are all kept."""
        seen_ids = set()
        deduped_hits = []
        for hit in hits:
            hit_id = get_record_id(hit)
            if hit_id is not None:
                if hit_id in seen_ids:
                    continue
                seen_ids.add(hit_id)
            deduped_hits.append(hit)
        return deduped_hits

    def strip_scores(self, hits: list[dict]) -> list[dict]:
        return [
            {k: v for k, v in hit.items() if k != self.score_field} for hit in hits
        ]

    def rank(
        self,
        hits: list[dict],
        query: str,
        tokens: list[str],
        top_k: int = RANK_TOP_K,
        now_ts: float = None,
        keep_scores: bool = False,
    ) -> list[dict]:
        """Score, sort, dedup and truncate hits.

        Args:
            hits: Candidates in recall order.
            query: Raw query string.
            tokens: Normalized query tokens.
            top_k: Max number of results.
            now_ts: Current timestamp for recency scoring. Defaults to time.time(),
                read once per call.
            keep_scores: Keep the relevance score field, for debugging only.

        Returns:
            Ranked hits, highest relevance first.
        """
        if now_ts is None:
            now_ts = _time.time()
        scored_hits = self.score_hits(hits, query, tokens, now_ts=now_ts)
        sorted_hits = self.sort_hits(scored_hits)
        top_hits = self.dedup_hits(sorted_hits)[:top_k]
        if keep_scores:
            return top_hits
        return self.strip_scores(top_hits)
