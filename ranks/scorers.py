"""
Scoring Classes for Video Ranking

This module provides scorer classes that turn a video record and a query
into additive relevance signals.

Scorers:
    - PopularityScorer: bounded boost from view count
    - RecencyScorer: tiered boost from upload age
    - RelevanceScorer: phrase + token + popularity + recency signals

All scorers are pure: the same (record, query, now_ts) always gives the
same score.
"""

import time as _time

from videos.constants import TITLE_FIELD, DESC_FIELD
from videos.constants import OWNER_NAME_FIELD, OWNER_EMAIL_FIELD
from videos.structure import get_record_text, get_record_views
from videos.structure import get_record_created_ts
from ranks.constants import (
    # Phrase signals
    TITLE_PHRASE_BONUS,
    DESC_PHRASE_BONUS,
    TITLE_PREFIX_BONUS,
    # Token signals
    TITLE_ALL_TOKENS_BONUS,
    DESC_ALL_TOKENS_BONUS,
    TITLE_TOKEN_BONUS,
    DESC_TOKEN_BONUS,
    OWNER_NAME_TOKEN_BONUS,
    OWNER_EMAIL_TOKEN_BONUS,
    # Popularity
    POPULARITY_VIEWS_UNIT,
    POPULARITY_MAX_BONUS,
    # Recency
    SECONDS_PER_DAY,
    RECENCY_BONUS_TIERS,
)


class PopularityScorer:
    """Popularity boost based on view count.

    Example:
        >>> scorer = PopularityScorer()
        >>> scorer.calc(500)
        5.0
        >>> scorer.calc(1_000_000)
        20
    """

    def __init__(
        self,
        views_unit: float = POPULARITY_VIEWS_UNIT,
        max_bonus: float = POPULARITY_MAX_BONUS,
    ):
        self.views_unit = views_unit
        self.max_bonus = max_bonus

    def calc(self, views: float) -> float:
        return min(max(views, 0) / self.views_unit, self.max_bonus)


class RecencyScorer:
    """Tiered recency boost based on days since upload.

    Time tiers (default):
        - < 7 days:  +10
        - < 30 days: +5
        - otherwise: +0

    Records without creation time are treated as uploaded at epoch zero,
    so they never get a boost.
    """

    def __init__(self, tiers: list[tuple[float, float]] = RECENCY_BONUS_TIERS):
        self.tiers = tiers

    def calc_age_days(self, created_ts: float, now_ts: float = None) -> float:
        if now_ts is None:
            now_ts = _time.time()
        return (now_ts - created_ts) / SECONDS_PER_DAY

    def calc(self, created_ts: float, now_ts: float = None) -> float:
        age_days = self.calc_age_days(created_ts, now_ts=now_ts)
        for max_age_days, bonus in self.tiers:
            if age_days < max_age_days:
                return bonus
        return 0


class RelevanceScorer:
    """Composite relevance scorer for a video record against a query.

    Signals are independent and summed. Text comparisons are
    case-insensitive, against the lowercased raw query (not trimmed) and
    the normalized token list. Per-token signals apply once per token
    occurrence, so `"react react"` doubles them.

    Example:
        >>> scorer = RelevanceScorer()
        >>> video = {"title": "React Tutorial", "description": "", "views": 0}
        >>> scorer.calc(video, "react", ["react"], now_ts=0)
        270.0
    """

    def __init__(self):
        self.popularity_scorer = PopularityScorer()
        self.recency_scorer = RecencyScorer()

    def calc_phrase_signals(self, title: str, desc: str, query: str) -> dict:
        return {
            "title_phrase": TITLE_PHRASE_BONUS if query in title else 0,
            "desc_phrase": DESC_PHRASE_BONUS if query in desc else 0,
            "title_prefix": TITLE_PREFIX_BONUS if title.startswith(query) else 0,
        }

    def calc_token_signals(
        self,
        title: str,
        desc: str,
        owner_name: str,
        owner_email: str,
        tokens: list[str],
    ) -> dict:
        signals = {
            "title_all_tokens": 0,
            "desc_all_tokens": 0,
            "title_tokens": 0,
            "desc_tokens": 0,
            "owner_name_tokens": 0,
            "owner_email_tokens": 0,
        }
        # all() over empty tokens is True, as in "every token present"
        if all(token in title for token in tokens):
            signals["title_all_tokens"] = TITLE_ALL_TOKENS_BONUS
        if all(token in desc for token in tokens):
            signals["desc_all_tokens"] = DESC_ALL_TOKENS_BONUS

        for token in tokens:
            if token in title:
                signals["title_tokens"] += TITLE_TOKEN_BONUS
            if token in desc:
                signals["desc_tokens"] += DESC_TOKEN_BONUS
            if token in owner_name:
                signals["owner_name_tokens"] += OWNER_NAME_TOKEN_BONUS
            if token in owner_email:
                signals["owner_email_tokens"] += OWNER_EMAIL_TOKEN_BONUS
        return signals

    def calc_signals(
        self, hit: dict, query: str, tokens: list[str], now_ts: float = None
    ) -> dict:
        """Calculate each relevance signal of `hit` separately.

        Args:
            hit: Video record.
            query: Raw query string.
            tokens: Normalized query tokens.
            now_ts: Current timestamp. Defaults to time.time().

        Returns:
            Dict of signal name -> score contribution.
        """
        query = (query or "").lower()
        title = get_record_text(hit, TITLE_FIELD).lower()
        desc = get_record_text(hit, DESC_FIELD).lower()
        owner_name = get_record_text(hit, OWNER_NAME_FIELD).lower()
        owner_email = get_record_text(hit, OWNER_EMAIL_FIELD).lower()

        signals = {}
        signals.update(self.calc_phrase_signals(title, desc, query))
        signals.update(
            self.calc_token_signals(title, desc, owner_name, owner_email, tokens)
        )
        signals["popularity"] = self.popularity_scorer.calc(get_record_views(hit))
        signals["recency"] = self.recency_scorer.calc(
            get_record_created_ts(hit), now_ts=now_ts
        )
        return signals

    def calc(
        self, hit: dict, query: str, tokens: list[str], now_ts: float = None
    ) -> float:
        signals = self.calc_signals(hit, query, tokens, now_ts=now_ts)
        return sum(signals.values())
