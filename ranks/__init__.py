"""
Ranks Module - Relevance Scoring and Ranking

This module turns recalled candidates into the final ranked search results.

Core Design:
    Each candidate gets an additive relevance score from independent signals:
    1. Phrase signals: whole query in title (+100), in description (+50),
       title starting with query (+80)
    2. Token signals: all tokens in title (+60) / description (+30), and
       per token occurrence in title (+20), description (+10),
       uploader name (+15), uploader email (+5)
    3. Popularity: min(views / 100, 20)
    4. Recency: +10 under 7 days, +5 under 30 days

    Candidates are then stable-sorted by score, deduplicated by id,
    truncated to the top 50, and stripped of the transient score.

Module Structure:
    - constants.py: Signal weights and ranking limits
    - scorers.py: PopularityScorer, RecencyScorer, RelevanceScorer
    - ranker.py: VideoHitsRanker (score, sort, dedup, truncate, strip)

Usage:
    from ranks.ranker import VideoHitsRanker
    from ranks.scorers import RelevanceScorer
"""
