"""
Ranking Constants and Configuration

This module contains all constants related to relevance scoring and ranking.

Organization:
    1. Phrase Signals - whole query matched against title/description
    2. Token Signals - every token / each token matched against fields
    3. Popularity Scoring - view-count based boost
    4. Recency Scoring - age based boost
    5. Ranking Limits - result count limits
"""

# =============================================================================
# Phrase Signals
# =============================================================================

TITLE_PHRASE_BONUS = 100
DESC_PHRASE_BONUS = 50
TITLE_PREFIX_BONUS = 80

# =============================================================================
# Token Signals
# =============================================================================

# All tokens present in field
TITLE_ALL_TOKENS_BONUS = 60
DESC_ALL_TOKENS_BONUS = 30

# Per token occurrence in query; repeated tokens are counted repeatedly
TITLE_TOKEN_BONUS = 20
DESC_TOKEN_BONUS = 10
OWNER_NAME_TOKEN_BONUS = 15
OWNER_EMAIL_TOKEN_BONUS = 5

# =============================================================================
# Popularity Scoring
# =============================================================================

# boost = min(views / POPULARITY_VIEWS_UNIT, POPULARITY_MAX_BONUS)
POPULARITY_VIEWS_UNIT = 100
POPULARITY_MAX_BONUS = 20

# =============================================================================
# Recency Scoring
# =============================================================================

SECONDS_PER_DAY = 24 * 60 * 60

# (max_age_days, bonus), checked in order, first match wins
RECENCY_BONUS_TIERS = [
    (7, 10),
    (30, 5),
]

# =============================================================================
# Ranking Limits
# =============================================================================

RANK_TOP_K = 50
RANK_SCORE_FIELD = "relevance_score"
