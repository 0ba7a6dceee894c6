"""
Staged Match Conditions

Builds the four-stage condition plan for a query:

1. exact: the whole query appears in title or description
2. all_words: every token appears in title, description or uploader fields
3. any_word: at least one token appears in any of those fields
4. fuzzy: a long token's characters appear in order, with arbitrary gaps,
   in title or description (typo tolerance)

Conditions are expressed as Mongo filter dicts, so the plan can be logged
as-is or handed to a Mongo collection. Only the fuzzy stage is ever used for
retrieval, and only in "staged" recall mode.
"""

import re

from videos.constants import SEARCH_MATCH_FIELDS, SUGGEST_MATCH_FIELDS
from videos.constants import FUZZY_MATCH_FIELDS
from videos.constants import FUZZY_MIN_TERM_LEN, FUZZY_MAX_TERM_LEN, FUZZY_MAX_TERMS


def regex_clause(field: str, pattern: str) -> dict:
    return {field: {"$regex": pattern, "$options": "i"}}


def substring_clause(field: str, text: str) -> dict:
    """Case-insensitive literal substring match of `text` in `field`."""
    return regex_clause(field, re.escape(text))


def fuzzy_pattern(term: str) -> str:
    """Regex matching the chars of `term` in order, with arbitrary gaps.

    Each gap is a negated class of the next char (`a[^b]*b[^c]*c`), so a gap
    can only end at one position and a failed match never backtracks
    combinatorially. Chars are escaped, so user input stays literal.
    """
    if not term:
        return ""
    parts = [re.escape(term[0])]
    for ch in term[1:]:
        ch = re.escape(ch)
        parts.append(f"[^{ch}]*{ch}")
    return "".join(parts)


def is_fuzzy_match(term: str, text: str) -> bool:
    """Check whether chars of `term` appear in order in `text`.

    Case-insensitive, linear in len(text), no backtracking.
    """
    if not term:
        return True
    term = term.lower()
    i = 0
    for ch in text.lower():
        if ch == term[i]:
            i += 1
            if i == len(term):
                return True
    return False


def select_fuzzy_terms(
    tokens: list[str],
    min_len: int = FUZZY_MIN_TERM_LEN,
    max_len: int = FUZZY_MAX_TERM_LEN,
    max_terms: int = FUZZY_MAX_TERMS,
) -> list[str]:
    """Pick tokens worth fuzzing: long enough, not too long, unique, bounded."""
    terms = []
    for token in tokens:
        if min_len <= len(token) <= max_len and token not in terms:
            terms.append(token)
        if len(terms) >= max_terms:
            break
    return terms


class StagedConditionsBuilder:
    def __init__(
        self,
        match_fields: list[str] = SEARCH_MATCH_FIELDS,
        phrase_fields: list[str] = SUGGEST_MATCH_FIELDS,
        fuzzy_fields: list[str] = FUZZY_MATCH_FIELDS,
    ):
        self.match_fields = match_fields
        self.phrase_fields = phrase_fields
        self.fuzzy_fields = fuzzy_fields

    def broad(self, query: str) -> dict:
        return {"$or": [substring_clause(f, query) for f in self.match_fields]}

    def exact(self, query: str) -> dict:
        return {"$or": [substring_clause(f, query) for f in self.phrase_fields]}

    def all_words(self, tokens: list[str]) -> dict:
        return {
            "$and": [
                {"$or": [substring_clause(f, token) for f in self.match_fields]}
                for token in tokens
            ]
        }

    def any_word(self, tokens: list[str]) -> dict:
        return {
            "$or": [
                substring_clause(f, token)
                for token in tokens
                for f in self.match_fields
            ]
        }

    def fuzzy(self, terms: list[str], fields: list[str] = None) -> dict:
        if not terms:
            return {}
        fields = fields or self.fuzzy_fields
        return {
            "$or": [
                {"$or": [regex_clause(f, fuzzy_pattern(term)) for f in fields]}
                for term in terms
            ]
        }

    def build(self, query: str, tokens: list[str]) -> dict:
        fuzzy_terms = select_fuzzy_terms(tokens)
        conditions = {
            "exact": self.exact(query),
            "all_words": self.all_words(tokens),
            "any_word": self.any_word(tokens),
        }
        if fuzzy_terms:
            conditions["fuzzy"] = self.fuzzy(fuzzy_terms)
        conditions["fuzzy_terms"] = fuzzy_terms
        return conditions
