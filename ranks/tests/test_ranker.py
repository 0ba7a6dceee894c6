"""
Tests for ranks/ranker.py — sort, dedup, truncate and strip.
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from tclogger import logger

import ranks.ranker
import ranks.scorers

from ranks.constants import RANK_SCORE_FIELD
from ranks.ranker import VideoHitsRanker

NOW = datetime(2026, 10, 18, tzinfo=timezone.utc)
NOW_TS = NOW.timestamp()
OLD = NOW - timedelta(days=400)


def make_hit(vid: str, title: str = "", desc: str = "", views: int = 0, created_at=OLD):
    return {
        "_id": vid,
        "title": title,
        "description": desc,
        "views": views,
        "createdAt": created_at,
    }


def test_rank_orders_by_score_desc():
    logger.note("> Test: rank by score")
    ranker = VideoHitsRanker()
    hits = [
        make_hit("desc_only", desc="python"),
        make_hit("title", title="python"),
        make_hit("none", title="other"),
    ]
    ranked = ranker.rank(hits, "python", ["python"], now_ts=NOW_TS)
    assert [h["_id"] for h in ranked] == ["title", "desc_only", "none"]
    logger.success("  PASSED")


def test_ties_keep_recall_order():
    ranker = VideoHitsRanker()
    hits = [make_hit(f"v{i}", title="same title") for i in range(5)]
    ranked = ranker.rank(hits, "same", ["same"], now_ts=NOW_TS)
    assert [h["_id"] for h in ranked] == ["v0", "v1", "v2", "v3", "v4"]


def test_dedup_keeps_first_occurrence():
    ranker = VideoHitsRanker()
    hits = [
        make_hit("a", title="go"),
        make_hit("b", title="go go go"),
        {**make_hit("a", title="go"), "extra": "dup"},
    ]
    ranked = ranker.rank(hits, "go", ["go"], now_ts=NOW_TS)
    assert [h["_id"] for h in ranked] == ["a", "b"]
    assert "extra" not in ranked[0]


def test_dedup_compares_ids_as_strings():
    ranker = VideoHitsRanker()
    hits = [{"_id": 1, "title": "x"}, {"_id": "1", "title": "x"}, {"title": "x"}]
    deduped = ranker.dedup_hits(hits)
    # hits without id cannot collide
    assert len(deduped) == 2


def test_truncates_to_top_k():
    ranker = VideoHitsRanker()
    hits = [make_hit(f"v{i}", title="rust", views=i) for i in range(80)]
    ranked = ranker.rank(hits, "rust", ["rust"], now_ts=NOW_TS)
    assert len(ranked) == 50
    assert len({h["_id"] for h in ranked}) == 50
    # higher views give higher popularity boost
    assert ranked[0]["_id"] == "v79"


def test_scores_are_stripped_and_inputs_untouched():
    ranker = VideoHitsRanker()
    hits = [make_hit("a", title="go")]
    ranked = ranker.rank(hits, "go", ["go"], now_ts=NOW_TS)
    assert RANK_SCORE_FIELD not in ranked[0]
    assert RANK_SCORE_FIELD not in hits[0]
    kept = ranker.rank(hits, "go", ["go"], now_ts=NOW_TS, keep_scores=True)
    assert kept[0][RANK_SCORE_FIELD] > 0


def test_react_tutorial_scenario():
    ranker = VideoHitsRanker()
    v2 = make_hit(
        "v2",
        title="Vue Guide",
        desc="also mentions react tutorial briefly",
        views=10,
        created_at=NOW - timedelta(days=365),
    )
    v1 = make_hit(
        "v1",
        title="React Tutorial for Beginners",
        desc="intro video",
        views=500,
        created_at=NOW,
    )
    ranked = ranker.rank([v2, v1], "react tutorial", ["react", "tutorial"], now_ts=NOW_TS)
    assert [h["_id"] for h in ranked] == ["v1", "v2"]


def test_rank_reads_clock_once_for_all_hits(monkeypatch):
    logger.note("> Test: one clock read per rank call")
    calls = []

    def ranker_clock():
        calls.append(NOW_TS)
        return NOW_TS

    def scorer_clock():
        raise AssertionError("scorer must use the ranker's now_ts")

    monkeypatch.setattr(ranks.ranker, "_time", SimpleNamespace(time=ranker_clock))
    monkeypatch.setattr(ranks.scorers, "_time", SimpleNamespace(time=scorer_clock))

    # right at the 7 days recency tier edge, so a drifting clock would split them
    edge = NOW - timedelta(days=7) + timedelta(microseconds=1)
    hits = [make_hit(f"v{i}", title="python", created_at=edge) for i in range(50)]
    ranker = VideoHitsRanker()
    ranked = ranker.rank(hits, "python", ["python"], keep_scores=True)
    assert len(calls) == 1
    assert len({h[RANK_SCORE_FIELD] for h in ranked}) == 1
    assert [h["_id"] for h in ranked] == [f"v{i}" for i in range(50)]

    scored = ranker.score_hits(hits, "python", ["python"])
    assert len(calls) == 2
    assert {h[RANK_SCORE_FIELD] for h in scored} == {ranked[0][RANK_SCORE_FIELD]}
    logger.success("  PASSED")
