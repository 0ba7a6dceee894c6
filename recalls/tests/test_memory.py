"""
Tests for recalls/memory.py — in-memory repository matching, sort and limit.
"""

import json

from datetime import datetime, timezone
from tclogger import logger

from recalls.memory import MemoryVideoRepository
from videos.constants import SEARCH_MATCH_FIELDS, SUGGEST_MATCH_FIELDS


def make_video(vid: str, title: str = "", desc: str = "", views: int = 0, **kwargs):
    return {"_id": vid, "title": title, "description": desc, "views": views, **kwargs}


def test_matches_all_search_fields_case_insensitively():
    logger.note("> Test: memory repository matches search fields")
    videos = [
        make_video("v1", title="REACT basics"),
        make_video("v2", desc="all about React"),
        make_video("v3", uploadedBy={"name": "Reacty McReactface"}),
        make_video("v4", uploadedBy={"email": "react@example.com"}),
        make_video("v5", title="Vue"),
    ]
    repo = MemoryVideoRepository(videos)
    hits = repo.find_by_text_match(SEARCH_MATCH_FIELDS, "react", limit=100)
    assert {h["_id"] for h in hits} == {"v1", "v2", "v3", "v4"}
    logger.success("  PASSED")


def test_suggest_fields_ignore_uploader():
    videos = [
        make_video("v1", title="React"),
        make_video("v2", uploadedBy={"name": "react fan"}),
    ]
    repo = MemoryVideoRepository(videos)
    hits = repo.find_by_text_match(SUGGEST_MATCH_FIELDS, "react", limit=20)
    assert [h["_id"] for h in hits] == ["v1"]


def test_pattern_is_literal():
    videos = [make_video("v1", title="c++ tips"), make_video("v2", title="cxx tips")]
    repo = MemoryVideoRepository(videos)
    hits = repo.find_by_text_match(SEARCH_MATCH_FIELDS, "c++", limit=10)
    assert [h["_id"] for h in hits] == ["v1"]
    assert repo.find_by_text_match(SEARCH_MATCH_FIELDS, "c.x", limit=10) == []


def test_sorted_by_views_then_created_at_and_limited():
    old = datetime(2020, 1, 1, tzinfo=timezone.utc)
    new = datetime(2024, 1, 1, tzinfo=timezone.utc)
    videos = [
        make_video("low", title="go", views=1, createdAt=new),
        make_video("high_old", title="go", views=50, createdAt=old),
        make_video("high_new", title="go", views=50, createdAt=new),
        make_video("no_views", title="go"),
    ]
    repo = MemoryVideoRepository(videos)
    hits = repo.find_by_text_match(["title"], "go", limit=10)
    assert [h["_id"] for h in hits] == ["high_new", "high_old", "low", "no_views"]
    hits = repo.find_by_text_match(["title"], "go", limit=2)
    assert [h["_id"] for h in hits] == ["high_new", "high_old"]


def test_fuzzy_terms_widen_matches():
    videos = [make_video("v1", title="Reakt tutorrial"), make_video("v2", title="Vue")]
    repo = MemoryVideoRepository(videos)
    assert repo.find_by_text_match(["title"], "tutorial", limit=10) == []
    hits = repo.find_by_text_match(
        ["title"],
        "tutorial",
        limit=10,
        fuzzy_terms=["tutorial"],
        fuzzy_fields=["title"],
    )
    assert [h["_id"] for h in hits] == ["v1"]


def test_returns_copies():
    videos = [make_video("v1", title="react")]
    repo = MemoryVideoRepository(videos)
    hits = repo.find_by_text_match(["title"], "react", limit=10)
    hits[0]["title"] = "changed"
    assert videos[0]["title"] == "react"


def test_from_json(tmp_path):
    path = tmp_path / "videos.json"
    path.write_text(
        json.dumps({"videos": [make_video("v1", title="React")]}), encoding="utf-8"
    )
    repo = MemoryVideoRepository.from_json(path)
    assert len(repo.videos) == 1
    assert repo.find_by_text_match(["title"], "rea", limit=5)[0]["_id"] == "v1"
