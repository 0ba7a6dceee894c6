"""
In-Memory Video Repository

Linear case-insensitive scan over a list of video records. No index is kept,
so each call is O(corpus size); fine for local corpora and tests.
"""

import json

from pathlib import Path
from tclogger import logger, logstr, brk
from typing import Union

from recalls.base import VideoRepository
from recalls.conditions import is_fuzzy_match
from videos.structure import get_record_text, get_record_views
from videos.structure import get_record_created_ts


class MemoryVideoRepository(VideoRepository):
    def __init__(self, videos: list[dict] = None, verbose: bool = False):
        self.videos = list(videos or [])
        self.verbose = verbose

    @classmethod
    def from_json(cls, path: Union[str, Path], verbose: bool = False):
        path = Path(path)
        logger.note(f"> Loading corpus from: {logstr.file(brk(path))}")
        with open(path, "r", encoding="utf-8") as rf:
            videos = json.load(rf)
        if isinstance(videos, dict):
            videos = videos.get("videos", [])
        logger.success(f"+ Loaded {len(videos)} videos")
        return cls(videos, verbose=verbose)

    def is_match(
        self,
        video: dict,
        fields: list[str],
        pattern: str,
        fuzzy_terms: list[str] = [],
        fuzzy_fields: list[str] = [],
    ) -> bool:
        pattern = pattern.lower()
        for field in fields:
            if pattern in get_record_text(video, field).lower():
                return True
        for term in fuzzy_terms:
            for field in fuzzy_fields:
                if is_fuzzy_match(term, get_record_text(video, field)):
                    return True
        return False

    def sort_key(self, video: dict) -> tuple:
        return (-get_record_views(video), -get_record_created_ts(video))

    def find_by_text_match(
        self,
        fields: list[str],
        pattern: str,
        limit: int,
        fuzzy_terms: list[str] = [],
        fuzzy_fields: list[str] = [],
    ) -> list[dict]:
        matched = [
            video
            for video in self.videos
            if self.is_match(video, fields, pattern, fuzzy_terms, fuzzy_fields)
        ]
        # sorted() is stable, so equal keys keep corpus order
        matched = sorted(matched, key=self.sort_key)
        if limit:
            matched = matched[:limit]
        if self.verbose:
            logger.mesg(f"  * Matched {len(matched)} videos for: [{pattern}]")
        return [dict(video) for video in matched]
