from tclogger import logger
from typing import Iterator

from recalls.base import VideoRepository
from recalls.word import WordRecall
from videos.constants import TITLE_FIELD
from videos.constants import SUGGEST_MATCH_FIELDS, SUGGEST_RECALL_LIMIT
from videos.constants import SUGGEST_LIMIT, SUGGEST_MIN_QUERY_LEN
from videos.structure import get_record_text


class SuggestionSet:
    """Insertion-ordered set of unique strings, backed by a dict."""

    def __init__(self):
        self._items: dict[str, None] = {}

    def add(self, item: str):
        if item not in self._items:
            self._items[item] = None

    def __contains__(self, item: str) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def head(self, n: int) -> list[str]:
        res = []
        for item in self._items:
            if len(res) >= n:
                break
            res.append(item)
        return res


class VideoSuggester:
    """Autocomplete suggestions from video titles.

    Best-effort: short or missing queries give [] without recall, and any
    error while suggesting is logged and degrades to [].
    """

    def __init__(self, repository: VideoRepository, verbose: bool = False):
        # suggestions always use broad recall on title/description only
        self.recaller = WordRecall(repository, mode="broad", verbose=verbose)
        self.verbose = verbose

    def is_suggestable(self, query: str) -> bool:
        return bool(query) and len(query) >= SUGGEST_MIN_QUERY_LEN

    def extract_suggestions(
        self, hits: list[dict], query: str, suggestions: SuggestionSet = None
    ) -> SuggestionSet:
        """Add whole titles containing `query`, then title words starting with it."""
        if suggestions is None:
            suggestions = SuggestionSet()
        query_lower = query.lower()
        for hit in hits:
            title = get_record_text(hit, TITLE_FIELD)
            if query_lower in title.lower():
                suggestions.add(title)
            for word in title.split():
                if word.lower().startswith(query_lower) and len(word) > len(query):
                    suggestions.add(word)
        return suggestions

    def suggest(
        self,
        query: str,
        recall_limit: int = SUGGEST_RECALL_LIMIT,
        limit: int = SUGGEST_LIMIT,
        verbose: bool = None,
    ) -> list[str]:
        verbose = self.verbose if verbose is None else verbose
        if not self.is_suggestable(query):
            return []
        try:
            recall_res = self.recaller.recall(
                query,
                match_fields=SUGGEST_MATCH_FIELDS,
                limit=recall_limit,
                verbose=verbose,
            )
            suggestions = self.extract_suggestions(recall_res.hits, query)
            res = suggestions.head(limit)
        except Exception as e:
            logger.warn(f"× Error fetching suggestions for [{query}]: {e}")
            return []
        if verbose:
            logger.note(f"> Suggest for query:", end=" ")
            logger.mesg(f"[{query}] -> {res}")
        return res


if __name__ == "__main__":
    from recalls.memory import MemoryVideoRepository

    videos = [
        {"_id": "v1", "title": "React Basics", "description": "", "views": 3},
        {"_id": "v2", "title": "Redux Explained", "description": "", "views": 2},
        {"_id": "v3", "title": "Unrelated Video", "description": "", "views": 1},
    ]
    suggester = VideoSuggester(MemoryVideoRepository(videos), verbose=True)
    suggester.suggest("re")

    # python -m videos.suggester
