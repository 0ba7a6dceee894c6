from tclogger import logger, logstr, brk

from converters.query.tokens import QueryNormalizer
from ranks.ranker import VideoHitsRanker
from recalls.base import VideoRepository
from recalls.word import WordRecall
from videos.constants import SEARCH_MATCH_FIELDS, SEARCH_RECALL_LIMIT, SEARCH_LIMIT
from videos.constants import RECALL_MODE_TYPE, RECALL_MODE
from videos.errors import SearchQueryRequired


class VideoSearcher:
    """Text relevance search over a video repository.

    Pipeline: normalize -> recall -> score -> rank/dedup -> strip.

    Missing or empty query raises SearchQueryRequired before any recall.
    A query with no tokens (e.g. only whitespace) returns [] without recall.
    Repository errors are not caught here.
    """

    def __init__(
        self,
        repository: VideoRepository,
        recall_mode: RECALL_MODE_TYPE = RECALL_MODE,
        verbose: bool = False,
    ):
        self.normalizer = QueryNormalizer()
        self.recaller = WordRecall(repository, mode=recall_mode, verbose=verbose)
        self.ranker = VideoHitsRanker()
        self.verbose = verbose

    def search(
        self,
        query: str,
        match_fields: list[str] = SEARCH_MATCH_FIELDS,
        recall_limit: int = SEARCH_RECALL_LIMIT,
        limit: int = SEARCH_LIMIT,
        now_ts: float = None,
        verbose: bool = None,
    ) -> list[dict]:
        verbose = self.verbose if verbose is None else verbose
        if not query:
            raise SearchQueryRequired()

        tokens = self.normalizer.tokenize(query)
        if not tokens:
            if verbose:
                logger.mesg(f"  * No tokens in query: {brk(repr(query))}")
            return []

        if verbose:
            logger.note(f"> Search for query:", end=" ")
            logger.mesg(f"[{query}] -> {tokens}")

        recall_res = self.recaller.recall(
            query,
            tokens=tokens,
            match_fields=match_fields,
            limit=recall_limit,
            verbose=verbose,
        )
        results = self.ranker.rank(
            recall_res.hits, query=query, tokens=tokens, top_k=limit, now_ts=now_ts
        )

        logger.okay(
            f'Search for "{query}" returned {logstr.mesg(len(results))} results'
        )
        return results


if __name__ == "__main__":
    import sys

    from datetime import datetime, timezone
    from recalls.memory import MemoryVideoRepository

    videos = [
        {
            "_id": "v1",
            "title": "React Tutorial for Beginners",
            "description": "intro video",
            "views": 500,
            "createdAt": datetime.now(timezone.utc),
        },
        {
            "_id": "v2",
            "title": "Vue Guide",
            "description": "also mentions react tutorial briefly",
            "views": 10,
            "createdAt": datetime(2020, 1, 1, tzinfo=timezone.utc),
        },
    ]
    query = " ".join(sys.argv[1:]) or "react tutorial"
    searcher = VideoSearcher(MemoryVideoRepository(videos), verbose=True)
    for video in searcher.search(query):
        logger.mesg(f"  * {video['_id']}: {video['title']}")

    # python -m videos.searcher react tutorial
