from videos.constants import SEARCH_QUERY_REQUIRED_MSG


class SearchError(Exception):
    """Base error of the search path."""

    kind = "internal"


class SearchQueryRequired(SearchError):
    """Raised when search query is missing or empty."""

    kind = "validation"

    def __init__(self, message: str = SEARCH_QUERY_REQUIRED_MSG):
        super().__init__(message)
        self.message = message
