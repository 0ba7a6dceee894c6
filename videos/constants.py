from typing import Literal

# record fields
ID_FIELD = "_id"
TITLE_FIELD = "title"
DESC_FIELD = "description"
OWNER_NAME_FIELD = "uploadedBy.name"
OWNER_EMAIL_FIELD = "uploadedBy.email"
VIEWS_FIELD = "views"
CREATED_AT_FIELD = "createdAt"

# search match fields
SEARCH_MATCH_FIELDS = [TITLE_FIELD, DESC_FIELD, OWNER_NAME_FIELD, OWNER_EMAIL_FIELD]

# suggest match fields
SUGGEST_MATCH_FIELDS = [TITLE_FIELD, DESC_FIELD]

# fuzzy match fields, only used when recall mode is "staged"
FUZZY_MATCH_FIELDS = [TITLE_FIELD, DESC_FIELD]

# candidates are pre-sorted by views, then by creation time
RECALL_SORT = [(VIEWS_FIELD, -1), (CREATED_AT_FIELD, -1)]

# limits
SEARCH_RECALL_LIMIT = 100
SEARCH_LIMIT = 50
SUGGEST_RECALL_LIMIT = 20
SUGGEST_LIMIT = 8
SUGGEST_MIN_QUERY_LEN = 2

# recall modes
RECALL_MODE_TYPE = Literal["broad", "staged"]
RECALL_MODE = "broad"

# fuzzy term bounds
FUZZY_MIN_TERM_LEN = 4
FUZZY_MAX_TERM_LEN = 32
FUZZY_MAX_TERMS = 8

# error messages
SEARCH_QUERY_REQUIRED_MSG = "Search query is required"
SEARCH_FAILED_MSG = "Failed to search videos"
