from datetime import datetime, timezone
from typing import Union

from videos.constants import ID_FIELD, VIEWS_FIELD, CREATED_AT_FIELD


def get_record_val(d: dict, key: str, default=None):
    """Get value of dotted `key` (e.g. "uploadedBy.name") from record `d`."""
    dd = d
    for k in key.split("."):
        if isinstance(dd, dict) and k in dd:
            dd = dd[k]
        else:
            return default
    if dd is None:
        return default
    return dd


def get_record_text(d: dict, key: str) -> str:
    val = get_record_val(d, key, default="")
    if not isinstance(val, str):
        val = str(val)
    return val


def get_record_id(d: dict) -> Union[str, None]:
    val = get_record_val(d, ID_FIELD)
    if val is None:
        return None
    return str(val)


def get_record_views(d: dict) -> float:
    views = get_record_val(d, VIEWS_FIELD, default=0)
    try:
        views = float(views)
    except (TypeError, ValueError):
        return 0.0
    return max(views, 0.0)


def to_timestamp(val: Union[datetime, str, int, float, None]) -> float:
    """Convert datetime, ISO string or unix seconds to unix seconds.

    Naive datetimes are treated as UTC, as Mongo returns them.
    Missing or unparsable values map to epoch zero.
    """
    if val is None:
        return 0.0
    if isinstance(val, bool):
        return 0.0
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        try:
            val = datetime.fromisoformat(val.replace("Z", "+00:00"))
        except ValueError:
            return 0.0
    if isinstance(val, datetime):
        if val.tzinfo is None:
            val = val.replace(tzinfo=timezone.utc)
        return val.timestamp()
    return 0.0


def get_record_created_ts(d: dict) -> float:
    return to_timestamp(get_record_val(d, CREATED_AT_FIELD))
