# utils/time_utils.py
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


def _to_utc_aware(dt):
    if dt is None:
        return None
    return (
        dt.replace(tzinfo=timezone.utc)
        if (dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None)
        else dt.astimezone(timezone.utc)
    )


def _day_str(dt: datetime = None) -> str:
    """UTC 기준 날짜 문자열(YYYY-MM-DD). 일일 사용량 키에 사용."""
    return _to_utc_aware(dt or _utcnow()).date().isoformat()
