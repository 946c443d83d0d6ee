from datetime import datetime


def prevent_empty_str(v, field_name: str):
    if v is None or (isinstance(v, str) and v.strip() == ""):
        raise ValueError(f"Field '{field_name}' cannot be null or empty string")
    return v


def author_full_name(first_name: str | None, last_name: str | None) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


def now_to_seconds() -> datetime:
    # naive UTC, the form MongoDB stores and returns; microseconds dropped to survive its millisecond precision
    return datetime.utcnow().replace(microsecond=0)


def parse_datetime(datetime_str):
    if not datetime_str:
        return None
    try:
        return datetime.fromisoformat(datetime_str)
    except ValueError:
        return datetime.strptime(datetime_str, "%Y-%m-%d %H:%M:%S")


def field_path(loc) -> str:
    """Dotted field name from a pydantic error location, without the request section"""
    parts = [str(part) for part in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "body"
