"""
Utility functions for the application.
"""
from typing import Any, Dict, Iterable, List, Optional
from datetime import date, datetime, timezone
import logging
import uuid


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return uuid.uuid4().hex


def serialize_date(obj: Any) -> str:
    """Serialize date objects to ISO format strings."""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")


def dedupe(values: Optional[Iterable[str]]) -> List[str]:
    """
    Remove duplicate tags/skills, keeping the first occurrence.

    Equality is case-sensitive; surrounding whitespace is stripped and
    blank entries are dropped.
    """
    if not values:
        return []
    seen = set()
    result = []
    for value in values:
        item = value.strip()
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """Blank optional text is stored as None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response: Dict[str, Any] = {"detail": message}
    if details:
        response["details"] = details
    return response


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
