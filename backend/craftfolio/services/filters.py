"""
Project listing filters: text search, status and tag matching.
"""
from typing import Iterable, List, Optional, Sequence


def _get(project, name):
    if isinstance(project, dict):
        return project.get(name)
    return getattr(project, name, None)


def _status_value(status) -> Optional[str]:
    if status is None:
        return None
    return getattr(status, "value", status)


def matches_query(project, query: Optional[str]) -> bool:
    """
    Case-insensitive match of the query against title, description and tags.

    Title and description match on substring, tags on equality.
    """
    if not query:
        return True
    needle = query.lower()
    title = (_get(project, "title") or "").lower()
    description = (_get(project, "description") or "").lower()
    if needle in title or needle in description:
        return True
    return any(tag.lower() == needle for tag in (_get(project, "tags") or []))


def matches_status(project, status) -> bool:
    if not status:
        return True
    return _status_value(_get(project, "status")) == _status_value(status)


def matches_tags(project, tags: Optional[Sequence[str]]) -> bool:
    """Every selected tag must be present on the project."""
    if not tags:
        return True
    project_tags = set(_get(project, "tags") or [])
    return all(tag in project_tags for tag in tags)


def filter_projects(
    projects: Iterable,
    query: Optional[str] = None,
    status=None,
    tags: Optional[Sequence[str]] = None
) -> List:
    """Apply text, status and tag filters; order is preserved."""
    return [
        p for p in projects
        if matches_query(p, query) and matches_status(p, status) and matches_tags(p, tags)
    ]


def collect_tags(projects: Iterable) -> List[str]:
    """Distinct tags across projects, sorted, for building a tag picker."""
    found = set()
    for project in projects:
        found.update(_get(project, "tags") or [])
    return sorted(found)
