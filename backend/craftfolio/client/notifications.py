"""
User-facing notifications produced at the action boundary.

UI code wraps each user action in ``run_action`` with a shared ``Notifier``
and renders ``Notifier.notifications``; service and session calls raise
CraftfolioError subclasses and leave reporting to this layer.
"""
import logging
from typing import Callable, List, Optional, TypeVar
from pydantic import BaseModel
from craftfolio.core.errors import CraftfolioError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Notification(BaseModel):
    """A transient message for the user."""
    level: str
    title: str
    message: str = ""
    field: Optional[str] = None


class Notifier:
    """Collects notifications for whatever renders them."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def success(self, title: str, message: str = "") -> None:
        self.notifications.append(Notification(level="success", title=title, message=message))

    def error(self, error: CraftfolioError) -> None:
        self.notifications.append(Notification(
            level="error",
            title=error.title,
            message=error.message,
            field=getattr(error, "field", None)
        ))

    def clear(self) -> None:
        self.notifications.clear()


def run_action(
    notifier: Notifier,
    action: Callable[[], T],
    success: Optional[str] = None
) -> Optional[T]:
    """
    Run a user action once and report its outcome.

    Domain errors become error notifications and the call returns None.
    Nothing is retried.
    """
    try:
        result = action()
    except CraftfolioError as e:
        logger.info(f"{type(e).__name__}: {e.message}")
        notifier.error(e)
        return None
    if success:
        notifier.success(success)
    return result
