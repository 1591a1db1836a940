"""Derived views over the client state."""

from datetime import datetime
from typing import Any


def sort_newest_first(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Order documents by their ``date`` field, newest first."""
    return sorted(items, key=lambda item: datetime.fromisoformat(item["date"]), reverse=True)


def select_posts(state: dict[str, Any]) -> list[dict[str, Any]]:
    return sort_newest_first(state["post"]["posts"])


def select_comments(state: dict[str, Any]) -> list[dict[str, Any]]:
    current = state["post"]["post"]
    if not current:
        return []
    return sort_newest_first(current.get("comments", []))
