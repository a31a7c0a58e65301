"""Deterministic ordering of design index entries."""
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from pyuca import Collator

from .entries import DesignEntry


OLDEST = float("-inf")


@lru_cache(maxsize=None)
def _collator() -> Collator:
    # Loads the DUCET table once per process
    return Collator()


def parse_timestamp(value: Optional[str]) -> float:
    """Parse an ISO-8601 timestamp to epoch seconds.
    
    Naive values are read as UTC. Missing or unparseable values map to
    OLDEST so they sort after everything else.
    """
    if not value:
        return OLDEST
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def title_key(title: Optional[str]) -> tuple:
    """Unicode collation key for a title, independent of the process locale."""
    return _collator().sort_key(title or "")


def sort_key(entry: DesignEntry) -> tuple:
    """Newest timestamp first, then title in collation order."""
    return (-parse_timestamp(entry.updated_at), title_key(entry.title))


def sort_entries(entries: list[DesignEntry]) -> list[DesignEntry]:
    """Newest first, ties broken by title using Unicode collation."""
    return sorted(entries, key=sort_key)
