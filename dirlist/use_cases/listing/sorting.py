"""
Ordering of resolved entries.

Names compare case-insensitively with the exact name as tie-break. Entries
that compare equal under the key keep their collection order in both
directions. For the creation-time key, entries without a timestamp always
come last, in collection order, whether or not the order is reversed.
"""

from typing import Any, Callable, Sequence

from dirlist.config.listing import SortKey
from dirlist.entities.Entry import Entry


def _name_key(entry: Entry) -> tuple[str, str]:
    return (entry.name.casefold(), entry.name)


def _size_key(entry: Entry) -> int:
    return entry.size_bytes


def _created_key(entry: Entry) -> Any:
    return entry.created_at


_KEYS: dict[SortKey, Callable[[Entry], Any]] = {
    SortKey.NAME: _name_key,
    SortKey.SIZE: _size_key,
    SortKey.CREATED: _created_key,
}


def sort_entries(
    entries: Sequence[Entry], key: SortKey = SortKey.NAME, reverse: bool = False
) -> list[Entry]:
    """
    Return the entries in listing order.

    Args:
        entries: Resolved entries in collection order
        key: Sort key
        reverse: Invert the keyed order

    Returns:
        A new list; the entries themselves are not modified
    """
    key = SortKey(key)
    key_func = _KEYS[key]
    if key is SortKey.CREATED:
        dated = [e for e in entries if e.created_at is not None]
        undated = [e for e in entries if e.created_at is None]
        return sorted(dated, key=key_func, reverse=reverse) + undated
    # sorted() is stable with reverse=True as well
    return sorted(entries, key=key_func, reverse=reverse)
