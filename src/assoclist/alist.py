import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional, TypeVar, Union

from pyrsistent import PVector, pvector
from typing_extensions import Self

from assoclist.entry import Entry
from assoclist.interfaces import IAssociativeList
from assoclist.logconfig import TRACE

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class AssociativeList(IAssociativeList[K, V]):
    """An ordered list of key/value entries, searched linearly by key equality.

    Keys are never hashed or sorted, so any type implementing ``__eq__`` may be
    used as a key. :py:meth:`insert` does not replace an existing entry for the
    same key; it appends another one. Reads resolve to the first matching entry
    in insertion order and :py:meth:`remove` drops every matching entry.

    Entries are held in a ``pyrsistent.PVector`` which is swapped out on every
    mutation, so iterators and :py:attr:`entries` snapshots taken earlier are
    never disturbed by later inserts or removals."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional["PVector[Entry[K, V]]"] = None) -> None:
        self._entries: "PVector[Entry[K, V]]" = (
            entries if entries is not None else pvector()
        )

    def __contains__(self, k):
        return self.contains_key(k)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, AssociativeList):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, k: K) -> V:
        e = self.entry(k)
        if e is None:
            raise KeyError(k)
        return e.value

    def __iter__(self) -> Iterator[Entry[K, V]]:
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        pairs = ", ".join(f"({e.key!r}, {e.value!r})" for e in self._entries)
        return f"AssociativeList([{pairs}])"

    @property
    def entries(self) -> "PVector[Entry[K, V]]":
        return self._entries

    def insert(self, k: K, v: V) -> None:
        self._entries = self._entries.append(Entry(k, v))
        logger.log(TRACE, "Inserted %r; %d entries", k, len(self._entries))

    def insert_all(self, *kvs) -> Self:
        """Insert each pair of alternating keys and values, in order.

        Raises ``ValueError`` without inserting anything if an odd number of
        arguments is given."""
        if len(kvs) % 2:
            raise ValueError(
                "insert_all requires an even number of key and value arguments"
            )
        evolver = self._entries.evolver()
        for k, v in zip(kvs[::2], kvs[1::2]):
            evolver.append(Entry(k, v))
        self._entries = evolver.persistent()
        logger.log(TRACE, "Inserted %d entries", len(kvs) // 2)
        return self

    def entry(self, k: K) -> Optional[Entry[K, V]]:
        for e in self._entries:
            if e.key == k:
                return e
        return None

    def get(self, k: K, default: Optional[V] = None) -> Optional[V]:
        e = self.entry(k)
        if e is None:
            return default
        return e.value

    def get_all(self, k: K) -> list[V]:
        return [e.value for e in self._entries if e.key == k]

    def contains_key(self, k: K) -> bool:
        return any(e.key == k for e in self._entries)

    def remove(self, k: K) -> None:
        remaining = pvector(e for e in self._entries if not e.key == k)
        removed = len(self._entries) - len(remaining)
        if removed:
            self._entries = remaining
        logger.log(TRACE, "Removed %d entries for %r", removed, k)

    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def clear(self) -> None:
        self._entries = pvector()

    def keys(self) -> list[K]:
        return [e.key for e in self._entries]

    def values(self) -> list[V]:
        return [e.value for e in self._entries]

    def items(self) -> list[tuple[K, V]]:
        return [(e.key, e.value) for e in self._entries]


def alist(
    pairs: Union[Mapping[K, V], Iterable[Union[Entry[K, V], tuple[K, V]]]] = (),
) -> AssociativeList[K, V]:
    """Creates a new associative list from key/value pairs, preserving their order."""
    if isinstance(pairs, Mapping):
        pairs = pairs.items()
    entries: list[Entry[Any, Any]] = [
        p if isinstance(p, Entry) else Entry.from_pair(p) for p in pairs
    ]
    return AssociativeList(pvector(entries))


def al(*kvs) -> AssociativeList:
    """Creates a new associative list from alternating keys and values."""
    return AssociativeList().insert_all(*kvs)
