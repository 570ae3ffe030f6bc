from abc import ABC, abstractmethod
from collections.abc import Iterable, Sized
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ICounted(Sized, ABC):
    """``ICounted`` containers track their entry count, so ``len`` never scans the
    entries."""

    __slots__ = ()


class ILookup(Generic[K, V], ABC):
    """``ILookup`` types allow accessing contained values by a key.

    A missing key is never an error for :py:meth:`get`; the ``default`` is returned
    instead."""

    __slots__ = ()

    @abstractmethod
    def get(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()


class IAssociativeList(ILookup[K, V], ICounted, Iterable):
    """``IAssociativeList`` types map keys to values over an ordered sequence of
    entries compared by key equality alone.

    Keys are not required to be unique. Reads resolve to the earliest inserted
    matching entry and removal drops every matching entry."""

    __slots__ = ()

    @abstractmethod
    def insert(self, k: K, v: V) -> None:
        raise NotImplementedError()

    @abstractmethod
    def contains_key(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def remove(self, k: K) -> None:
        raise NotImplementedError()

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError()
