from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar, Union

import attr

K = TypeVar("K")
V = TypeVar("V")


@attr.frozen
class Entry(Generic[K, V]):
    """A single key/value pair held by an associative list.

    Entries are never mutated once built. Updating a value means building a new
    entry."""

    key: K
    value: V

    def __iter__(self) -> Iterator[Union[K, V]]:
        yield self.key
        yield self.value

    @staticmethod
    def of(k: K, v: V) -> "Entry[K, V]":
        return Entry(k, v)

    @staticmethod
    def from_pair(pair: Sequence[Union[K, V]]) -> "Entry[K, V]":
        try:
            if not len(pair) == 2:
                raise ValueError("Entry must be built from a key/value pair")
        except TypeError as e:
            raise TypeError(f"Cannot make entry from {type(pair)}") from e

        k, v = pair
        return Entry(k, v)  # type: ignore[arg-type]
