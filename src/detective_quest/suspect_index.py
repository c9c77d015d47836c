"""
Suspect Index - Maps each clue to the suspect it points at.

A fixed-size hash table with separate chaining. Every bucket is a list of
entries; a clue hashes to exactly one bucket. The bucket count never
changes after construction, so a skewed hash only costs speed.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


DEFAULT_BUCKET_COUNT = 101

# djb2 results are kept to an unsigned 32-bit value
_HASH_MASK = 0xFFFFFFFF


def djb2(text: str) -> int:
    """
    Dan Bernstein's string hash over the UTF-8 bytes of the text.

    Deterministic across runs, unlike Python's salted hash().
    """
    value = 5381
    for byte in text.encode("utf-8"):
        value = ((value * 33) + byte) & _HASH_MASK
    return value


@dataclass
class IndexEntry:
    """One clue -> suspect association stored in a bucket chain."""
    clue: str
    suspect: str


class SuspectIndex:
    """
    Hash table from clue text to suspect name.

    - Each clue maps to at most one suspect; associating again replaces it
    - Unknown clues look up as None, which is not an error
    - Populated once at setup and only read afterwards
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self.bucket_count = bucket_count
        self.buckets: list[list[IndexEntry]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def _bucket_for(self, clue: str) -> list[IndexEntry]:
        return self.buckets[djb2(clue) % self.bucket_count]

    def build(self, entries: Iterable[Tuple[str, str]]) -> "SuspectIndex":
        """
        Bulk-load (clue, suspect) pairs in order.

        Later pairs win over earlier ones for the same clue.

        Returns:
            The index itself, so it can be built inline
        """
        for clue, suspect in entries:
            self.associate(clue, suspect)
        return self

    def associate(self, clue: Optional[str], suspect: Optional[str]) -> None:
        """Link a clue to a suspect. Empty clue or suspect is ignored."""
        if not clue or not suspect:
            return

        bucket = self._bucket_for(clue)
        for entry in bucket:
            if entry.clue == clue:
                entry.suspect = suspect
                return

        bucket.append(IndexEntry(clue=clue, suspect=suspect))
        self._size += 1

    def lookup(self, clue: Optional[str]) -> Optional[str]:
        """Get the suspect linked to a clue, or None if the clue is unlisted."""
        if not clue:
            return None
        for entry in self._bucket_for(clue):
            if entry.clue == clue:
                return entry.suspect
        return None

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (clue, suspect) pairs in bucket order."""
        for bucket in self.buckets:
            for entry in bucket:
                yield entry.clue, entry.suspect

    def __contains__(self, clue) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size
