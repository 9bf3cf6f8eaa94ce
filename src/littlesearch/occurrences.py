"""
Occurrence entries and frequency-ranked occurrence lists.
"""

from typing import Iterator, List, Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Occurrence:
    """
    Occurrence of a keyword in a document.

    Attributes:
        document: Document identifier
        frequency: Number of times the keyword occurs in the document
    """
    document: str
    frequency: int

    def __str__(self):
        return f"({self.document},{self.frequency})"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'document': self.document,
            'frequency': self.frequency
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Occurrence':
        """Create from dictionary."""
        return cls(document=data['document'], frequency=data['frequency'])


def insert_last_occurrence(occurrences: List[Occurrence]) -> Optional[List[int]]:
    """
    Move the last occurrence of a list into its place by descending frequency.

    Elements 0..n-2 must already be in descending order of frequency. The
    spot for element n-1 is found with binary search, then the element is
    moved there.

    Args:
        occurrences: List of occurrences, modified in place

    Returns:
        Midpoint indexes probed by the binary search, or None if the list
        has a single element
    """
    if not occurrences:
        raise ValueError("Cannot insert into an empty occurrence list")

    if len(occurrences) == 1:
        return None

    target = occurrences[-1].frequency
    lo = 0
    hi = len(occurrences) - 2
    mid = 0
    midpoints = []

    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        probed = occurrences[mid].frequency
        if probed == target:
            break
        elif probed < target:
            hi = mid - 1
        else:
            lo = mid + 1

    last = occurrences.pop()
    if occurrences[mid].frequency <= target:
        occurrences.insert(mid, last)
    else:
        occurrences.insert(mid + 1, last)

    return midpoints


class RankedOccurrenceList:
    """
    Occurrences of one keyword in descending order of frequency.
    Holds at most one entry per document.
    """

    def __init__(self, occurrences: Optional[List[Occurrence]] = None):
        self.occurrences: List[Occurrence] = list(occurrences) if occurrences else []

    def add(self, occurrence: Occurrence) -> Optional[List[int]]:
        """
        Add an occurrence, keeping the list in descending frequency order.

        Args:
            occurrence: Occurrence for a document not yet in the list

        Returns:
            Midpoints probed while placing it (None for the first entry)
        """
        self.occurrences.append(occurrence)
        return self.insert_last()

    def insert_last(self) -> Optional[List[int]]:
        """Place the most recently appended occurrence."""
        return insert_last_occurrence(self.occurrences)

    def documents(self) -> List[str]:
        return [occ.document for occ in self.occurrences]

    def frequencies(self) -> List[int]:
        return [occ.frequency for occ in self.occurrences]

    def is_sorted(self) -> bool:
        """Check that frequencies never increase along the list."""
        return all(
            self.occurrences[i].frequency >= self.occurrences[i + 1].frequency
            for i in range(len(self.occurrences) - 1)
        )

    def __getitem__(self, index: int) -> Occurrence:
        return self.occurrences[index]

    def __len__(self) -> int:
        return len(self.occurrences)

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self.occurrences)

    def __str__(self):
        return '[' + ', '.join(str(occ) for occ in self.occurrences) + ']'

    def __repr__(self):
        return f"RankedOccurrenceList({self})"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'occurrences': [occ.to_dict() for occ in self.occurrences],
            'df': len(self.occurrences)
        }
