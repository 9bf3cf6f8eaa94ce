"""
Two-keyword OR queries ranked by keyword frequency.
"""

from typing import List, Optional
import logging

from .keyword_index import KeywordIndex
from .occurrences import RankedOccurrenceList

logger = logging.getLogger(__name__)

TOP_K = 5


def merge_top_k(list1: RankedOccurrenceList, list2: RankedOccurrenceList,
                k: int = TOP_K) -> List[str]:
    """
    Merge two ranked occurrence lists into the top-k documents.

    Walks both lists in descending frequency order. Ties go to the first
    list. A document matching both lists is kept once, at the rank where it
    first appears.

    Args:
        list1: Occurrences of the first keyword
        list2: Occurrences of the second keyword
        k: Maximum number of documents to return

    Returns:
        Document identifiers, at most k, without duplicates
    """
    result: List[str] = []
    seen = set()

    def take(document: str):
        if document not in seen and len(result) < k:
            seen.add(document)
            result.append(document)

    n, m = len(list1), len(list2)
    i, j = 0, 0

    while i < n and j < m and len(result) < k:
        freq1 = list1[i].frequency
        freq2 = list2[j].frequency

        if freq1 == freq2:
            take(list1[i].document)
            take(list2[j].document)
            i += 1
            j += 1
        elif freq1 > freq2:
            take(list1[i].document)
            i += 1
        else:
            take(list2[j].document)
            j += 1

    # Drain whichever list is left
    while i < n and len(result) < k:
        take(list1[i].document)
        i += 1

    while j < m and len(result) < k:
        take(list2[j].document)
        j += 1

    return result


class TopKQueryEngine:
    """Answers "kw1 OR kw2" queries over a KeywordIndex."""

    def __init__(self, index: KeywordIndex, k: int = TOP_K):
        """
        Initialize query engine.

        Args:
            index: KeywordIndex to query
            k: Number of documents to return
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        self.index = index
        self.k = k

    def search(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """
        Find documents containing kw1 or kw2.

        Args:
            kw1: First keyword (wins frequency ties)
            kw2: Second keyword

        Returns:
            Up to k document identifiers in descending order of frequency,
            or None if neither keyword is indexed
        """
        occs1 = self.index.get_occurrences(kw1)
        occs2 = self.index.get_occurrences(kw2)

        if occs1 is None and occs2 is None:
            logger.debug(f"Neither '{kw1}' nor '{kw2}' is indexed")
            return None

        if occs2 is None:
            return occs1.documents()[:self.k]
        if occs1 is None:
            return occs2.documents()[:self.k]

        return merge_top_k(occs1, occs2, self.k)


def top5(index: KeywordIndex, kw1: str, kw2: str) -> Optional[List[str]]:
    """Top 5 documents for "kw1 OR kw2", or None if neither keyword is indexed."""
    return TopKQueryEngine(index, TOP_K).search(kw1, kw2)
