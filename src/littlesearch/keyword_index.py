"""
Master keyword index: maps each keyword to its ranked occurrence list.
"""

from typing import Dict, Iterable, List, Optional, Set
import logging

from .occurrences import Occurrence, RankedOccurrenceList
from src.preprocessing.keyword_normalizer import KeywordNormalizer

logger = logging.getLogger(__name__)


class KeywordIndex:
    """
    In-memory index of keywords.

    Each keyword maps to a RankedOccurrenceList with one entry per document
    containing the keyword, in descending order of frequency. Documents are
    added one at a time: keywords are first counted into a per-document
    table, which is then merged into the index.
    """

    def __init__(self, normalizer: Optional[KeywordNormalizer] = None):
        """
        Initialize empty index.

        Args:
            normalizer: Keyword normalizer holding the noise words
        """
        self.normalizer = normalizer if normalizer is not None else KeywordNormalizer()

        # Keyword -> RankedOccurrenceList mapping
        self.dictionary: Dict[str, RankedOccurrenceList] = {}

        # Statistics
        self.documents: List[str] = []
        self._document_set: Set[str] = set()
        self.total_tokens = 0

    def load_document(self, doc_id: str, tokens: Iterable[str]) -> Dict[str, Occurrence]:
        """
        Count the keywords of one document.

        Args:
            doc_id: Document identifier
            tokens: Raw whitespace-delimited words of the document

        Returns:
            Keyword -> Occurrence table for this document
        """
        keywords: Dict[str, Occurrence] = {}
        num_tokens = 0

        for token in tokens:
            num_tokens += 1
            keyword = self.normalizer.normalize(token)
            if keyword is None:
                continue

            previous = keywords.get(keyword)
            frequency = previous.frequency + 1 if previous else 1
            keywords[keyword] = Occurrence(doc_id, frequency)

        self.total_tokens += num_tokens
        return keywords

    def merge(self, keywords: Dict[str, Occurrence]):
        """
        Merge one document's keyword table into the index.

        Args:
            keywords: Keyword -> Occurrence table from load_document
        """
        for keyword, occurrence in keywords.items():
            occurrences = self.dictionary.get(keyword)
            if occurrences is None:
                self.dictionary[keyword] = RankedOccurrenceList([occurrence])
                continue

            midpoints = occurrences.add(occurrence)
            logger.debug(f"Placed {occurrence} under '{keyword}', probed {midpoints}")

    def add_document(self, doc_id: str, tokens: Iterable[str]) -> int:
        """
        Add a document to the index.

        The token stream is consumed completely before anything is merged,
        so a failing stream leaves the index unchanged.

        Args:
            doc_id: Document identifier
            tokens: Raw words of the document

        Returns:
            Number of distinct keywords in the document (0 if it was already indexed)
        """
        if doc_id in self._document_set:
            logger.warning(f"Document {doc_id} is already indexed, skipping")
            return 0

        keywords = self.load_document(doc_id, tokens)
        if not keywords:
            logger.warning(f"Document {doc_id} has no keywords")

        self.merge(keywords)
        self.documents.append(doc_id)
        self._document_set.add(doc_id)

        logger.debug(f"Merged {len(keywords)} keywords from {doc_id}")
        return len(keywords)

    def get_occurrences(self, keyword: str) -> Optional[RankedOccurrenceList]:
        """
        Get ranked occurrences for a keyword.

        Args:
            keyword: The keyword to look up

        Returns:
            RankedOccurrenceList if keyword exists, None otherwise
        """
        return self.dictionary.get(keyword)

    def contains_keyword(self, keyword: str) -> bool:
        """Check if keyword exists in vocabulary."""
        return keyword in self.dictionary

    def get_vocabulary(self) -> Set[str]:
        """Get all keywords in the index."""
        return set(self.dictionary.keys())

    def get_statistics(self) -> Dict:
        """Get index statistics."""
        total_occurrences = sum(len(occs) for occs in self.dictionary.values())

        return {
            'num_documents': len(self.documents),
            'num_keywords': len(self.dictionary),
            'num_noise_words': len(self.normalizer),
            'total_tokens': self.total_tokens,
            'total_occurrences': total_occurrences,
            'avg_occurrences_per_keyword': (
                total_occurrences / len(self.dictionary) if self.dictionary else 0
            )
        }

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.dictionary

    def __len__(self) -> int:
        return len(self.dictionary)

    def __str__(self):
        entries = ', '.join(f"{keyword}={occs}" for keyword, occs in self.dictionary.items())
        return '{' + entries + '}'

    def to_dict(self) -> dict:
        """Convert index to dictionary for display."""
        return {
            'dictionary': {
                keyword: occs.to_dict() for keyword, occs in sorted(self.dictionary.items())
            },
            'statistics': self.get_statistics()
        }
