"""
Little search engine - keyword index with frequency-ranked occurrences.
"""

from .occurrences import Occurrence, RankedOccurrenceList, insert_last_occurrence
from .keyword_index import KeywordIndex
from .query_engine import TopKQueryEngine, merge_top_k, top5, TOP_K

__all__ = [
    'Occurrence',
    'RankedOccurrenceList',
    'insert_last_occurrence',
    'KeywordIndex',

    'TopKQueryEngine',
    'merge_top_k',
    'top5',
    'TOP_K',
]
