"""
Little search engine: builds the keyword index from a document set and
answers two-keyword OR queries.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union
from tqdm import tqdm

from src.data.data_loader import DataLoader
from src.littlesearch import KeywordIndex, TopKQueryEngine, TOP_K
from src.preprocessing.keyword_normalizer import KeywordNormalizer

logger = logging.getLogger(__name__)

TokenSource = Callable[[str], Iterable[str]]


class SearchEngine:
    """
    Owns the noise words and the master keyword index.

    The index is built once with build() or make_index() and is read-only
    afterwards.
    """

    def __init__(self, config=None):
        """
        Initialize an empty engine.

        Args:
            config: Hydra configuration object (optional)
        """
        self.config = config
        self.show_progress = False
        self.top_k = TOP_K
        if config is not None:
            self.show_progress = config.get('indexing', {}).get('show_progress', False)
            self.top_k = config.get('query', {}).get('top_k', TOP_K)

        self.normalizer = KeywordNormalizer()
        self.index = KeywordIndex(self.normalizer)
        self._built = False

        logger.info(f"Initialized SearchEngine with top_k={self.top_k}")

    @property
    def keywords_index(self):
        """Keyword -> RankedOccurrenceList mapping."""
        return self.index.dictionary

    @property
    def noise_words(self):
        return self.normalizer.noise_words

    def build(self, doc_ids: Iterable[str], noise_words: Iterable[str],
              token_source: TokenSource) -> KeywordIndex:
        """
        Index all keywords of all documents.

        Args:
            doc_ids: Identifiers of the documents to index
            noise_words: Words excluded from indexing
            token_source: Callable returning the raw words of a document

        Returns:
            The master keyword index
        """
        if self._built:
            raise RuntimeError("Index has already been built")

        # Set before indexing so a failed build cannot be retried
        self._built = True
        start_time = time.time()

        self.normalizer.add_noise_words(noise_words)
        logger.info(f"Loaded {len(self.normalizer)} noise words")

        for doc_id in tqdm(doc_ids, desc="Indexing documents", disable=not self.show_progress):
            try:
                self.index.add_document(doc_id, token_source(doc_id))
            except Exception as e:
                logger.error(f"Error indexing document {doc_id}: {e}")
                raise

        stats = self.index.get_statistics()
        duration = time.time() - start_time
        logger.info(f"Index complete. {stats['num_documents']} documents, "
                    f"{stats['num_keywords']} keywords in {duration:.2f}s")
        return self.index

    def make_index(self, docs_file: Union[str, Path],
                   noise_words_file: Union[str, Path]) -> KeywordIndex:
        """
        Index the documents listed in a file.

        Args:
            docs_file: File listing document file names
            noise_words_file: File listing noise words

        Raises:
            FileNotFoundError: If any of the input files is missing
        """
        loader = DataLoader()
        noise_words = loader.load_noise_words(noise_words_file)
        doc_ids = loader.load_document_names(docs_file)
        return self.build(doc_ids, noise_words, loader.load_tokens)

    def search(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """
        Documents containing kw1 or kw2, limited to the configured top_k.

        Returns:
            Document identifiers, or None if neither keyword is indexed
        """
        return TopKQueryEngine(self.index, self.top_k).search(kw1, kw2)

    def top5(self, kw1: str, kw2: str) -> Optional[List[str]]:
        """Top 5 documents for "kw1 OR kw2"."""
        return TopKQueryEngine(self.index, TOP_K).search(kw1, kw2)

    def get_statistics(self) -> dict:
        return self.index.get_statistics()


def build(doc_ids: Iterable[str], noise_words: Iterable[str],
          token_source: TokenSource) -> KeywordIndex:
    """Build a keyword index with a fresh engine."""
    return SearchEngine().build(doc_ids, noise_words, token_source)
