import logging
from pathlib import Path
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)


class DataLoader:
    """Reads document lists, noise words and documents from disk."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None, encoding: str = 'utf-8'):
        """
        Initialize data loader.

        Args:
            base_dir: Directory that relative document names resolve against
            encoding: Text encoding of all input files
        """
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.encoding = encoding

    def _read_words(self, filepath: Path) -> Iterator[str]:
        """
        Yield the whitespace-delimited words of a file.

        Args:
            filepath: Path to the file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not filepath.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, 'r', encoding=self.encoding) as f:
            for line in f:
                yield from line.split()

    def load_document_names(self, docs_file: Union[str, Path]) -> Iterator[str]:
        """
        Load names of the documents to index, one or more per line.

        Relative document names are resolved against the directory of
        docs_file from then on.

        Yields:
            Document names
        """
        docs_path = Path(docs_file)
        if not docs_path.is_file():
            raise FileNotFoundError(f"Document list not found: {docs_path}")

        logger.info(f"Loading document list from: {docs_path}")
        if self.base_dir is None:
            self.base_dir = docs_path.parent

        return self._read_words(docs_path)

    def load_noise_words(self, noise_words_file: Union[str, Path]) -> Iterator[str]:
        """
        Load noise words.

        Yields:
            Noise words as they appear in the file
        """
        noise_path = Path(noise_words_file)
        if not noise_path.is_file():
            raise FileNotFoundError(f"Noise words file not found: {noise_path}")

        logger.info(f"Loading noise words from: {noise_path}")
        return self._read_words(noise_path)

    def resolve(self, doc_id: str) -> Path:
        """Get the path of a document file."""
        path = Path(doc_id)
        if path.is_absolute() or self.base_dir is None:
            return path

        candidate = self.base_dir / path
        return candidate if candidate.exists() else path

    def load_tokens(self, doc_id: str) -> Iterator[str]:
        """
        Load the raw words of a document.

        Args:
            doc_id: Document name as listed in the document list

        Yields:
            Whitespace-delimited words
        """
        path = self.resolve(doc_id)
        if not path.is_file():
            raise FileNotFoundError(f"Document not found: {doc_id}")

        logger.debug(f"Reading document {doc_id} from {path}")
        return self._read_words(path)
