"""
Keyword extraction from raw whitespace-delimited words.
"""

from typing import Iterable, Optional, Set

# Characters allowed as trailing punctuation on a keyword
PUNCTUATION = frozenset('.,?:;!')


class KeywordNormalizer:
    """
    Turns raw words into keywords.

    A keyword is a word that, after being stripped of TRAILING punctuation,
    consists only of letters and is not a noise word. Keywords are lowercase.
    """

    def __init__(self, noise_words: Optional[Iterable[str]] = None):
        """
        Initialize normalizer.

        Args:
            noise_words: Words excluded from indexing (stored as supplied)
        """
        self.noise_words: Set[str] = set()
        self._noise_lookup: Set[str] = set()
        if noise_words is not None:
            self.add_noise_words(noise_words)

    def add_noise_words(self, words: Iterable[str]):
        """Add noise words. Matching against keywords is case-insensitive."""
        for word in words:
            self.noise_words.add(word)
            self._noise_lookup.add(word.lower())

    def is_noise_word(self, word: str) -> bool:
        return word.lower() in self._noise_lookup

    def normalize(self, word: str) -> Optional[str]:
        """
        Get the keyword for a raw word.

        Args:
            word: Candidate word (must not be empty)

        Returns:
            Lowercase keyword, or None if the word is not a keyword
        """
        if not word:
            raise ValueError("Cannot normalize an empty word")

        if not word[0].isalpha():
            return None

        end = len(word)
        for i, char in enumerate(word):
            if not char.isalpha():
                end = i
                break

        # Everything after the letters must be punctuation
        if any(char not in PUNCTUATION for char in word[end:]):
            return None

        keyword = word[:end].lower()
        if keyword in self._noise_lookup:
            return None
        return keyword

    def __len__(self) -> int:
        """Number of noise words."""
        return len(self.noise_words)
