"""
Unit tests for Phase 1: Keywords, Occurrences and the Keyword Index
Run with: pytest tests/test_phase1_data_structures.py -v
"""

import pytest
import random
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.preprocessing.keyword_normalizer import KeywordNormalizer, PUNCTUATION
from src.littlesearch.occurrences import Occurrence, RankedOccurrenceList, insert_last_occurrence
from src.littlesearch.keyword_index import KeywordIndex


def make_occurrences(*frequencies):
    """Build occurrences doc0, doc1, ... with the given frequencies."""
    return [Occurrence(f"doc{i}", freq) for i, freq in enumerate(frequencies)]


class TestKeywordNormalizer:
    """Test KeywordNormalizer class."""

    def setup_method(self):
        self.normalizer = KeywordNormalizer(['the', 'And', 'of'])

    def test_plain_word(self):
        assert self.normalizer.normalize('bus') == 'bus'

    def test_lowercases(self):
        assert self.normalizer.normalize('Bus') == 'bus'
        assert self.normalizer.normalize('CAR') == 'car'

    def test_strips_trailing_punctuation(self):
        """Test that trailing punctuation is removed."""
        assert self.normalizer.normalize('Bus.') == 'bus'
        assert self.normalizer.normalize('hello...') == 'hello'
        assert self.normalizer.normalize('what?!') == 'what'
        assert self.normalizer.normalize('list:') == 'list'
        assert self.normalizer.normalize('clause;') == 'clause'
        assert self.normalizer.normalize('comma,') == 'comma'

    def test_rejects_leading_non_letter(self):
        assert self.normalizer.normalize('.hello') is None
        assert self.normalizer.normalize('1st') is None
        assert self.normalizer.normalize('"quoted"') is None

    def test_rejects_single_punctuation(self):
        for char in PUNCTUATION:
            assert self.normalizer.normalize(char) is None

    def test_rejects_embedded_non_letters(self):
        """Test that non-letters inside a word reject it."""
        assert self.normalizer.normalize("wasn't") is None
        assert self.normalizer.normalize('e-mail') is None
        assert self.normalizer.normalize('a.b') is None
        assert self.normalizer.normalize('abc123') is None

    def test_rejects_non_punctuation_after_punctuation(self):
        assert self.normalizer.normalize('end.)') is None
        assert self.normalizer.normalize('word."') is None

    def test_noise_words_rejected(self):
        assert self.normalizer.normalize('the') is None
        assert self.normalizer.normalize('The.') is None
        assert self.normalizer.normalize('of,') is None

    def test_noise_words_case_insensitive(self):
        """Test that noise words supplied in mixed case still match."""
        assert self.normalizer.normalize('and') is None
        assert self.normalizer.normalize('AND') is None
        assert self.normalizer.is_noise_word('and')

    def test_noise_words_stored_as_supplied(self):
        assert self.normalizer.noise_words == {'the', 'And', 'of'}
        assert len(self.normalizer) == 3

    def test_empty_word_raises(self):
        with pytest.raises(ValueError):
            self.normalizer.normalize('')


class TestOccurrence:
    """Test Occurrence class."""

    def test_create_occurrence(self):
        occ = Occurrence('doc1', 3)
        assert occ.document == 'doc1'
        assert occ.frequency == 3

    def test_occurrence_is_immutable(self):
        occ = Occurrence('doc1', 3)
        with pytest.raises(AttributeError):
            occ.frequency = 4

    def test_occurrence_str(self):
        assert str(Occurrence('doc1', 2)) == '(doc1,2)'

    def test_occurrence_serialization(self):
        occ = Occurrence('doc7', 5)
        data = occ.to_dict()

        assert data == {'document': 'doc7', 'frequency': 5}
        assert Occurrence.from_dict(data) == occ


class TestInsertLastOccurrence:
    """Test binary search insertion of the last occurrence."""

    def test_single_element_returns_none(self):
        occs = make_occurrences(4)
        assert insert_last_occurrence(occs) is None
        assert [o.frequency for o in occs] == [4]

    def test_insert_in_middle(self):
        occs = make_occurrences(10, 8, 6, 4, 2, 5)
        new = occs[-1]

        midpoints = insert_last_occurrence(occs)

        assert midpoints == [2, 3]
        assert [o.frequency for o in occs] == [10, 8, 6, 5, 4, 2]
        assert occs[3] is new

    def test_insert_at_front(self):
        occs = make_occurrences(10, 8, 6, 12)

        midpoints = insert_last_occurrence(occs)

        assert midpoints == [1, 0]
        assert [o.frequency for o in occs] == [12, 10, 8, 6]

    def test_insert_at_end(self):
        occs = make_occurrences(10, 8, 6, 1)

        midpoints = insert_last_occurrence(occs)

        assert midpoints == [1, 2]
        assert [o.frequency for o in occs] == [10, 8, 6, 1]
        assert occs[-1].document == 'doc3'

    def test_equal_frequency_goes_before_probed_entry(self):
        occs = make_occurrences(10, 8, 6, 8)

        midpoints = insert_last_occurrence(occs)

        assert midpoints == [1]
        assert [o.document for o in occs] == ['doc0', 'doc3', 'doc1', 'doc2']

    def test_empty_list_raises(self):
        with pytest.raises(ValueError):
            insert_last_occurrence([])

    def test_two_elements(self):
        occs = make_occurrences(3, 5)

        assert insert_last_occurrence(occs) == [0]
        assert [o.frequency for o in occs] == [5, 3]

    def test_length_preserved(self):
        occs = make_occurrences(9, 7, 7, 3, 1, 7)
        insert_last_occurrence(occs)
        assert len(occs) == 6
        assert sorted(o.document for o in occs) == [f"doc{i}" for i in range(6)]

    def test_random_insertions_stay_sorted(self):
        """Test that repeated insertions always leave the list descending."""
        rng = random.Random(42)
        occs = []

        for i in range(200):
            occs.append(Occurrence(f"doc{i}", rng.randint(1, 20)))
            midpoints = insert_last_occurrence(occs)

            if i == 0:
                assert midpoints is None
            else:
                assert 0 < len(midpoints) <= len(occs).bit_length()

            freqs = [o.frequency for o in occs]
            assert freqs == sorted(freqs, reverse=True)


class TestRankedOccurrenceList:
    """Test RankedOccurrenceList class."""

    def test_empty_list(self):
        ranked = RankedOccurrenceList()
        assert len(ranked) == 0
        assert ranked.is_sorted()

    def test_add_keeps_order(self):
        ranked = RankedOccurrenceList()
        assert ranked.add(Occurrence('doc1', 1)) is None
        ranked.add(Occurrence('doc2', 3))
        ranked.add(Occurrence('doc3', 2))

        assert ranked.documents() == ['doc2', 'doc3', 'doc1']
        assert ranked.frequencies() == [3, 2, 1]
        assert ranked.is_sorted()

    def test_insert_last_on_empty_list_raises(self):
        with pytest.raises(ValueError):
            RankedOccurrenceList().insert_last()

    def test_is_sorted_detects_disorder(self):
        ranked = RankedOccurrenceList(make_occurrences(1, 2))
        assert not ranked.is_sorted()

    def test_indexing_and_iteration(self):
        ranked = RankedOccurrenceList(make_occurrences(5, 3))
        assert ranked[0] == Occurrence('doc0', 5)
        assert [o.document for o in ranked] == ['doc0', 'doc1']

    def test_str(self):
        ranked = RankedOccurrenceList(make_occurrences(3, 1))
        assert str(ranked) == '[(doc0,3), (doc1,1)]'

    def test_to_dict(self):
        ranked = RankedOccurrenceList(make_occurrences(3, 1))
        data = ranked.to_dict()

        assert data['df'] == 2
        assert data['occurrences'][0] == {'document': 'doc0', 'frequency': 3}


class TestKeywordIndex:
    """Test KeywordIndex class."""

    def setup_method(self):
        self.index = KeywordIndex()

    def test_create_empty_index(self):
        assert len(self.index) == 0
        assert self.index.get_occurrences('bus') is None

    def test_load_document_counts_keywords(self):
        """Test per-document keyword table."""
        keywords = self.index.load_document('doc1', ['Bus', 'bus.', 'car', '.x', "isn't"])

        assert keywords == {
            'bus': Occurrence('doc1', 2),
            'car': Occurrence('doc1', 1),
        }

    def test_load_document_does_not_touch_index(self):
        self.index.load_document('doc1', ['bus'])
        assert len(self.index) == 0

    def test_two_document_scenario(self):
        """Test the basic two document index."""
        self.index.add_document('doc1', ['bus', 'bus', 'car'])
        self.index.add_document('doc2', ['car', 'car', 'car'])

        bus = self.index.get_occurrences('bus')
        car = self.index.get_occurrences('car')

        assert list(bus) == [Occurrence('doc1', 2)]
        assert list(car) == [Occurrence('doc2', 3), Occurrence('doc1', 1)]

    def test_merge_new_keyword_creates_singleton(self):
        self.index.merge({'train': Occurrence('doc1', 4)})

        assert self.index.contains_keyword('train')
        assert list(self.index.get_occurrences('train')) == [Occurrence('doc1', 4)]

    def test_merge_existing_keyword_inserts_in_order(self):
        self.index.merge({'train': Occurrence('doc1', 4)})
        self.index.merge({'train': Occurrence('doc2', 7)})
        self.index.merge({'train': Occurrence('doc3', 5)})

        assert self.index.get_occurrences('train').documents() == ['doc2', 'doc3', 'doc1']

    def test_noise_words_excluded(self):
        index = KeywordIndex(KeywordNormalizer(['the']))
        index.add_document('doc1', ['The', 'bus', 'the.'])

        assert 'the' not in index
        assert 'bus' in index

    def test_document_without_keywords(self):
        assert self.index.add_document('doc1', ['123', '...']) == 0
        assert len(self.index) == 0
        assert self.index.documents == ['doc1']

    def test_repeated_document_skipped(self):
        """Test that a document id is merged at most once."""
        assert self.index.add_document('doc1', ['bus', 'car']) == 2
        assert self.index.add_document('doc1', ['bus', 'bus']) == 0

        assert list(self.index.get_occurrences('bus')) == [Occurrence('doc1', 1)]
        assert self.index.get_occurrences('car').documents() == ['doc1']
        assert self.index.documents == ['doc1']
        assert self.index.total_tokens == 2

    def test_failing_token_stream_leaves_index_unchanged(self):
        """Test that a document is never partially merged."""
        self.index.add_document('doc1', ['bus'])

        def broken_tokens():
            yield 'bus'
            yield 'car'
            raise IOError("read failed")

        with pytest.raises(IOError):
            self.index.add_document('doc2', broken_tokens())

        assert self.index.get_occurrences('bus').documents() == ['doc1']
        assert 'car' not in self.index
        assert self.index.documents == ['doc1']
        assert self.index.total_tokens == 1

    def test_random_documents_invariants(self):
        """Test ordering and per-keyword counts over many documents."""
        rng = random.Random(7)
        words = ['bus', 'Bus.', 'car', 'car!', 'train', 'tram,', 'boat', 'x-ray', '9lives']
        normalizer = KeywordNormalizer()
        containing = {}

        for d in range(40):
            doc_id = f"doc{d}"
            tokens = [rng.choice(words) for _ in range(rng.randint(0, 15))]
            self.index.add_document(doc_id, tokens)

            for token in tokens:
                keyword = normalizer.normalize(token)
                if keyword:
                    containing.setdefault(keyword, set()).add(doc_id)

            for occs in self.index.dictionary.values():
                assert occs.is_sorted()

        assert self.index.get_vocabulary() == set(containing)
        for keyword, docs in containing.items():
            occs = self.index.get_occurrences(keyword)
            assert len(occs) == len(docs)
            assert set(occs.documents()) == docs

    def test_statistics(self):
        index = KeywordIndex(KeywordNormalizer(['a']))
        index.add_document('doc1', ['bus', 'bus', 'a'])
        index.add_document('doc2', ['bus', 'car'])

        stats = index.get_statistics()

        assert stats['num_documents'] == 2
        assert stats['num_keywords'] == 2
        assert stats['num_noise_words'] == 1
        assert stats['total_tokens'] == 5
        assert stats['total_occurrences'] == 3
        assert stats['avg_occurrences_per_keyword'] == 1.5

    def test_str_and_to_dict(self):
        self.index.add_document('doc1', ['bus', 'bus'])

        assert str(self.index) == '{bus=[(doc1,2)]}'
        data = self.index.to_dict()
        assert data['dictionary']['bus']['occurrences'] == [{'document': 'doc1', 'frequency': 2}]
        assert data['statistics']['num_keywords'] == 1
