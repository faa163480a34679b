import logging

import pytest

from concordance.index import (
    DEFAULT_MAX_SUMMARY_BYTES,
    DEFAULT_MAX_WORD_LENGTH,
    ConcordanceEntry,
    ConcordanceIndex,
    summary_cost,
)


@pytest.fixture
def index():
    """Create an index with the default limits."""
    return ConcordanceIndex()


@pytest.fixture
def colliding_index():
    """Create an index that puts every word into the same bucket."""
    return ConcordanceIndex(hasher=lambda word: 0)


class TestRecord:
    """Test recording words against line numbers."""

    def test_new_word_creates_entry(self, index):
        assert index.record('cat', 1)
        entry = index.get('cat')
        assert entry.word == 'cat'
        assert entry.lines == [1]
        assert len(index) == 1

    def test_duplicate_line_ignored(self, index):
        assert index.record('cat', 3)
        assert not index.record('cat', 3)
        assert index.get('cat').lines == [3]

    def test_lines_deduplicated_and_ascending(self, index):
        for line_number in [5, 5, 2, 5]:
            index.record('word', line_number)
        assert index.get('word').lines == [2, 5]

    def test_stream_order_preserved(self, index):
        for line_number in [1, 4, 9, 16]:
            index.record('square', line_number)
        assert index.get('square').lines == [1, 4, 9, 16]

    def test_entries_independent(self, index):
        index.record('cat', 1)
        index.record('dog', 2)
        index.record('cat', 3)
        assert index.get('cat').lines == [1, 3]
        assert index.get('dog').lines == [2]

    def test_missing_word(self, index):
        assert index.get('absent') is None
        assert 'absent' not in index

    def test_all_entries(self, index):
        for word in ['b', 'a', 'c', 'a']:
            index.record(word, 1)
        assert sorted(e.word for e in index.all_entries()) == ['a', 'b', 'c']

    def test_empty_index(self, index):
        assert len(index) == 0
        assert index.all_entries() == []


class TestKeyIntegrity:
    """Test that distinct words never share an entry."""

    def test_colliding_words_kept_apart(self, colliding_index):
        colliding_index.record('listen', 1)
        colliding_index.record('silent', 2)
        colliding_index.record('enlist', 3)
        colliding_index.record('listen', 4)

        assert len(colliding_index) == 3
        assert colliding_index.get('listen').lines == [1, 4]
        assert colliding_index.get('silent').lines == [2]
        assert colliding_index.get('enlist').lines == [3]

    def test_spelling_never_changes(self, colliding_index):
        colliding_index.record('alpha', 1)
        entry = colliding_index.get('alpha')
        colliding_index.record('omega', 2)
        colliding_index.record('alpha', 3)

        assert entry.word == 'alpha'
        assert colliding_index.get('alpha') is entry

    def test_all_entries_with_collisions(self, colliding_index):
        words = ['one', 'two', 'three', 'four']
        for n, word in enumerate(words, start=1):
            colliding_index.record(word, n)
        assert sorted(e.word for e in colliding_index.all_entries()) == sorted(words)


class TestRejection:
    """Test rejection of over-long words."""

    def test_max_length_accepted(self, index):
        word = 'a' * DEFAULT_MAX_WORD_LENGTH
        assert index.record(word, 1)
        assert word in index

    def test_over_max_length_rejected(self, index):
        word = 'a' * (DEFAULT_MAX_WORD_LENGTH + 1)
        assert not index.record(word, 1)
        assert word not in index
        assert len(index) == 0
        assert index.rejected_count == 1

    def test_no_truncated_spelling(self, index):
        index.record('b' * 46, 1)
        assert index.get('b' * 45) is None

    def test_custom_max_length(self):
        index = ConcordanceIndex(max_word_length=3)
        index.record('cat', 1)
        index.record('cats', 1)
        assert [e.word for e in index.all_entries()] == ['cat']

    def test_rejection_logged_at_debug(self, index, caplog):
        with caplog.at_level(logging.DEBUG, logger='concordance.index'):
            index.record('x' * 60, 7)
        assert 'Rejecting word' in caplog.text


class TestTruncation:
    """Test the per-entry line summary budget."""

    def test_summary_cost(self):
        assert summary_cost(7) == 2
        assert summary_cost(42) == 3
        assert summary_cost(16534) == 6

    def test_stops_at_budget(self):
        index = ConcordanceIndex(max_summary_bytes=10)
        for line_number in range(1, 10):
            index.record('echo', line_number)

        entry = index.get('echo')
        assert entry.lines == [1, 2, 3, 4, 5]
        assert entry.summary() == ' 1 2 3 4 5'
        assert entry.summary_bytes == 10
        assert entry.truncated
        assert index.truncated_count == 1

    def test_truncation_is_per_entry(self):
        index = ConcordanceIndex(max_summary_bytes=4)
        for line_number in range(1, 6):
            index.record('busy', line_number)
        index.record('quiet', 5)

        assert index.get('busy').lines == [1, 2]
        assert index.get('quiet').lines == [5]
        assert not index.get('quiet').truncated

    def test_truncated_entry_stops_growing(self):
        index = ConcordanceIndex(max_summary_bytes=5)
        index.record('word', 10)
        index.record('word', 200)
        assert not index.record('word', 3)
        assert index.get('word').lines == [10]

    def test_zero_budget_keeps_word(self):
        index = ConcordanceIndex(max_summary_bytes=0)
        index.record('bare', 1)
        entry = index.get('bare')
        assert entry.lines == []
        assert entry.truncated

    def test_default_budget(self, index):
        for line_number in range(1, 4001):
            index.record('echo', line_number)

        entry = index.get('echo')
        assert entry.truncated
        assert entry.lines == list(range(1, 3529))
        assert entry.summary_bytes == 16533
        assert entry.summary_bytes <= DEFAULT_MAX_SUMMARY_BYTES
        assert len(entry.summary()) == entry.summary_bytes


class TestConfiguration:
    """Test index configuration checks."""

    def test_defaults(self, index):
        assert index.max_word_length == 45
        assert index.max_summary_bytes == 16534

    @pytest.mark.parametrize('kwargs', [
        {'max_word_length': 0},
        {'max_word_length': -3},
        {'max_summary_bytes': -1},
    ])
    def test_invalid_limits(self, kwargs):
        with pytest.raises(ValueError):
            ConcordanceIndex(**kwargs)


class TestEntry:
    """Test the entry container on its own."""

    def test_contains(self):
        entry = ConcordanceEntry('cat')
        entry.add_line(4, 100)
        assert 4 in entry
        assert 5 not in entry

    def test_repr(self):
        entry = ConcordanceEntry('cat')
        entry.add_line(1, 100)
        assert repr(entry) == "ConcordanceEntry('cat', lines=[1])"
