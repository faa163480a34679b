import bisect
import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


# Longest word in major English dictionaries
DEFAULT_MAX_WORD_LENGTH = 45
DEFAULT_MAX_SUMMARY_BYTES = 16534


def summary_cost(line_number):
    """Bytes a line number adds to a summary: one space plus its digits."""
    return len(f" {line_number}")


class ConcordanceEntry:
    def __init__(self, word):
        self.word = word
        self.lines = []
        self.summary_bytes = 0
        self.truncated = False
        self._seen = set()

    def __contains__(self, line_number):
        return line_number in self._seen

    def __repr__(self):
        return f"ConcordanceEntry({self.word!r}, lines={self.lines!r})"

    def summary(self):
        """Serialized line summary, e.g. ' 1 4 9'."""
        return ''.join(f" {n}" for n in self.lines)

    def add_line(self, line_number, max_summary_bytes):
        """
        Add a line number unless already present or over budget.

        Once one line number has been dropped the entry stops growing.
        Returns True if the line number was stored.
        """
        if self.truncated or line_number in self._seen:
            return False

        cost = summary_cost(line_number)
        if self.summary_bytes + cost > max_summary_bytes:
            self.truncated = True
            return False

        # Streams arrive in ascending order, so this is normally an append
        if not self.lines or line_number > self.lines[-1]:
            self.lines.append(line_number)
        else:
            bisect.insort(self.lines, line_number)
        self._seen.add(line_number)
        self.summary_bytes += cost
        return True


class ConcordanceIndex:
    """
    Map from normalized word to the lines it occurs on.

    Entries are placed into buckets by hash, but a bucket hit only counts
    when the stored word equals the incoming word exactly, so colliding
    words always get separate entries.
    """

    def __init__(self, max_word_length=DEFAULT_MAX_WORD_LENGTH,
                 max_summary_bytes=DEFAULT_MAX_SUMMARY_BYTES, hasher=hash):
        if max_word_length < 1:
            raise ValueError(f"max_word_length must be at least 1, got {max_word_length}")
        if max_summary_bytes < 0:
            raise ValueError(f"max_summary_bytes must not be negative, got {max_summary_bytes}")

        self.max_word_length = max_word_length
        self.max_summary_bytes = max_summary_bytes
        self.hasher = hasher
        self.buckets = defaultdict(list)
        self.count = 0
        self.rejected_count = 0
        self.truncated_count = 0

    def __len__(self):
        return self.count

    def __contains__(self, word):
        return self.get(word) is not None

    def get(self, word):
        """Return the entry for exactly this word, or None."""
        bucket = self.buckets.get(self.hasher(word))
        if not bucket:
            return None
        for entry in bucket:
            if entry.word == word:
                return entry
        return None

    def record(self, word, line_number):
        """
        Record that word occurs on line_number.

        Over-long words are ignored entirely. Returns True if the line
        number was stored, False if it was rejected, a duplicate, or
        dropped because the entry's summary is full.
        """
        # Reject outrageously long words
        if len(word) > self.max_word_length:
            self.rejected_count += 1
            logger.debug(f"Rejecting word {word!r}: length {len(word)} exceeds {self.max_word_length}")
            return False

        bucket = self.buckets[self.hasher(word)]
        entry = None
        for candidate in bucket:
            if candidate.word == word:
                entry = candidate
                break

        # If no entry found, create one
        if entry is None:
            entry = ConcordanceEntry(word)
            bucket.append(entry)
            self.count += 1

        was_truncated = entry.truncated
        stored = entry.add_line(line_number, self.max_summary_bytes)
        if entry.truncated and not was_truncated:
            self.truncated_count += 1
            logger.debug(f"Line summary for {word!r} is full at {entry.summary_bytes} bytes, "
                         f"dropping line {line_number} and later lines")
        return stored

    def all_entries(self):
        """Every entry currently held, in no particular order."""
        return [entry for bucket in self.buckets.values() for entry in bucket]
