import logging

from concordance.index import ConcordanceIndex
from concordance.reporter import write_report
from concordance.tokenizer import tokenize

logger = logging.getLogger(__name__)


class ConcordanceBuilder:
    def __init__(self, index=None):
        self.index = index if index is not None else ConcordanceIndex()
        self.line_number = 0

    def feed(self, line):
        """Tokenize one line and record its tokens against the next line number."""
        self.line_number += 1
        for token in tokenize(line):
            self.index.record(token, self.line_number)

    def feed_all(self, lines):
        """Consume a line source until it is exhausted."""
        for line in lines:
            self.feed(line)
        logger.info(f"Read {self.line_number} lines, {len(self.index)} unique words")
        return self.index

    def report(self, sink):
        """Write the sorted concordance to sink."""
        written = write_report(self.index.all_entries(), sink)
        logger.info(f"Wrote {written} entries "
                    f"({self.index.rejected_count} tokens rejected, "
                    f"{self.index.truncated_count} summaries truncated)")
        return written


def build_index(lines, index=None):
    """Build a concordance index from an iterable of lines."""
    return ConcordanceBuilder(index).feed_all(lines)


def run(lines, sink, index=None):
    """Read every line, then report once. Returns the number of lines written."""
    builder = ConcordanceBuilder(index)
    builder.feed_all(lines)
    return builder.report(sink)
