"""
Concordance Reporter

Turns index entries into the final sorted listing.

Input: ConcordanceEntry objects in any order
Output: "word line1 line2 ..." lines, ascending by word
"""


def format_entry(entry):
    """Format one entry as its word followed by its line summary."""
    return f"{entry.word}{entry.summary()}"


def render(entries):
    """
    Yield one formatted line per entry, sorted by word.

    Words compare by code point, which for the ASCII tokens the index
    holds is the same as byte-wise comparison.

    Args:
        entries: Iterable of ConcordanceEntry

    Yields:
        Output lines without trailing newlines
    """
    for entry in sorted(entries, key=lambda e: e.word):
        yield format_entry(entry)


def write_report(entries, sink):
    """Write the rendered report to sink and return the number of lines."""
    line_count = 0
    for line in render(entries):
        sink.write(f"{line}\n")
        line_count += 1
    return line_count
