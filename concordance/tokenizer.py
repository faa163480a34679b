"""
Concordance Tokenizer

Splits a raw input line into normalized word tokens.

A token is a maximal run of ASCII letters and apostrophes, lower-cased.
Everything else (hyphens, digits, punctuation, whitespace, non-ASCII
characters) separates tokens, so "well-known" yields "well" and "known"
while "don't" stays a single token.
"""

import re


SEPARATOR_PATTERN = re.compile(r"[^A-Za-z']")


def normalize(line):
    """Lower-case letters and blank out separators, keeping the line length."""
    return SEPARATOR_PATTERN.sub(' ', line).lower()


def tokenize(line):
    """
    Yield the normalized tokens of a line, left to right.

    Args:
        line: Raw input line (may be empty, may keep its trailing newline)

    Yields:
        Lower-cased tokens; never an empty string
    """
    for token in normalize(line).split():
        yield token
