from concordance.driver import ConcordanceBuilder, build_index, run
from concordance.index import (
    DEFAULT_MAX_SUMMARY_BYTES,
    DEFAULT_MAX_WORD_LENGTH,
    ConcordanceEntry,
    ConcordanceIndex,
)
from concordance.reporter import format_entry, render, write_report
from concordance.tokenizer import normalize, tokenize

__version__ = '0.1.0'
