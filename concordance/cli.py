#!/usr/bin/env python3
import argparse
import logging
import os
import sys

from concordance.driver import run
from concordance.index import (
    DEFAULT_MAX_SUMMARY_BYTES,
    DEFAULT_MAX_WORD_LENGTH,
    ConcordanceIndex,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_parser():
    parser = argparse.ArgumentParser(
        description='Build an alphabetical concordance of the words in a text and the lines they occur on'
    )
    parser.add_argument('input', nargs='?', default='-',
                        help='Input text file (default: standard input)')
    parser.add_argument('-o', '--output', help='Write the concordance here instead of standard output')
    parser.add_argument('--max-word-length', type=int,
                        default=os.getenv('CONCORDANCE_MAX_WORD_LENGTH', str(DEFAULT_MAX_WORD_LENGTH)),
                        help='Reject words longer than this many characters')
    parser.add_argument('--max-summary-bytes', type=int,
                        default=os.getenv('CONCORDANCE_MAX_SUMMARY_BYTES', str(DEFAULT_MAX_SUMMARY_BYTES)),
                        help='Stop adding line numbers to a word once its summary would exceed this size')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Log progress to stderr')
    verbosity.add_argument('--debug', action='store_true', help='Log every rejected word and truncated summary')
    return parser


def configure_logging(args, parser):
    """Send log records to stderr so stdout only carries the concordance."""
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        name = os.getenv('CONCORDANCE_LOG_LEVEL', 'WARNING').upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            parser.error(f"CONCORDANCE_LOG_LEVEL: unknown log level {name!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def open_input(path):
    # Lines end at '\n' only, whichever source they come from
    if path == '-':
        # Undecodable bytes can only ever be separators
        if hasattr(sys.stdin, 'reconfigure'):
            sys.stdin.reconfigure(errors='replace', newline='\n')
        return sys.stdin
    return open(path, 'r', encoding='utf-8', errors='replace', newline='\n')


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args, parser)

    try:
        index = ConcordanceIndex(args.max_word_length, args.max_summary_bytes)
    except ValueError as e:
        parser.error(str(e))

    try:
        source = open_input(args.input)
    except OSError as e:
        logger.error(f"Could not read input {args.input}: {e}")
        return 1

    try:
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as sink:
                run(source, sink, index)
        else:
            run(source, sys.stdout, index)
            sys.stdout.flush()
    except MemoryError:
        logger.error(f"Out of memory after {len(index)} unique words, giving up")
        return 1
    except OSError as e:
        logger.error(f"I/O error while building concordance: {e}")
        return 1
    finally:
        if source is not sys.stdin:
            source.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
