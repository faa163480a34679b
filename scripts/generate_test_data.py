#!/usr/bin/env python3
"""
Test Data Generator for Concordance

Generates sample corpora of various sizes for benchmarking and
exercising the concordance builder.
"""

import argparse
import random
from pathlib import Path

import numpy as np


VOCABULARY = [
    'the', 'be', 'to', 'of', 'and', 'a', 'in', 'that', 'have', 'it',
    'for', 'not', 'on', 'with', 'he', 'as', 'you', 'do', 'at', 'this',
    'but', 'his', 'by', 'from', 'they', 'we', 'say', 'her', 'she', 'or',
    'an', 'will', 'my', 'one', 'all', 'would', 'there', 'their', 'what',
    'so', 'up', 'out', 'if', 'about', 'who', 'get', 'which', 'go', 'me',
    'whale', 'ship', 'captain', 'sea', 'harpoon', 'voyage', 'sailor',
    'ocean', 'storm', 'deck', 'mast', 'island', 'compass', 'anchor'
]

EDGE_FRAGMENTS = [
    "well-known", "don't", "O'Brien", "rock'n'roll", "''''", "--",
    "The", "THE", "tHe", "chapter 12", "42nd", "e-mail", "naïve",
    "pneumonoultramicroscopicsilicovolcanoconiosis",
    "supercalifragilisticexpialidociousandthensome",
    "a" * 46,
]


def generate_prose_data(output_file, num_lines, words_per_line=12, seed=None):
    """Generate text whose word frequencies follow a Zipf distribution."""
    rng = np.random.default_rng(seed)

    print(f"Generating prose data: {num_lines} lines...")

    with open(output_file, 'w') as f:
        for i in range(num_lines):
            ranks = rng.zipf(1.3, size=words_per_line)
            words = [VOCABULARY[(rank - 1) % len(VOCABULARY)] for rank in ranks]
            words[0] = words[0].capitalize()
            f.write(f"{' '.join(words)}.\n")

            if (i + 1) % 100000 == 0:
                print(f"  Written {i + 1} lines...")

    size_mb = Path(output_file).stat().st_size / (1024 * 1024)
    print(f"✓ Created {output_file} ({size_mb:.2f} MB)")


def generate_edge_case_data(output_file, num_lines, seed=None):
    """Generate lines mixing hyphens, apostrophes, digits, case and long tokens."""
    rand = random.Random(seed)

    print(f"Generating edge case data: {num_lines} lines...")

    with open(output_file, 'w') as f:
        for i in range(num_lines):
            parts = [rand.choice(EDGE_FRAGMENTS) for _ in range(rand.randint(0, 6))]
            f.write(f"{' '.join(parts)}\n")

    size_mb = Path(output_file).stat().st_size / (1024 * 1024)
    print(f"✓ Created {output_file} ({size_mb:.2f} MB)")


def generate_dense_data(output_file, num_lines, word='echo'):
    """Generate one word on every line, enough to overflow its line summary."""
    print(f"Generating dense data: {num_lines} lines of {word!r}...")

    with open(output_file, 'w') as f:
        for i in range(num_lines):
            f.write(f"{word}\n")

    size_mb = Path(output_file).stat().st_size / (1024 * 1024)
    print(f"✓ Created {output_file} ({size_mb:.2f} MB)")


def main():
    parser = argparse.ArgumentParser(
        description='Generate test data for concordance benchmarking'
    )

    parser.add_argument(
        '--type',
        choices=['prose', 'edge', 'dense', 'all'],
        default='all',
        help='Type of data to generate'
    )

    parser.add_argument(
        '--size',
        choices=['small', 'medium', 'large', 'xlarge'],
        default='medium',
        help='Size of data to generate'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        default='data/input',
        help='Output directory for generated files'
    )

    parser.add_argument('--seed', type=int, help='Random seed for reproducible corpora')

    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    sizes = {
        'small': 1000,
        'medium': 100000,
        'large': 1000000,
        'xlarge': 5000000
    }

    num_lines = sizes[args.size]

    print(f"\nGenerating {args.size} test data...\n")

    if args.type in ['prose', 'all']:
        generate_prose_data(output_dir / f'prose_{args.size}.txt', num_lines, seed=args.seed)

    if args.type in ['edge', 'all']:
        generate_edge_case_data(output_dir / f'edge_{args.size}.txt', num_lines, seed=args.seed)

    if args.type in ['dense', 'all']:
        generate_dense_data(output_dir / f'dense_{args.size}.txt', num_lines)

    print(f"\n✓ All test data generated in {output_dir}/")
    print("\nYou can now build a concordance from these files:")
    print(f"  concordance {output_dir}/prose_{args.size}.txt -o prose_{args.size}.concordance")


if __name__ == '__main__':
    main()
