#!/usr/bin/env python3
# =============================================================================
# scripts/lookup.py - Command-Line Amino Acid Lookup
# =============================================================================
# Prints amino acid records in the tab-separated human-readable format.
#
# Usage:
#   poetry run python scripts/lookup.py alanine
#   poetry run python scripts/lookup.py --all
#   poetry run python scripts/lookup.py --data-file my_data.json glycine
#
# DATA_FILE from the environment (or .env) is used when --data-file is not
# given.
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.services import AminoAcidRepository, DatasetError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up amino acids by name")
    parser.add_argument("names", nargs="*", help="Amino acid names (any casing)")
    parser.add_argument("--all", action="store_true", help="Print every record")
    parser.add_argument(
        "--data-file",
        default=os.environ.get("DATA_FILE"),
        help="JSON dataset to read (defaults to the bundled data)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the requested records; return 1 if any name is unknown."""
    args = build_parser().parse_args(argv)

    try:
        repository = AminoAcidRepository.from_file(args.data_file)
    except DatasetError as e:
        print(e, file=sys.stderr)
        return 2

    if args.all:
        for amino_acid in repository:
            print(amino_acid)
        return 0

    status = 0
    for name in args.names:
        amino_acid = repository.find(name)
        if amino_acid is None:
            print(f"{name}: Amino Acid not found", file=sys.stderr)
            status = 1
        else:
            print(amino_acid)
    return status


if __name__ == "__main__":
    sys.exit(main())
