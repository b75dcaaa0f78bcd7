#!/usr/bin/env python3
"""
Deinflection CLI.

Uses the built-in tables, or deinflector.toml if one is present:

    deinflector 書かせられた --lang ja
    deinflector walked --lang en --json
    deinflector --languages
    deinflector --table tables/de.json --lang de gegangen
    deinflector --lang ja --coverage cases.tsv --mismatches failures.tsv
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from deinflector.conditions import ANY_MASK
from deinflector.engine import MultiLanguageTransformer
from deinflector.errors import DeinflectorError, UnsupportedLanguageError
from deinflector.logging_config import level_from_verbosity, setup_logging

logger = logging.getLogger(__name__)

EXIT_UNSUPPORTED = 2


def _find_default_config() -> Path | None:
    """Look for deinflector.toml in CWD."""
    candidate = Path("deinflector.toml")
    if candidate.exists():
        return candidate
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deinflector",
        description="Recover candidate dictionary forms of inflected words",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Inflected word to deinflect",
    )
    parser.add_argument(
        "--lang",
        default="ja",
        help="Language code (default: ja)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect deinflector.toml)",
    )
    parser.add_argument(
        "--table",
        nargs="+",
        metavar="FILE",
        help="Extra language table(s), .json or .toml",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--languages",
        action="store_true",
        help="List registered languages and exit",
    )
    parser.add_argument(
        "--coverage",
        metavar="FILE",
        help="Check a TSV of expected deinflections against --lang",
    )
    parser.add_argument(
        "--mismatches",
        metavar="FILE",
        help="Write failing cases to a TSV file (use with --coverage)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="More logging (-v info, -vv debug, -vvv per-node trace)",
    )
    return parser


def _format_tags(registry, mask: int) -> str:
    if mask == ANY_MASK:
        return "*"
    return ", ".join(registry.resolve(mask)) or "-"


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level_from_verbosity(args.verbose))

    # ── Build dispatcher ─────────────────────────────────────────────────

    config_path = Path(args.config) if args.config else _find_default_config()
    try:
        if config_path is not None:
            mlt = MultiLanguageTransformer.from_config(config_path)
        else:
            mlt = MultiLanguageTransformer.default()
        if args.table:
            mlt.add_table(*args.table)
    except (OSError, DeinflectorError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.languages:
        for language in mlt.languages:
            print(language)
        return 0

    if not args.text and not args.coverage:
        parser.error("give a word to deinflect, or --coverage FILE")

    try:
        transformer = mlt.get(args.lang)
    except UnsupportedLanguageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_UNSUPPORTED
    except DeinflectorError as e:
        print(f"ERROR: table for {args.lang!r} is invalid: {e}", file=sys.stderr)
        return 1

    # ── Deinflect ────────────────────────────────────────────────────────

    if args.text:
        results = transformer.transform(args.text)
        if args.json:
            payload = {
                "language": args.lang,
                "text": args.text,
                "results": [r.to_dict(transformer.registry) for r in results],
            }
            print(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            print(f"═══ Deinflections of '{args.text}' ({args.lang}) ═══")
            for r in results:
                tags = _format_tags(transformer.registry, r.conditions)
                chain = " → ".join(r.inflection_chain) or "(as given)"
                print(f"  {r.text:20s} [{tags}]  {chain}")
            print()

    # ── Coverage ─────────────────────────────────────────────────────────

    if args.coverage:
        from deinflector.coverage import check_coverage, load_cases

        try:
            report = check_coverage(transformer, load_cases(args.coverage))
        except (OSError, ValueError, DeinflectorError) as e:
            print(f"ERROR: {args.coverage}: {e}", file=sys.stderr)
            return 1
        print(report.summary())
        if args.mismatches:
            report.write_mismatches(Path(args.mismatches))
            print(f"\nMismatches written to {args.mismatches}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
