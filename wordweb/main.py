"""
Main entry point for building word web puzzles.

Usage:
    python -m wordweb.main --corpus words.txt
    python -m wordweb.main --corpus words.txt --date 2025-09-14 --output daily/2025-09-14.json
    python -m wordweb.main --themes themes.tsv --out-dir daily --config config.yaml --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .engine import (
    BuildConfig,
    BuildError,
    CorpusError,
    build_daily,
    build_themed,
    load_corpus,
    read_themes,
    save_puzzle,
)


def load_config(config_path: str) -> BuildConfig:
    """Load build configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return BuildConfig(**data)


def run_daily(args: argparse.Namespace, config: BuildConfig) -> int:
    """Build one dated puzzle from a corpus file."""
    words = load_corpus(args.corpus, min_len=config.min_len, max_len=config.max_len)
    result = build_daily(words, date=args.date, config=config)

    if args.output:
        save_puzzle(result.puzzle, args.output, include_paths=config.include_paths)
        print(f"Puzzle saved to: {args.output}")
    else:
        print(json.dumps(result.puzzle.to_artifact(include_paths=config.include_paths), indent=2))

    if args.verbose:
        print(f"Seed: {result.seed} (attempt seed {result.attempt_seed}, {result.attempts} attempt(s))",
              file=sys.stderr)
    return 0


def run_batch(args: argparse.Namespace, config: BuildConfig) -> int:
    """Build one puzzle per themes row into the output directory."""
    rows = read_themes(args.themes)
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    ok_count = 0
    for row in rows:
        if not row.date or not row.theme or not row.words:
            logging.warning("Skipping row with missing data: %s", row.model_dump())
            continue
        try:
            result = build_themed(row, config)
        except (BuildError, CorpusError) as e:
            print(f"Error: {row.date} \"{row.theme}\": {e}", file=sys.stderr)
            continue

        save_puzzle(result.puzzle, out_dir / f"{row.date}.json", include_paths=config.include_paths)
        ok_count += 1

    print(f"Built {ok_count} puzzles into {out_dir}")
    return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build word web puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  theme: Wodehouse Sampler
  size: 12
  word_count: 6
  max_attempts: 50
  strategy:
    allow_bent: false
    required_classes: [H, V, D]
        """
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--corpus",
        help="Word list (newline, tab or comma separated) for a daily puzzle"
    )
    source.add_argument(
        "--themes",
        help="Themes TSV (date, theme, words) for a batch build"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML build configuration"
    )
    parser.add_argument(
        "--date",
        help="Puzzle date YYYY-MM-DD (default: today in America/Chicago)"
    )
    parser.add_argument(
        "--size",
        type=int,
        help="Grid size override"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the daily puzzle JSON (default: print to stdout)"
    )
    parser.add_argument(
        "--out-dir",
        default="daily",
        help="Output directory for batch builds (default: daily)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='[%(levelname)s] %(message)s'
    )

    try:
        if args.config:
            config = load_config(args.config)
        elif args.themes:
            config = BuildConfig.for_themes()
        else:
            config = BuildConfig()
        if args.size:
            config = BuildConfig(**{**config.model_dump(), "size": args.size})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        if args.themes:
            return run_batch(args, config)
        return run_daily(args, config)
    except (BuildError, CorpusError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
