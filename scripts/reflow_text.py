#!/usr/bin/env python3
"""Reflow a file or standard input to a target width.

Reads text, reflows it (or only the paragraph containing a given line),
and writes the result to standard output.

Usage:
    python scripts/reflow_text.py notes.txt --width 72
    python scripts/reflow_text.py main.py --line 41 --settings reflow.yaml --scope source.python
    git log -1 --format=%B | python scripts/reflow_text.py --width 72 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from reflow import ReflowConfig, ReflowError, Reflower, Settings, reflow_span


def build_config(args: argparse.Namespace) -> ReflowConfig:
    """Resolve settings file, scope, and command-line overrides."""
    settings = Settings.load(args.settings) if args.settings else Settings()
    config = settings.for_scope(args.scope)

    return config.merged(
        {
            "line_visual_width": args.width,
            "tab_visual_width": args.tab_width,
            "start_column": args.start_column,
            "use_soft_tabs": False if args.hard_tabs else None,
        }
    )


def main():
    parser = argparse.ArgumentParser(
        description="Re-wrap text while preserving indentation, lists and comment markers"
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="File to reflow (default: standard input)",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        default=None,
        help="Target line width in columns (default: 80)",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=None,
        help="Columns per tab stop (default: 8)",
    )
    parser.add_argument(
        "--start-column",
        type=int,
        default=None,
        help="Column at which the text begins (default: 0)",
    )
    parser.add_argument(
        "--hard-tabs",
        action="store_true",
        help="Restore tab indentation if the input used tabs",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="YAML settings file with defaults and per-scope overrides",
    )
    parser.add_argument(
        "--scope",
        default=None,
        help="Scope name to resolve in the settings file (e.g. source.python)",
    )
    parser.add_argument(
        "--line",
        type=int,
        default=None,
        help="Reflow only the paragraph containing this 1-based line",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log segmentation decisions to stderr",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(args)
    except ReflowError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.input is not None:
        if not args.input.exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            sys.exit(1)
        text = args.input.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    try:
        if args.line is not None:
            result = reflow_span(text, cursor_line=args.line - 1, config=config)
            if result is None:
                print(f"No paragraph at line {args.line}; leaving text unchanged", file=sys.stderr)
                result = text
        else:
            result = Reflower(config).reflow(text)
    except ReflowError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(result)


if __name__ == "__main__":
    main()
