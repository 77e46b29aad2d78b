"""
Main entry point for Word Hunt.

Usage:
    python -m src.main
    python -m src.main config.yaml --reveal
    python -m src.main --language English --size 10 --seed 7 --output puzzles/english.json
    python -m src.main config.yaml --play
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml
from pydantic import ValidationError

from .puzzle.generator import placement_report
from .puzzle.models import Cell
from .puzzle.wordlists import load_word_list
from .session import Session, SessionConfig
from .utils.grid_visualizer import render_with_coordinates


CELL_PATTERN = re.compile(r'(-?\d+)\s*,\s*(-?\d+)')


def load_config(config_path: str) -> SessionConfig:
    """Load session configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping of settings, got {type(data).__name__}")

    # A word_file entry is loaded into the explicit word list
    word_file = data.pop("word_file", None)
    if word_file is not None:
        data["words"] = load_word_list(path.parent / word_file)

    return SessionConfig(**data)


def parse_path(line: str) -> List[Cell]:
    """
    Parse a selection typed as 'r,c r,c ...'.

    Raises ValueError if the line holds anything other than cell pairs.
    """
    cells = [Cell(int(r), int(c)) for r, c in CELL_PATTERN.findall(line)]
    if not cells or CELL_PATTERN.sub("", line).strip(" ;"):
        raise ValueError(f"Invalid selection: '{line.strip()}' (expected 'row,col row,col ...')")
    return cells


def save_puzzle(session: Session, path: str | Path) -> None:
    """Save the current puzzle and session state to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "config": session.config.model_dump(),
        "puzzle": session.puzzle.model_dump(),
        "state": session.get_state(),
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)


def print_board(session: Session, reveal: bool = False, out: Optional[TextIO] = None) -> None:
    """Print the grid and the word list."""
    out = out or sys.stdout
    highlight = set(session.found_cells())
    if reveal:
        for cells in session.puzzle.placements.values():
            highlight.update(cells)

    print(render_with_coordinates(session.puzzle.grid, highlight), file=out)
    print(file=out)

    words = [
        f"[{w.upper()}]" if w in session.found_words else w.upper()
        for w in session.words_to_find
    ]
    print(f"Words ({len(session.found_words)}/{len(words)} found): {' '.join(words)}", file=out)


def play(session: Session, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """
    Run an interactive game over text streams.

    Commands:
        r,c r,c ...   select cells in order
        hint          flash a random unfound word
        new [LANG]    start a new puzzle, optionally in another language
        quit          stop playing
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    print(session.message, file=out)
    print_board(session, out=out)

    for line in stdin:
        command = line.strip()
        if not command:
            continue

        name, _, arg = command.partition(" ")
        name = name.lower()

        if name in ("quit", "exit", "q"):
            break

        if name == "hint":
            hint = session.get_hint()
            print(session.message, file=out)
            if hint:
                print(render_with_coordinates(session.puzzle.grid, hint.cells), file=out)
            continue

        if name == "new":
            try:
                session.new_puzzle(arg.strip() or None)
            except ValidationError as e:
                print(f"Error: {e.errors()[0]['msg']}", file=out)
                continue
            print(session.message, file=out)
            print_board(session, out=out)
            continue

        try:
            path = parse_path(command)
        except ValueError as e:
            print(f"Error: {e}", file=out)
            continue

        outcome = session.submit(path)
        print(session.message, file=out)
        if outcome.is_match:
            print_board(session, out=out)

        if session.is_complete:
            break


def main():
    parser = argparse.ArgumentParser(
        description="Generate and play a word-search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  language: Yoruba
  grid_size: 12
  hint_count: 3
  flash_duration: 2.0
  seed: 42
  # word_file: words.txt   (one word per line, overrides the built-in list)
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--language", "-l",
        help="Word list language (Hausa, English, Yoruba, Igbo)"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        help="Grid size"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible puzzle"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the puzzle as JSON"
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Highlight the hidden words in the printed grid"
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play interactively on stdin"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and placement details"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else SessionConfig()
        overrides = {
            "language": args.language,
            "grid_size": args.size,
            "seed": args.seed,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if overrides:
            config = SessionConfig(**{**config.model_dump(), **overrides})
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    session = Session.create(config=config)

    if args.verbose:
        print(f"Language: {config.language}")
        print(f"Grid: {config.grid_size}x{config.grid_size}")
        report = placement_report(session.word_list, session.puzzle)
        print(f"Placed {len(report.placed)} of {report.requested} words")
        if report.too_long:
            print(f"Too long for the grid: {', '.join(report.too_long)}")
        if report.dropped:
            print(f"No room for: {', '.join(report.dropped)}")
        print()

    if args.output:
        save_puzzle(session, args.output)
        if args.verbose:
            print(f"Puzzle saved to: {args.output}")
            print()

    if args.play:
        try:
            play(session)
        except KeyboardInterrupt:
            print("\nGame interrupted by user")

        print()
        print("=== Game Summary ===")
        print(f"Found: {len(session.found_words)}/{len(session.words_to_find)}")
        print(f"Hints left: {session.hints_remaining}")
        return 0

    print(session.message)
    print()
    print_board(session, reveal=args.reveal)
    return 0


if __name__ == "__main__":
    sys.exit(main())
