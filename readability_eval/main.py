#!/usr/bin/env python3
"""CLI that scores how readable an English text is against a word frequency dictionary.

The dictionary (a JSON array such as [["the", 199660765], ...], e.g. built
from English Wikipedia) is normalized so the most frequent word weighs 1.0.
The text is split into lowercase word tokens and the score is the mean
weight of those tokens; words missing from the dictionary weigh 0.0.
Common vocabulary therefore scores close to 1 and rare vocabulary close to 0.

Only the score is written to stdout, which keeps the tool easy to use in
pipes and scripts. Errors go to stderr with a non-zero exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable, TextIO

try:  # support running as a module or script
    from .config import ScoringOptions, resolve_dict_path
    from .dictionary import load_frequency_dict
    from .errors import InputReadError, NoWordsError, ReadabilityError
    from .scorer import compute_readability
    from .tokenizer import tokenize_english_words
except ImportError:  # pragma: no cover
    from pathlib import Path as _Path

    sys.path.append(str(_Path(__file__).resolve().parent.parent))
    from readability_eval.config import ScoringOptions, resolve_dict_path  # type: ignore
    from readability_eval.dictionary import load_frequency_dict  # type: ignore
    from readability_eval.errors import InputReadError, NoWordsError, ReadabilityError  # type: ignore
    from readability_eval.scorer import compute_readability  # type: ignore
    from readability_eval.tokenizer import tokenize_english_words  # type: ignore

logger = logging.getLogger(__name__)


def read_input_text(path: Path | None = None, stdin: TextIO | None = None) -> str:
    """
    Read the text to score from a file, or from standard input when no path is given.

    Args:
        path: Optional path to a UTF-8 text file
        stdin: Stream to read when path is None (defaults to sys.stdin)

    Returns:
        The full text content

    Raises:
        FileNotFoundError: If path doesn't exist
        IsADirectoryError: If path is a directory
        InputReadError: If the content is not valid UTF-8
    """
    if path is None:
        stream = stdin if stdin is not None else sys.stdin
        try:
            return stream.read()
        except UnicodeDecodeError as e:
            raise InputReadError(f"Failed to read text from STDIN: {e.reason}") from e

    if not path.exists():
        raise FileNotFoundError(f"Input text file not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Expected a text file, got directory {path}")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputReadError(f"Input text file {path} is not valid UTF-8: {e.reason}") from e


def run_pipeline(
    dict_path: Path,
    read_text: Callable[[], str],
    options: ScoringOptions | None = None,
) -> float:
    """
    Load the dictionary, read and tokenize the text, and return its readability score.

    The dictionary is loaded before the text is read. The whole text is
    always tokenized; ``options.top_text_words`` only limits which tokens
    are scored.

    Args:
        dict_path: Path to the JSON frequency dictionary
        read_text: Callable returning the text to score
        options: Optional truncation limits

    Returns:
        Mean token weight in [0, 1]

    Raises:
        NoWordsError: If there are no tokens to score
        FileNotFoundError, DictionaryFormatError, EmptyDictionaryError: From dictionary loading
        InputReadError: From read_text
    """
    options = options or ScoringOptions()

    weights = load_frequency_dict(dict_path, options.top_dict_entries)
    text = read_text()
    tokens = tokenize_english_words(text)
    logger.debug("Tokenized %d words", len(tokens))

    score = compute_readability(tokens, weights, options.top_text_words)
    if score is None:
        raise NoWordsError("No words found to score")
    return score


def format_score(score: float) -> str:
    return f"{score:.6f}"


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    return number


def _package_version() -> str:
    try:
        return version("readability-eval")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readability",
        description="Score how readable a text is using a word frequency dictionary.",
    )
    parser.add_argument(
        "--dict",
        dest="dict_path",
        type=Path,
        default=None,
        help="Path to the JSON dictionary [[\"the\", 199660765], ...] "
        "(default: $READABILITY_DICT or word_frequencies.json)",
    )
    parser.add_argument(
        "--text",
        dest="text_path",
        type=Path,
        default=None,
        help="Path to the text file to score; reads STDIN when omitted",
    )
    parser.add_argument(
        "--top-text-words",
        type=_non_negative_int,
        default=None,
        help="Score only the first N words of the text",
    )
    parser.add_argument(
        "--top-dict-entries",
        type=_non_negative_int,
        default=None,
        help="Use only the first K dictionary entries",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for readability scoring."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    dict_path = args.dict_path if args.dict_path is not None else resolve_dict_path()
    options = ScoringOptions(
        top_dict_entries=args.top_dict_entries,
        top_text_words=args.top_text_words,
    )

    try:
        score = run_pipeline(dict_path, lambda: read_input_text(args.text_path), options)
    except (ReadabilityError, OSError) as exc:
        raise SystemExit(str(exc)) from exc

    print(format_score(score))


if __name__ == "__main__":
    main()


"""
Usage examples:

  - File input: readability --dict word_frequencies.json --text texts/sample.txt
  - From STDIN: cat texts/sample.txt | python readability_eval/main.py --top-text-words 500
  - Smaller dictionary: readability --text texts/sample.txt --top-dict-entries 10000
"""
