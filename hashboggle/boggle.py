"""Boggle word search along rows, columns and diagonals of a random board."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from .mt19937 import MT19937

Board = list[list[str]]

# Scrabble letter frequencies for A through Z.
_LETTER_FREQUENCIES = (
    9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1,
)
_LETTERS = "".join(
    chr(ord("A") + offset) * count for offset, count in enumerate(_LETTER_FREQUENCIES)
)

# Search directions: right, down, and down-right diagonal.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def gen_board(n: int, seed: int) -> Board:
    """Return an ``n`` x ``n`` board of letters drawn with Scrabble frequencies."""
    generator = MT19937(seed)
    return [[_LETTERS[generator() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Board) -> str:
    """Render the board with each letter right-aligned in two columns."""
    return "".join("".join(f"{letter:>2}" for letter in row) + "\n" for row in board)


def print_board(board: Board, out: TextIO | None = None) -> None:
    """Write the formatted board to ``out`` (standard output by default)."""
    stream = out if out is not None else sys.stdout
    stream.write(format_board(board))


def parse_dict(fname: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes.

    The prefix set always contains the empty string.
    """
    try:
        with open(fname, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    dictionary: set[str] = set()
    prefix: set[str] = {""}
    for word in text.split():
        dictionary.add(word)
        prefix.update(word[:i] for i in range(1, len(word)))
    return dictionary, prefix


def _search(
    dictionary: set[str],
    prefix: set[str],
    board: Board,
    word: str,
    result: set[str],
    r: int,
    c: int,
    dr: int,
    dc: int,
) -> bool:
    """Extend ``word`` from (r, c) in one direction, keeping only the longest match."""
    size = len(board)
    if r >= size or c >= size:
        return False
    new_word = word + board[r][c]
    is_word = new_word in dictionary
    if new_word not in prefix:
        if is_word:
            result.add(new_word)
        return is_word
    if _search(dictionary, prefix, board, new_word, result, r + dr, c + dc, dr, dc):
        return True
    if is_word:
        result.add(new_word)
    return is_word


def boggle(dictionary: set[str], prefix: set[str], board: Board) -> set[str]:
    """Return the longest dictionary words starting at each cell in each direction."""
    result: set[str] = set()
    size = len(board)
    for r in range(size):
        for c in range(size):
            for dr, dc in _DIRECTIONS:
                _search(dictionary, prefix, board, "", result, r, c, dr, dc)
    return result


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a board, print it, and list the dictionary words found on it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = _atoi(args[0])
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefix = parse_dict(args[2])
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())