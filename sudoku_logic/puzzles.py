"""Built-in puzzles and loading of puzzle collections from text files."""

from __future__ import annotations
from typing import Dict

BUILTIN_PUZZLES: Dict[str, str] = {
    # Solvable by single-candidate elimination alone
    "simple": """
    9 - - 8 3 - 1 5 7
    5 - 3 1 - 6 2 8 -
    1 - - 7 4 - - 9 -
    - - - - 5 - 8 3 -
    3 - 1 - - 4 6 7 2
    2 - - - 1 3 - - 9
    - - 2 - 7 - - 1 -
    - - - - - - - 6 -
    - 3 4 - 6 - 9 2 -
    """,
    # No cell starts with a single candidate; needs hidden singles
    "no_singles": """
    5 - - - - - - - 9
    - - 9 3 - - - - -
    - 2 7 - - - 1 - -
    4 - - 5 - - 3 - 8
    - 1 - - - 6 - 5 7
    - - 3 - - - 9 - -
    9 - - - 4 5 - - 3
    1 - - - 7 - - - -
    - - - - - - 6 - 5
    """,
    "classic": """
    5 3 - - 7 - - - -
    6 - - 1 9 5 - - -
    - 9 8 - - - - 6 -
    8 - - - 6 - - - 3
    4 - - 8 - 3 - - 1
    7 - - - 2 - - - 6
    - 6 - - - - 2 8 -
    - - - 4 1 9 - - 5
    - - - - 8 - - 7 9
    """,
    # Single candidates run out part-way through
    "stalls_midway": """
    - - 9 7 4 8 - - -
    7 - - - - - - - -
    - 2 - 1 - 9 - - -
    - - 7 - - - 2 4 -
    - 6 4 - 1 - 5 9 -
    - 9 8 - - - 3 - -
    - - - 8 - 3 - 2 -
    - - - - - - - - 6
    - - - 2 7 5 9 - -
    """,
}


def parse_puzzle_blocks(text: str) -> Dict[str, str]:
    """
    Split a puzzle collection into named puzzles.

    Puzzles are separated by one or more blank lines. Lines starting with
    '#' are comments; the first comment in a block names the puzzle,
    otherwise it is called ``puzzle_<n>`` counting from 1.

    Returns:
        Ordered mapping of puzzle name to its board text.

    Raises:
        ValueError: if two puzzles share a name.
    """
    puzzles: Dict[str, str] = {}
    name = None
    body = []

    def flush():
        nonlocal name, body
        # A name comment may sit on its own above the puzzle
        if not body:
            return
        key = name or f"puzzle_{len(puzzles) + 1}"
        if key in puzzles:
            raise ValueError(f"Duplicate puzzle name: {key}")
        puzzles[key] = '\n'.join(body)
        name = None
        body = []

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            flush()
        elif stripped.startswith('#'):
            if name is None and not body:
                name = stripped.lstrip('#').strip() or None
        else:
            body.append(stripped)
    flush()

    return puzzles


def load_puzzle_file(path: str) -> Dict[str, str]:
    """
    Load a puzzle collection from ``path``.

    Raises:
        ValueError: if the file holds no puzzles.
    """
    with open(path, "r") as f:
        puzzles = parse_puzzle_blocks(f.read())
    if not puzzles:
        raise ValueError(f"No puzzles found in {path}")
    return puzzles
