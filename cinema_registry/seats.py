"""Seat addressing: seat ids like "C7" <-> zero-based (row, col) coordinates."""

import string
from typing import Iterable, List, Optional, Tuple

from .schemas import Screen

ROW_LETTERS = string.ascii_uppercase


def parse_seat(raw: str) -> Optional[Tuple[int, int]]:
    """Parse "A10" into (0, 9). Returns None when the id is malformed.

    Bounds are not checked here; see ``seat_exists``.
    """
    if raw is None:
        return None
    text = raw.strip().upper()
    if len(text) < 2:
        return None
    letter, digits = text[0], text[1:]
    if letter not in ROW_LETTERS:
        return None
    if not (digits.isascii() and digits.isdigit()):
        return None
    try:
        number = int(digits)
    except ValueError:
        # longer than the int conversion limit
        return None
    return ROW_LETTERS.index(letter), number - 1


def seat_id(row: int, col: int) -> str:
    return f"{ROW_LETTERS[row]}{col + 1}"


def seat_exists(screen: Screen, raw: str) -> bool:
    coords = parse_seat(raw)
    if coords is None:
        return False
    row, col = coords
    return 0 <= row < screen.rows and 0 <= col < screen.seats_per_row


def seat_codes(rows: int, cols: int) -> List[str]:
    letters = ROW_LETTERS[:rows]  # 1->A, 2->B, ...
    return [f"{r}{c}" for r in letters for c in range(1, cols + 1)]


def canonical_seat(raw: str) -> str:
    """Trimmed uppercase form; "a01" and "A1" both become "A1"."""
    text = raw.strip().upper()
    coords = parse_seat(text)
    if coords is None:
        return text
    return seat_id(*coords)


def normalize_seats(seats: Iterable[str]) -> List[str]:
    """["a1", " A2 ", "a2"] -> ["A1", "A2"]; blanks dropped, first occurrence kept."""
    result: List[str] = []
    seen = set()
    for raw in seats or []:
        if raw is None or not raw.strip():
            continue
        seat = canonical_seat(raw)
        if seat not in seen:
            seen.add(seat)
            result.append(seat)
    return result
