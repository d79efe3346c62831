"""General-purpose helper utilities.

Functions here are side-effect free and reusable across the package.
"""
from __future__ import annotations

import re
from collections.abc import Sequence


def join_names(names: Sequence[str]) -> str:
    """Join names into a human-readable list.

    Args:
        names: Names to join, in the order they should appear.

    Returns:
        ``"A"`` for one name, ``"A and B"`` for two and ``"A, B and C"`` for
        three or more. An empty sequence gives an empty string.
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def split_dotted(text: str) -> list[int]:
    """Split a dotted version string such as ``"1.2.3"`` into integers.

    Args:
        text: The string to split. Surrounding whitespace is ignored.

    Returns:
        The integer parts, in order.

    Raises:
        ValueError: If any part is empty or not a decimal integer.
    """
    parts = text.strip().split(".")
    numbers = []
    for part in parts:
        part = part.strip()
        if not re.fullmatch(r"-?[0-9]+", part):
            raise ValueError(f"'{part}' is not a number in '{text}'")
        numbers.append(int(part))
    return numbers
