"""Helpers to align text for terminal output."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["align_print_with_colon", "align_columns"]


def _align_right(text: str, width: int) -> str:
    return text.lstrip(" ").rjust(width)


def _align_left(text: str, width: int) -> str:
    return text.rstrip(" ").ljust(width)


def align_print_with_colon(*args: str) -> str:
    """Right-align the part before the first ':' of every line so colons line up."""
    heads = []
    for line in args:
        pieces = line.split(":")
        if len(pieces) < 2:
            raise ValueError("input string must have : for split")
        heads.append(pieces[0])

    width = max((len(head) for head in heads), default=0)
    return "\n".join(
        _align_right(head, width) + _align_left(line[len(head):], 1)
        for head, line in zip(heads, args)
    )


def align_columns(*args: Sequence[str]) -> list[list[str]]:
    """Right-align every column of the given rows; the last column is left-aligned."""
    if not args:
        return []

    widths = [0] * len(args[0])
    for row in args:
        for column, cell in enumerate(row):
            if column >= len(widths):
                widths.append(len(cell))
            elif widths[column] < len(cell):
                widths[column] = len(cell)

    last = len(widths) - 1
    result = []
    for row in args:
        aligned = [""] * len(widths)
        for column, cell in enumerate(row):
            if column == last:
                aligned[column] = _align_left(cell, 1)
            else:
                aligned[column] = _align_right(cell, widths[column])
        result.append(aligned)
    return result