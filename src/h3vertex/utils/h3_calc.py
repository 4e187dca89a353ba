"""
H3 index field accessors using efficient bitwise operations.
"""

from typing import Sequence, Union

import h3

from h3vertex.constants import (
    BASE_CELL_MASK,
    BASE_CELL_OFFSET,
    CELL_MODE,
    DIGIT_MASK,
    Direction,
    INDEX_MASK,
    MAX_RES,
    MODE_MASK,
    MODE_OFFSET,
    PENTAGON_BASE_CELLS,
    PER_DIGIT_OFFSET,
    POLAR_PENTAGON_BASE_CELLS,
    RES_MASK,
    RES_OFFSET,
)

CellLike = Union[int, str]


def to_int(cell: CellLike) -> int:
    """
    Normalize an H3 cell to its integer form.

    Args:
        cell: H3 cell as integer or hexadecimal string

    Returns:
        The 64-bit integer index
    """
    if isinstance(cell, str):
        return h3.str_to_int(cell)
    return int(cell)


def get_mode(cell: int) -> int:
    """Get the index mode (bits 59-62)."""
    return (cell >> MODE_OFFSET) & MODE_MASK


def get_resolution(cell: int) -> int:
    """
    Get the resolution of an H3 cell index (integer).

    Args:
        cell: H3 cell index

    Returns:
        Resolution (0-15) or -1 if invalid
    """
    if cell == 0:
        return -1
    return (cell >> RES_OFFSET) & RES_MASK


def get_base_cell(cell: int) -> int:
    """Get the base cell number (bits 45-51)."""
    return (cell >> BASE_CELL_OFFSET) & BASE_CELL_MASK


def get_index_digit(cell: int, res: int) -> Direction:
    """
    Get the digit of a cell at the given resolution.

    Args:
        cell: H3 cell index
        res: Resolution of the digit (1-15)

    Returns:
        The digit as a Direction; INVALID for unused digits
    """
    shift = (MAX_RES - res) * PER_DIGIT_OFFSET
    return Direction((cell >> shift) & DIGIT_MASK)


def leading_non_zero_digit(cell: int) -> Direction:
    """
    Get the first non-zero digit of a cell, i.e. the direction of the
    cell from its nearest non-centered ancestor.

    Returns:
        The digit, or CENTER if all digits are zero
    """
    for res in range(1, get_resolution(cell) + 1):
        digit = get_index_digit(cell, res)
        if digit != Direction.CENTER:
            return digit
    return Direction.CENTER


def is_base_cell_pentagon(base_cell: int) -> bool:
    return base_cell in PENTAGON_BASE_CELLS


def is_polar_pentagon(base_cell: int) -> bool:
    """Base cells 4 and 117 sit on the icosahedron poles."""
    return base_cell in POLAR_PENTAGON_BASE_CELLS


def is_pentagon(cell: int) -> bool:
    """A cell is a pentagon when it is a centered descendant of a pentagon base cell."""
    return (is_base_cell_pentagon(get_base_cell(cell))
            and leading_non_zero_digit(cell) == Direction.CENTER)


def build_cell(res: int, base_cell: int, digits: Sequence[int] = ()) -> int:
    """
    Build a cell index from its fields.

    Args:
        res: Resolution (0-15)
        base_cell: Base cell number (0-121)
        digits: Digits for resolutions 1..len(digits); remaining digits
            up to res are CENTER

    Returns:
        The 64-bit integer index
    """
    if not 0 <= res <= MAX_RES:
        raise ValueError(f"Resolution must be 0-{MAX_RES}, got {res}")
    if len(digits) > res:
        raise ValueError(f"Got {len(digits)} digits for resolution {res}")

    cell = (CELL_MODE << MODE_OFFSET) | (res << RES_OFFSET) | (base_cell << BASE_CELL_OFFSET)

    # Unused digits are all 1s
    padding = (1 << (MAX_RES * PER_DIGIT_OFFSET)) - 1
    cell |= padding

    for r in range(1, res + 1):
        digit = digits[r - 1] if r <= len(digits) else Direction.CENTER
        shift = (MAX_RES - r) * PER_DIGIT_OFFSET
        cell &= ~(DIGIT_MASK << shift) & INDEX_MASK
        cell |= int(digit) << shift

    return cell
