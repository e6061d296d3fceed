# utils.py
from typing import Tuple

import constants as const


def linear_index(coord, width: int) -> int:
    """Row-major flattening of an (x, y) coordinate: y * width + x."""
    return coord.y * width + coord.x


def would_underflow(value: int, offset: int) -> bool:
    """True if subtracting offset from value would go below zero."""
    return value < offset


def scale(
    value: int,
    factor: int = const.WIREFRAME_SCALE,
    offset: int = const.WIREFRAME_OFFSET,
) -> int:
    """
    Maps a logical coordinate (or size) into wireframe space.
    With the defaults, logical cell i lands on wireframe position 2i+1 and a
    logical size n becomes 2n+1, leaving every even index for walls.
    """
    return value * factor + offset


def step(x: int, y: int, delta: Tuple[int, int]) -> Tuple[int, int]:
    """Moves (x, y) one step along delta. Callers guard the unsigned edges."""
    dx, dy = delta
    return x + dx, y + dy
