"""
Positional weight tables for hex boards.

Each cell gets a weight that decreases with its Euclidean distance from the
board center (size, size): 100 points at the center, 15 fewer per unit of
distance, never below zero.

Tables are built once per board size and shared by every search. The cache
is guarded by a lock so concurrent players can ask for a table safely, and
the arrays are read-only.
"""

import threading
from typing import Dict

import numpy as np


CENTER_WEIGHT = 100
DISTANCE_PENALTY = 15


def build_positional_weights(size: int) -> np.ndarray:
    """
    Compute the positional weight table for a board of radius `size`.

    Args:
        size: Board radius (the center is at (size, size))

    Returns:
        (2*size+1, 2*size+1) int32 array indexed [x, y]
    """
    dim = 2 * size + 1
    xs, ys = np.indices((dim, dim))
    dist = np.hypot(xs - size, ys - size)
    weights = np.floor(np.maximum(0.0, CENTER_WEIGHT - dist * DISTANCE_PENALTY))
    return weights.astype(np.int32)


# Process-wide cache, one table per board size
_weight_tables: Dict[int, np.ndarray] = {}
_weight_lock = threading.Lock()


def get_positional_weights(size: int) -> np.ndarray:
    """
    Get or create the shared weight table for a board size.

    Args:
        size: Board radius

    Returns:
        Read-only weight table
    """
    table = _weight_tables.get(size)
    if table is not None:
        return table

    with _weight_lock:
        table = _weight_tables.get(size)
        if table is None:
            table = build_positional_weights(size)
            table.setflags(write=False)
            _weight_tables[size] = table

    return table
