# -*- coding: utf-8 -*-
"""Coordinate storage and the vertex-level helpers shared by the geometry variants.

Vertex sequences are numpy arrays of shape ``(n, 2)`` and dtype float64. Geometries own their arrays exclusively;
everything handed out to callers is a copy unless the name says otherwise.
"""

from typing import NamedTuple

import numpy as np

from .errors import PreconditionError


class Coordinate(NamedTuple):
    """A single 2-D location. Tuple ordering gives the lexicographic (x, then y) order."""

    x: float
    y: float

    def distance(self, other):
        """Euclidean distance to another coordinate."""
        return float(np.hypot(self.x - other[0], self.y - other[1]))


def as_coordinate_array(coords=None):
    """Convert an iterable of 2-D points to a fresh ``(n, 2)`` float64 array.

    Parameters:
    -----------
    coords : iterable, optional
        Coordinates as tuples, ``Coordinate`` values or an array. None yields an empty array.

    Returns:
    --------
    array : numpy.ndarray
        A new array that the caller owns
    """
    if coords is None:
        return np.empty((0, 2), dtype=np.float64)

    array = np.array(coords, dtype=np.float64)
    if array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if array.ndim == 1 and array.shape[0] == 2:
        array = array.reshape(1, 2)
    if array.ndim != 2 or array.shape[1] != 2:
        raise PreconditionError(f"Expected 2-D coordinates, got an array of shape {array.shape}")
    return array


def to_coordinate(row):
    return Coordinate(float(row[0]), float(row[1]))


def signed_area(ring):
    """Shoelace area of a closed ring; positive when the ring is counter-clockwise."""
    if len(ring) < 4:
        return 0.0
    x = ring[:, 0]
    y = ring[:, 1]
    return float(np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]) / 2.0)


def is_ccw(ring):
    return signed_area(ring) > 0.0


def path_length(coords):
    if len(coords) < 2:
        return 0.0
    return float(np.sum(np.hypot(*np.diff(coords, axis=0).T)))


def _sign(value):
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


class CoordinateSequenceComparator:
    """Lexicographic comparison of vertex sequences.

    Two ordinates closer than ``tolerance`` are treated as equal. With a non-zero tolerance the ordering is no
    longer transitive, so it should only be used for comparing geometries known to be close to each other.

    Parameters:
    -----------
    tolerance : float
        Maximum absolute ordinate difference still considered equal
    """

    def __init__(self, tolerance=0.0):
        if tolerance < 0:
            raise ValueError(f"Comparator tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance

    def compare_coordinate(self, a, b):
        for ordinate in range(2):
            delta = a[ordinate] - b[ordinate]
            if abs(delta) <= self.tolerance:
                continue
            return -1 if delta < 0 else 1
        return 0

    def compare(self, seq1, seq2):
        """Compare two ``(n, 2)`` arrays vertex by vertex, then by length.

        Returns:
        --------
        result : int
            -1, 0 or 1
        """
        n = min(len(seq1), len(seq2))
        if n:
            differs = np.abs(seq1[:n] - seq2[:n]) > self.tolerance
            rows = np.flatnonzero(differs.any(axis=1))
            if rows.size:
                i = rows[0]
                ordinate = 0 if differs[i, 0] else 1
                return -1 if seq1[i, ordinate] < seq2[i, ordinate] else 1
        return _sign(len(seq1) - len(seq2))


DEFAULT_COMPARATOR = CoordinateSequenceComparator()


def coordinates_equal(seq1, seq2, tolerance=0.0):
    """Vertex-wise equality within a Euclidean tolerance; sequences of different length are never equal."""
    if seq1.shape != seq2.shape:
        return False
    if tolerance == 0:
        return bool(np.array_equal(seq1, seq2))
    return bool(np.all(np.hypot(*(seq1 - seq2).T) <= tolerance))
