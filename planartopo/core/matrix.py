# -*- coding: utf-8 -*-
"""The Dimensionally Extended Nine-Intersection Model (DE-9IM).

An IntersectionMatrix records, for the interior, boundary and exterior of two geometries A and B, the dimension
of each pairwise intersection of those point-sets. Every named spatial predicate is a fixed query over this
matrix; the queries here follow the OGC Simple Features definitions and are not configurable.
"""

from enum import IntEnum

import numpy as np

from .errors import PreconditionError


class Location(IntEnum):
    """Topological location of a point relative to a geometry; also the row/column index of the matrix."""

    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2
    NONE = -1


class Dimension(IntEnum):
    """Dimension codes stored in a DE-9IM cell, plus the pattern-only codes TRUE and DONTCARE."""

    DONTCARE = -3
    TRUE = -2
    FALSE = -1
    P = 0
    L = 1
    A = 2

    @classmethod
    def from_symbol(cls, symbol):
        """Map one of ``F T * 0 1 2`` to its dimension code."""
        try:
            return _SYMBOL_TO_DIMENSION[symbol.upper()]
        except KeyError:
            raise PreconditionError(f"Unknown dimension symbol: {symbol!r}") from None

    @classmethod
    def to_symbol(cls, value):
        return _DIMENSION_TO_SYMBOL[value]


_SYMBOL_TO_DIMENSION = {
    "F": Dimension.FALSE,
    "T": Dimension.TRUE,
    "*": Dimension.DONTCARE,
    "0": Dimension.P,
    "1": Dimension.L,
    "2": Dimension.A,
}
_DIMENSION_TO_SYMBOL = {value: symbol for symbol, value in _SYMBOL_TO_DIMENSION.items()}

I, B, E = Location.INTERIOR, Location.BOUNDARY, Location.EXTERIOR
P, L, A = Dimension.P, Dimension.L, Dimension.A


def is_true(value):
    """Whether a cell value denotes a non-empty intersection."""
    return value >= 0 or value == Dimension.TRUE


def matches_symbol(value, symbol):
    """Test one cell value against one pattern symbol."""
    if symbol == "*":
        return True
    if symbol == "T":
        return is_true(value)
    if symbol == "F":
        return value == Dimension.FALSE
    if symbol == "0":
        return value == Dimension.P
    if symbol == "1":
        return value == Dimension.L
    if symbol == "2":
        return value == Dimension.A
    raise PreconditionError(f"Unknown dimension symbol in pattern: {symbol!r}")


class IntersectionMatrix:
    """Immutable 3x3 DE-9IM matrix.

    Rows index the locations of the first geometry, columns those of the second, both in the order
    interior, boundary, exterior.

    Parameters:
    -----------
    elements : str or sequence, optional
        Nine dimension symbols such as ``"212101212"``, or nine (or 3x3) dimension codes.
        Defaults to all ``F``.
    """

    def __init__(self, elements=None):
        if elements is None:
            cells = np.full((3, 3), Dimension.FALSE, dtype=np.int8)
        elif isinstance(elements, str):
            if len(elements) != 9:
                raise PreconditionError(f"Should be length 9, is [{len(elements)}] instead")
            cells = np.array([Dimension.from_symbol(s) for s in elements], dtype=np.int8).reshape(3, 3)
        else:
            cells = np.array(elements, dtype=np.int8).reshape(3, 3)
        cells.flags.writeable = False
        self._cells = cells

    def get(self, row, col):
        return Dimension(int(self._cells[row, col]))

    def transpose(self):
        """Matrix of the same relationship seen from the second geometry."""
        return IntersectionMatrix(self._cells.T)

    def matches(self, pattern):
        """Whether every cell satisfies the corresponding symbol of a nine-character pattern.

        ``0 1 2`` match exactly, ``T`` matches any non-empty intersection, ``F`` only an empty one
        and ``*`` anything.
        """
        if len(pattern) != 9:
            raise PreconditionError(f"Should be length 9, is [{len(pattern)}] instead")
        cells = self._cells.ravel()
        return all(matches_symbol(int(value), symbol) for value, symbol in zip(cells, pattern.upper()))

    def is_disjoint(self):
        c = self._cells
        return bool(
            c[I, I] == Dimension.FALSE
            and c[I, B] == Dimension.FALSE
            and c[B, I] == Dimension.FALSE
            and c[B, B] == Dimension.FALSE
        )

    def is_intersects(self):
        return not self.is_disjoint()

    def is_touches(self, dim_a, dim_b):
        """[FT*******], [F**T*****] or [F***T****]; never true between two puntal geometries."""
        if dim_a > dim_b:
            return self.transpose().is_touches(dim_b, dim_a)
        c = self._cells
        if (dim_a, dim_b) in ((A, A), (L, L), (L, A), (P, A), (P, L)):
            return bool(c[I, I] == Dimension.FALSE and (is_true(c[I, B]) or is_true(c[B, I]) or is_true(c[B, B])))
        return False

    def is_crosses(self, dim_a, dim_b):
        """[T*T******] for P/L, P/A and L/A, [T*****T**] for the reverse pairs, [0********] for L/L."""
        c = self._cells
        if (dim_a, dim_b) in ((P, L), (P, A), (L, A)):
            return bool(is_true(c[I, I]) and is_true(c[I, E]))
        if (dim_a, dim_b) in ((L, P), (A, P), (A, L)):
            return bool(is_true(c[I, I]) and is_true(c[E, I]))
        if (dim_a, dim_b) == (L, L):
            return bool(c[I, I] == Dimension.P)
        return False

    def is_within(self):
        c = self._cells
        return bool(is_true(c[I, I]) and c[I, E] == Dimension.FALSE and c[B, E] == Dimension.FALSE)

    def is_contains(self):
        """[T*****FF*]"""
        c = self._cells
        return bool(is_true(c[I, I]) and c[E, I] == Dimension.FALSE and c[E, B] == Dimension.FALSE)

    def is_covers(self):
        """[T*****FF*], [*T****FF*], [***T**FF*] or [****T*FF*]"""
        c = self._cells
        has_point_in_common = is_true(c[I, I]) or is_true(c[I, B]) or is_true(c[B, I]) or is_true(c[B, B])
        return bool(has_point_in_common and c[E, I] == Dimension.FALSE and c[E, B] == Dimension.FALSE)

    def is_covered_by(self):
        c = self._cells
        has_point_in_common = is_true(c[I, I]) or is_true(c[I, B]) or is_true(c[B, I]) or is_true(c[B, B])
        return bool(has_point_in_common and c[I, E] == Dimension.FALSE and c[B, E] == Dimension.FALSE)

    def is_equals(self, dim_a, dim_b):
        """[T*F**FFF*] between geometries of the same dimension."""
        if dim_a != dim_b:
            return False
        c = self._cells
        return bool(
            is_true(c[I, I])
            and c[I, E] == Dimension.FALSE
            and c[B, E] == Dimension.FALSE
            and c[E, I] == Dimension.FALSE
            and c[E, B] == Dimension.FALSE
        )

    def is_overlaps(self, dim_a, dim_b):
        """[T*T***T**] for P/P and A/A, [1*T***T**] for L/L; false between different dimensions."""
        c = self._cells
        if (dim_a, dim_b) in ((P, P), (A, A)):
            return bool(is_true(c[I, I]) and is_true(c[I, E]) and is_true(c[E, I]))
        if (dim_a, dim_b) == (L, L):
            return bool(c[I, I] == Dimension.L and is_true(c[I, E]) and is_true(c[E, I]))
        return False

    def __eq__(self, other):
        if not isinstance(other, IntersectionMatrix):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self):
        return hash(self._cells.tobytes())

    def __str__(self):
        return "".join(_DIMENSION_TO_SYMBOL[int(value)] for value in self._cells.ravel())

    def __repr__(self):
        return f"IntersectionMatrix('{self}')"
