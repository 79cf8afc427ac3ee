# -*- coding: utf-8 -*-
"""Axis-aligned bounding boxes.

An Envelope is an immutable value. The "null" envelope stands for the bounds of an empty geometry: it contains,
covers and intersects nothing, and its distance to anything is infinite.
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Envelope:
    """Bounding box defined by its minimum and maximum ordinates.

    Use ``Envelope.null()`` for the empty box and ``Envelope.from_points`` when the corner order is unknown.
    A box whose ``maxx`` is smaller than its ``minx`` is null.
    """

    minx: float = 0.0
    miny: float = 0.0
    maxx: float = -1.0
    maxy: float = -1.0

    @classmethod
    def null(cls):
        return cls()

    @classmethod
    def from_points(cls, x1, y1, x2, y2):
        """Build the box spanned by two corner points given in any order."""
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @classmethod
    def from_coordinates(cls, coords):
        """Bounding box of an ``(n, 2)`` coordinate array; null when the array is empty."""
        if len(coords) == 0:
            return cls.null()
        mins = coords.min(axis=0)
        maxs = coords.max(axis=0)
        return cls(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))

    @property
    def is_null(self):
        return self.maxx < self.minx

    @property
    def width(self):
        if self.is_null:
            return 0.0
        return self.maxx - self.minx

    @property
    def height(self):
        if self.is_null:
            return 0.0
        return self.maxy - self.miny

    @property
    def area(self):
        return self.width * self.height

    @property
    def min_extent(self):
        return min(self.width, self.height)

    @property
    def max_extent(self):
        return max(self.width, self.height)

    @property
    def centre(self):
        if self.is_null:
            return None
        return ((self.minx + self.maxx) / 2.0, (self.miny + self.maxy) / 2.0)

    def _bounds_of(self, other):
        # Accepts another Envelope or a single (x, y) location
        if isinstance(other, Envelope):
            return other.minx, other.miny, other.maxx, other.maxy, other.is_null
        x, y = float(other[0]), float(other[1])
        return x, y, x, y, False

    def intersects(self, other):
        """Whether the closed boxes share at least one point."""
        minx, miny, maxx, maxy, other_null = self._bounds_of(other)
        if self.is_null or other_null:
            return False
        return not (minx > self.maxx or maxx < self.minx or miny > self.maxy or maxy < self.miny)

    def disjoint(self, other):
        return not self.intersects(other)

    def covers(self, other):
        """Whether every point of ``other`` lies in this closed box."""
        minx, miny, maxx, maxy, other_null = self._bounds_of(other)
        if self.is_null or other_null:
            return False
        return minx >= self.minx and maxx <= self.maxx and miny >= self.miny and maxy <= self.maxy

    def contains(self, other):
        """Same as ``covers``: boundary points count as contained for boxes."""
        return self.covers(other)

    def equals(self, other):
        if self.is_null:
            return other.is_null
        if other.is_null:
            return False
        return (self.minx, self.miny, self.maxx, self.maxy) == (other.minx, other.miny, other.maxx, other.maxy)

    def distance(self, other):
        """Euclidean distance between the boxes; 0 when they intersect, infinite if either is null."""
        if self.is_null or other.is_null:
            return math.inf
        if self.intersects(other):
            return 0.0

        dx = 0.0
        if self.maxx < other.minx:
            dx = other.minx - self.maxx
        elif self.minx > other.maxx:
            dx = self.minx - other.maxx

        dy = 0.0
        if self.maxy < other.miny:
            dy = other.miny - self.maxy
        elif self.miny > other.maxy:
            dy = self.miny - other.maxy

        return float(np.hypot(dx, dy))

    def expand_to_include(self, other):
        """Return the smallest box covering this one and ``other`` (an Envelope or a location)."""
        minx, miny, maxx, maxy, other_null = self._bounds_of(other)
        if other_null:
            return self
        if self.is_null:
            return Envelope(minx, miny, maxx, maxy)
        return Envelope(min(self.minx, minx), min(self.miny, miny), max(self.maxx, maxx), max(self.maxy, maxy))

    def expand_by(self, dx, dy=None):
        """Grow (or shrink, for negative deltas) the box; shrinking past zero size yields the null box."""
        if dy is None:
            dy = dx
        if self.is_null:
            return self
        minx, maxx = self.minx - dx, self.maxx + dx
        miny, maxy = self.miny - dy, self.maxy + dy
        if minx > maxx or miny > maxy:
            return Envelope.null()
        return Envelope(minx, miny, maxx, maxy)

    def intersection(self, other):
        if not self.intersects(other):
            return Envelope.null()
        return Envelope(
            max(self.minx, other.minx),
            max(self.miny, other.miny),
            min(self.maxx, other.maxx),
            min(self.maxy, other.maxy),
        )

    def __str__(self):
        if self.is_null:
            return "Env[null]"
        return f"Env[{self.minx} : {self.maxx}, {self.miny} : {self.maxy}]"
