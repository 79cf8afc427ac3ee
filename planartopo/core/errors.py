# -*- coding: utf-8 -*-
"""Exceptions raised by the geometry kernel.

Failures are split by kind so that callers can decide whether to retry with another precision model,
fall back to another strategy or abort:

- ``PreconditionError`` for arguments the kernel refuses before doing any work
- ``TopologyException`` for dimension-losing collapses in constructed results
- ``RobustnessError`` for numerical failures inside a delegated algorithm
"""


class GeometryError(Exception):
    """Base class for every error raised by planartopo."""


class PreconditionError(GeometryError, ValueError):
    """An argument violates the contract of the called operation."""


class TopologyException(GeometryError):
    """Indicates an invalid or inconsistent topological situation encountered during processing.

    Parameters:
    -----------
    message : str
        Description of the failure
    coord : Coordinate, optional
        Location of the collapse when the algorithm was able to report one
    """

    def __init__(self, message="", coord=None):
        if coord is None:
            msg = f"TopologyException: {message}"
        else:
            msg = f"TopologyException: {message} at {coord.x} {coord.y}"
        super().__init__(msg)
        self.coord = coord


class RobustnessError(GeometryError):
    """A delegated algorithm failed for numerical reasons."""
