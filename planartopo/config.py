# -*- coding: utf-8 -*-
"""Configuration for the delegated constructive operations.

Both objects are immutable and validated on construction. A GeometryFactory holds one of each and hands them
to its services, so every geometry created from the same factory shares the same policy.
"""

from dataclasses import dataclass
from enum import IntEnum


class EndCapStyle(IntEnum):
    """Shape of buffer ends for lineal and puntal inputs."""

    ROUND = 1
    BUTT = 2
    SQUARE = 3


@dataclass(frozen=True)
class BufferParameters:
    """Defaults used by ``Geometry.buffer`` when the caller does not pass them explicitly."""

    quadrant_segments: int = 8
    end_cap_style: EndCapStyle = EndCapStyle.ROUND

    def __post_init__(self):
        if not isinstance(self.quadrant_segments, int) or self.quadrant_segments < 1:
            raise ValueError(f"Invalid quadrant_segments: {self.quadrant_segments}. Must be a positive integer")
        try:
            object.__setattr__(self, "end_cap_style", EndCapStyle(self.end_cap_style))
        except ValueError:
            raise ValueError(
                f"Invalid end_cap_style: {self.end_cap_style}. Must be one of {[style.name for style in EndCapStyle]}"
            ) from None


@dataclass(frozen=True)
class OverlayConfig:
    """Retry policy of the overlay service.

    When ``snap_if_needed`` is set, an overlay that fails on the original operands is retried once with the operands
    snapped to each other. The snap tolerance is ``snap_precision_factor`` times the smallest extent of the operands'
    envelopes, widened to the precision grid for fixed precision models.
    """

    snap_if_needed: bool = True
    snap_precision_factor: float = 1e-9

    def __post_init__(self):
        if not 0 < self.snap_precision_factor < 1:
            raise ValueError(f"Invalid snap_precision_factor: {self.snap_precision_factor}. Must be in (0, 1)")
