# -*- coding: utf-8 -*-
"""Precision models describing the grid that coordinates of constructed geometries are rounded to.

Input coordinates are assumed to already respect the model of their factory. Constructive operations
(overlay, buffer, centroid) round every computed coordinate with ``make_precise``.
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np


class PrecisionType(Enum):
    """Supported precision model kinds."""

    FLOATING = "floating"
    FLOATING_SINGLE = "floating_single"
    FIXED = "fixed"


@dataclass(frozen=True)
class PrecisionModel:
    """Rounding policy shared by all geometries created from one factory.

    Parameters:
    -----------
    model_type : PrecisionType
        FLOATING keeps full double precision, FLOATING_SINGLE rounds to single precision,
        FIXED rounds to a grid of ``1 / scale``
    scale : float
        Number of grid cells per unit, required (and only meaningful) for FIXED models
    """

    model_type: PrecisionType = PrecisionType.FLOATING
    scale: float = 0.0

    def __post_init__(self):
        if not isinstance(self.model_type, PrecisionType):
            raise ValueError(f"Invalid precision model type: {self.model_type!r}")
        if self.model_type is PrecisionType.FIXED:
            if not self.scale or self.scale <= 0 or not math.isfinite(self.scale):
                raise ValueError(f"Fixed precision model requires a positive finite scale, got {self.scale}")
        elif self.scale:
            raise ValueError(f"Scale is only meaningful for fixed precision models, got {self.scale}")

    @classmethod
    def fixed(cls, scale):
        return cls(PrecisionType.FIXED, float(scale))

    @classmethod
    def floating_single(cls):
        return cls(PrecisionType.FLOATING_SINGLE)

    @property
    def is_floating(self):
        return self.model_type is not PrecisionType.FIXED

    @property
    def grid_size(self):
        """Spacing of the precision grid, or None for floating models."""
        if self.model_type is PrecisionType.FIXED:
            return 1.0 / self.scale
        return None

    @property
    def maximum_significant_digits(self):
        if self.model_type is PrecisionType.FLOATING:
            return 16
        if self.model_type is PrecisionType.FLOATING_SINGLE:
            return 6
        return int(math.ceil(math.log10(self.scale)))

    def make_precise(self, value):
        """Round a scalar or a coordinate array onto this model's grid.

        Parameters:
        -----------
        value : float or numpy.ndarray
            Ordinate value(s) to round

        Returns:
        --------
        rounded : float or numpy.ndarray
            Rounded value(s), of the same kind as the input
        """
        if self.model_type is PrecisionType.FLOATING:
            return value
        if self.model_type is PrecisionType.FLOATING_SINGLE:
            rounded = np.asarray(value, dtype=np.float32).astype(np.float64)
        else:
            # half-up rounding onto the grid
            rounded = np.floor(np.asarray(value, dtype=np.float64) * self.scale + 0.5) / self.scale
        if np.ndim(rounded) == 0:
            return float(rounded)
        return rounded

    def __str__(self):
        if self.model_type is PrecisionType.FIXED:
            return f"Fixed (Scale={self.scale})"
        if self.model_type is PrecisionType.FLOATING_SINGLE:
            return "Floating-Single"
        return "Floating"
