# -*- coding: utf-8 -*-
from typing import Union

import numpy as np

from .config import COLOR_TOLERANCE


class MTLColor:
    """
    An RGB color.

    Each component should generally be in the range [0.0, 1.0] though this
    is not required. A new color is black.

    Attributes:
        r: Amount of red.
        g: Amount of green.
        b: Amount of blue.
    """

    __slots__ = ("r", "g", "b")

    def __init__(self, r: Union[float, "MTLColor"] = 0.0, g: float = 0.0, b: float = 0.0):
        self.r = 0.0
        self.g = 0.0
        self.b = 0.0
        self.set_to(r, g, b)

    def set_to(self, r: Union[float, "MTLColor"], g: float = 0.0, b: float = 0.0) -> None:
        """Replace all three components, either from values or from another color."""
        if isinstance(r, MTLColor):
            r, g, b = r.r, r.g, r.b
        self.r, self.g, self.b = float(r), float(g), float(b)

    def to_array(self) -> np.ndarray:
        """Returns color as a (3,) float numpy array."""
        return np.asarray([self.r, self.g, self.b], dtype=float)

    @classmethod
    def from_array(cls, values) -> "MTLColor":
        arr = np.asarray(values, dtype=float).reshape(3)
        return cls(arr[0], arr[1], arr[2])

    @property
    def color_tuple(self):
        return (self.r, self.g, self.b)

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, MTLColor):
            return NotImplemented
        return bool(np.all(np.abs(self.to_array() - other.to_array()) < COLOR_TOLERANCE))

    # mutable, and tolerance equality is not transitive
    __hash__ = None

    def __repr__(self):
        return f"MTLColor(r={self.r}, g={self.g}, b={self.b})"
