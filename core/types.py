# core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

if TYPE_CHECKING:
    from builders.build_modules.catmull_rom import CatmullRomCurve

Point3 = Tuple[float, float, float]
Color = Tuple[float, float, float]     # sRGB floats in [0, 1]


class Axis(Enum):
    X = 0
    Y = 1
    Z = 2

    @classmethod
    def parse(cls, value) -> "Axis":
        """Accept an Axis, an index (0..2) or a name ('x', 'Y', ...)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown axis {value!r}; expected one of x, y, z.")
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"Unknown axis {value!r}; expected one of x, y, z.")


@dataclass(frozen=True)
class ExtentRange:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min


@dataclass(eq=False)
class Marker:
    # curve is required: a marker without a curve cannot be constructed
    curve: "CatmullRomCurve"
    initial_phase: float
    color: Color
    position: np.ndarray
    phase: Optional[float] = None

    def __post_init__(self):
        if not 0.0 <= self.initial_phase < 1.0:
            raise ValueError(f"initial_phase must lie in [0, 1), got {self.initial_phase}")
        self.position = np.asarray(self.position, dtype=float).reshape(3)
        if self.phase is None:
            self.phase = self.initial_phase


@dataclass(eq=False)
class CurveLine:
    curve: "CatmullRomCurve"
    points: np.ndarray                 # (N, 3) dense parameter-uniform sampling
    vertex_height: np.ndarray          # (N,) shading attribute
    color: Color                       # tint from the curve-start gradient
    uniforms: dict                     # {"min": ..., "max": ...} for height shading
    attribute_name: str = "vertexHeight"
