"""
Generator Results
=================
Output data structures returned by the math engine.

All arrays are freshly allocated per call; nothing here is cached or shared.
Complex sequences are ``complex128`` arrays, grids are ``float64`` arrays with
NaN marking cells without a valid value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, TYPE_CHECKING

import numpy as np

from complexplane.utils import grid_to_list, points_to_list, to_complex_point

if TYPE_CHECKING:
    import numpy.typing as npt


def _empty_complex() -> npt.NDArray[np.complex128]:
    return np.empty(0, dtype=np.complex128)


def _empty_grid() -> npt.NDArray[np.float64]:
    return np.empty((0, 0), dtype=np.float64)


@dataclass
class ContourData:
    """Sampled points of one contour, ready for rendering."""
    id: str
    points: npt.NDArray[np.complex128]
    color: str
    expression: str
    t_min: float
    t_max: float
    animation_speed: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "points": points_to_list(self.points),
            "color": self.color,
            "expression": self.expression,
            "t_min": self.t_min,
            "t_max": self.t_max,
            "animation_speed": self.animation_speed,
        }


@dataclass
class ContourIntegralResult:
    """
    Riemann-sum estimate of the contour integral of f along gamma.

    The four sequences are aligned: entry k holds the parameter value, the
    curve point gamma(t), the integrand vector f(gamma(t)) * gamma'(t) and the
    partial sum after adding that sample.
    """
    id: str
    color: str
    t_values: npt.NDArray[np.float64]
    contour_points: npt.NDArray[np.complex128]
    integrand_vectors: npt.NDArray[np.complex128]
    running_sum: npt.NDArray[np.complex128]
    final_value: complex
    expression: str
    transform_function: str

    @property
    def n_samples(self) -> int:
        return int(self.t_values.size)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "color": self.color,
            "t_values": self.t_values.tolist(),
            "contour_points": points_to_list(self.contour_points),
            "integrand_vectors": points_to_list(self.integrand_vectors),
            "running_sum": points_to_list(self.running_sum),
            "final_value": to_complex_point(self.final_value),
            "expression": self.expression,
            "transform_function": self.transform_function,
        }


@dataclass
class DomainColoringData:
    scalar_grid: npt.NDArray[np.float64] = field(default_factory=_empty_grid)
    color_grid: npt.NDArray[np.float64] = field(default_factory=_empty_grid)

    @property
    def is_empty(self) -> bool:
        return self.scalar_grid.size == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scalar_grid": grid_to_list(self.scalar_grid),
            "color_grid": grid_to_list(self.color_grid),
        }


@dataclass
class Surface3DData:
    x_axis: npt.NDArray[np.float64] = field(default_factory=lambda: np.empty(0, dtype=np.float64))
    y_axis: npt.NDArray[np.float64] = field(default_factory=lambda: np.empty(0, dtype=np.float64))
    height_grid: npt.NDArray[np.float64] = field(default_factory=_empty_grid)
    color_grid: npt.NDArray[np.float64] = field(default_factory=_empty_grid)

    @property
    def is_empty(self) -> bool:
        return self.height_grid.size == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x_axis": self.x_axis.tolist(),
            "y_axis": self.y_axis.tolist(),
            "height_grid": grid_to_list(self.height_grid),
            "color_grid": grid_to_list(self.color_grid),
        }
