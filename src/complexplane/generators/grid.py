"""
Domain & Surface Grid Generators
================================
Sample f(z) over a rectangle of the complex plane.

Grid layout: row j corresponds to y = y_min + j*dy, column i to
x = x_min + i*dx, so ``grid[j, i]`` is the projection of f(x + iy). Grids are
always ``resolution x resolution``; cells without a finite value hold NaN.
"""
from __future__ import annotations

import logging
from typing import Sequence, TYPE_CHECKING

import numpy as np

from complexplane.config import FUNCTION_VARIABLE
from complexplane.generators.sampling import compile_or_none, evaluate_or_invalid, grid_axes, grid_points
from complexplane.model.configs import DomainColoringConfig, Region, Surface3DConfig
from complexplane.model.results import DomainColoringData, Surface3DData
from complexplane.utils import ColorMapping, mark_invalid, project

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def sample_grid(
    expr: str,
    region: Region,
    resolution: int,
    projections: Sequence[ColorMapping | str]
) -> tuple[npt.NDArray[np.float64], ...]:
    """
    Evaluate f once per cell and extract each requested projection.

    Args:
        expr: f(z), an expression in `z`.
        region: Sampled rectangle (x_min, x_max, y_min, y_max).
        resolution: Number of samples per side.
        projections: Scalar projections to compute from the same values.

    Raises:
        ValueError: If a projection name is unknown.

    Returns:
        One (resolution, resolution) float grid per projection, in the order
        requested. Empty (0, 0) grids if the expression is blank or malformed.
    """
    projections = [ColorMapping(p) for p in projections]
    compiled = compile_or_none(expr, FUNCTION_VARIABLE)
    if compiled is None:
        return tuple(np.empty((0, 0), dtype=np.float64) for _ in projections)

    x_axis, y_axis = grid_axes(region, resolution)
    values = evaluate_or_invalid(compiled, grid_points(x_axis, y_axis))

    with np.errstate(all="ignore"):
        grids = tuple(mark_invalid(project(values, p)) for p in projections)

    if grids:
        logger.debug(
            f"Grid '{expr}' at {resolution}x{resolution}: "
            f"{int(np.isnan(grids[0]).sum())} invalid cells"
        )
    return grids


def generate_domain_coloring_data(config: DomainColoringConfig) -> DomainColoringData:
    """Heatmap data: the scalar grid and the color grid."""
    scalar_grid, color_grid = sample_grid(
        config.expression,
        config.region,
        config.resolution,
        (config.scalar_projection, config.color_by),
    )
    return DomainColoringData(scalar_grid=scalar_grid, color_grid=color_grid)


def generate_surface_3d_data(config: Surface3DConfig) -> Surface3DData:
    """Surface data: axis vectors plus height and color grids."""
    height_grid, color_grid = sample_grid(
        config.expression,
        config.region,
        config.resolution,
        (config.height_by, config.color_by),
    )
    if height_grid.size == 0:
        return Surface3DData()

    x_axis, y_axis = grid_axes(config.region, config.resolution)
    return Surface3DData(x_axis=x_axis, y_axis=y_axis, height_grid=height_grid, color_grid=color_grid)
