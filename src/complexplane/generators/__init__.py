"""Numeric generators driving the compiled expressions over their sample domains."""
from complexplane.generators.contour import generate_contour_points, sample_contour
from complexplane.generators.grid import (
    generate_domain_coloring_data,
    generate_surface_3d_data,
    sample_grid,
)
from complexplane.generators.integral import compute_contour_integral, integrate

__all__ = [
    'sample_contour',
    'generate_contour_points',
    'sample_grid',
    'generate_domain_coloring_data',
    'generate_surface_3d_data',
    'integrate',
    'compute_contour_integral',
]
