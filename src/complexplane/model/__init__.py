"""
The MODEL layer contains pure data structures: plot configurations going in
and generator results coming out. It has no knowledge of how values are
computed or rendered.
"""
from complexplane.model.configs import (
    ContourConfig,
    ContourEntry,
    DomainColoringConfig,
    GridConfig,
    Region,
    Surface3DConfig,
)
from complexplane.model.results import (
    ContourData,
    ContourIntegralResult,
    DomainColoringData,
    Surface3DData,
)

__all__ = [
    'Region',
    'ContourEntry',
    'ContourConfig',
    'GridConfig',
    'DomainColoringConfig',
    'Surface3DConfig',
    'ContourData',
    'ContourIntegralResult',
    'DomainColoringData',
    'Surface3DData',
]
