"""
Plot Configurations
===================
Input data structures for the three plot modes and the contour integral.

These classes hold only PARAMETERS; the generators turn them into numbers.
Display-only fields (color, enabled flag, animation speed) are carried so the
results can echo them back to the presentation layer.

Classes:
    Region: Rectangle of the complex plane.
    ContourEntry: One parametric curve gamma(t) with an optional transform f(z).
    ContourConfig: The list of curves shown in contour mode.
    DomainColoringConfig: Heatmap sampling of f(z).
    Surface3DConfig: Height/color sampling of f(z).
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict, fields
import logging
from typing import Any, Dict, List, NamedTuple, Optional
import uuid

from complexplane.config import (
    CONTOUR_COLORS,
    DEFAULT_ANIMATION_SPEED,
    DEFAULT_CONTOUR_EXPRESSION,
    DEFAULT_DOMAIN_RESOLUTION,
    DEFAULT_GRID_EXPRESSION,
    DEFAULT_REGION,
    DEFAULT_SURFACE_RESOLUTION,
    DEFAULT_T_MAX,
    DEFAULT_T_MIN,
    DEFAULT_T_STEPS,
)
from complexplane.utils import ColorMapping

logger = logging.getLogger(__name__)


def new_contour_id() -> str:
    return f"contour-{uuid.uuid4().hex[:12]}"


def _known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys the dataclass does not define (e.g. from newer saved files)."""
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names
    if unknown:
        logger.debug(f"Ignoring unknown {cls.__name__} keys: {sorted(unknown)}")
    return {k: v for k, v in data.items() if k in names}


class Region(NamedTuple):
    x_min: float
    x_max: float
    y_min: float
    y_max: float


@dataclass
class ContourEntry:
    """
    A single contour gamma(t) over its own parameter range [t_min, t_max].
    If `transform_function` is set the plotted curve is f(gamma(t)), and the
    contour integral uses it as the integrand.
    """
    id: str = field(default_factory=new_contour_id)
    expression: str = DEFAULT_CONTOUR_EXPRESSION
    transform_function: str = ""
    color: str = CONTOUR_COLORS[0]
    enabled: bool = True
    t_min: float = DEFAULT_T_MIN
    t_max: float = DEFAULT_T_MAX
    t_steps: int = DEFAULT_T_STEPS
    animation_speed: float = DEFAULT_ANIMATION_SPEED

    def __post_init__(self) -> None:
        if self.t_steps < 0:
            raise ValueError(f"'t_steps' must be non-negative, got {self.t_steps}.")
        self.t_steps = int(self.t_steps)

    @classmethod
    def create(
        cls,
        expression: str = "",
        color_index: int = 0,
        t_min: float = DEFAULT_T_MIN,
        t_max: float = DEFAULT_T_MAX,
        t_steps: int = DEFAULT_T_STEPS,
        transform_function: str = "",
        animation_speed: float = DEFAULT_ANIMATION_SPEED,
    ) -> ContourEntry:
        """Factory with a fresh id and a color picked from the palette."""
        return cls(
            id=new_contour_id(),
            expression=expression,
            transform_function=transform_function,
            color=CONTOUR_COLORS[color_index % len(CONTOUR_COLORS)],
            enabled=True,
            t_min=t_min,
            t_max=t_max,
            t_steps=t_steps,
            animation_speed=animation_speed,
        )

    @property
    def has_transform(self) -> bool:
        return bool(self.transform_function and self.transform_function.strip())

    @property
    def is_active(self) -> bool:
        """Enabled and with a non-blank curve expression."""
        return self.enabled and bool(self.expression and self.expression.strip())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ContourEntry:
        return cls(**_known_fields(cls, data))


@dataclass
class ContourConfig:
    contours: List[ContourEntry] = field(
        default_factory=lambda: [ContourEntry.create(DEFAULT_CONTOUR_EXPRESSION, 0)]
    )

    def to_dict(self) -> Dict[str, Any]:
        return {"contours": [c.to_dict() for c in self.contours]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ContourConfig:
        return cls(contours=[ContourEntry.from_dict(c) for c in data.get("contours", [])])


@dataclass(kw_only=True)
class GridConfig:
    """
    Common part of the grid-sampled plot modes: an expression f(z), a
    rectangle of the complex plane and the number of samples per side.
    """
    expression: str = DEFAULT_GRID_EXPRESSION
    x_min: float = DEFAULT_REGION[0]
    x_max: float = DEFAULT_REGION[1]
    y_min: float = DEFAULT_REGION[2]
    y_max: float = DEFAULT_REGION[3]
    resolution: int = DEFAULT_DOMAIN_RESOLUTION

    def __post_init__(self) -> None:
        if self.resolution < 0:
            raise ValueError(f"'resolution' must be non-negative, got {self.resolution}.")
        self.resolution = int(self.resolution)

    @property
    def region(self) -> Region:
        return Region(self.x_min, self.x_max, self.y_min, self.y_max)

    def to_dict(self) -> Dict[str, Any]:
        # StrEnum members serialize as their plain string values
        return {k: (str(v) if isinstance(v, ColorMapping) else v) for k, v in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        return cls(**_known_fields(cls, data))


@dataclass(kw_only=True)
class DomainColoringConfig(GridConfig):
    """
    Heatmap sampling. `color_by` drives the color grid; `scalar_by` drives the
    scalar grid and defaults to the same projection.
    """
    resolution: int = DEFAULT_DOMAIN_RESOLUTION
    color_by: ColorMapping = ColorMapping.ARGUMENT
    scalar_by: Optional[ColorMapping] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.color_by = ColorMapping(self.color_by)
        if self.scalar_by is not None:
            self.scalar_by = ColorMapping(self.scalar_by)

    @property
    def scalar_projection(self) -> ColorMapping:
        return self.scalar_by if self.scalar_by is not None else self.color_by


@dataclass(kw_only=True)
class Surface3DConfig(GridConfig):
    resolution: int = DEFAULT_SURFACE_RESOLUTION
    height_by: ColorMapping = ColorMapping.MODULUS
    color_by: ColorMapping = ColorMapping.ARGUMENT

    def __post_init__(self) -> None:
        super().__post_init__()
        self.height_by = ColorMapping(self.height_by)
        self.color_by = ColorMapping(self.color_by)
