"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric constants and the
default plot settings.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (derivative step, default ranges)
   from being scattered throughout the generators.
2. Consistency: The config dataclasses and the generators read the same
   defaults, so a freshly created entry always evaluates to something sensible.

Exports:
    RESERVED_CONSTANTS (dict): Names always bound during evaluation.
    CURVE_VARIABLE (str): Free variable of a parametric curve, "t".
    FUNCTION_VARIABLE (str): Free variable of a complex function, "z".
    DERIVATIVE_STEP_FACTOR (float): Ratio between the differentiation step and the sample spacing.
    CONTOUR_COLORS (list): Palette cycled by new contour entries.
"""
import cmath
import math

# Names bound in every evaluation scope, regardless of the free variable
RESERVED_CONSTANTS: dict[str, complex] = {
    "i": 1j,
    "pi": complex(math.pi, 0.0),
    "e": complex(math.e, 0.0),
}

CURVE_VARIABLE: str = "t"
FUNCTION_VARIABLE: str = "z"

# Value written wherever an evaluation has no finite result
INVALID: complex = complex(cmath.nan, cmath.nan)

# Numerical differentiation step h = dt * DERIVATIVE_STEP_FACTOR
DERIVATIVE_STEP_FACTOR: float = 0.01

# Integrand used when a contour has no transform function
DEFAULT_INTEGRAND: str = "1"

CONTOUR_COLORS: list[str] = [
    "#00d4ff",  # cyan
    "#ff6b9d",  # pink
    "#50fa7b",  # green
    "#ffb86c",  # orange
    "#bd93f9",  # purple
    "#f1fa8c",  # yellow
    "#ff5555",  # red
    "#8be9fd",  # light cyan
]

# --- Contour defaults ---
DEFAULT_CONTOUR_EXPRESSION: str = "exp(i * t)"
DEFAULT_T_MIN: float = 0.0
DEFAULT_T_MAX: float = 2.0 * math.pi
DEFAULT_T_STEPS: int = 200
DEFAULT_ANIMATION_SPEED: float = 5.0

# --- Grid defaults ---
DEFAULT_GRID_EXPRESSION: str = "z^2"
DEFAULT_REGION: tuple[float, float, float, float] = (-2.0, 2.0, -2.0, 2.0)
DEFAULT_DOMAIN_RESOLUTION: int = 256
DEFAULT_SURFACE_RESOLUTION: int = 64
