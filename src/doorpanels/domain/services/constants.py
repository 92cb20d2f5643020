"""Constants for door panel layout calculation.

This module contains the proportion constant, solver fallbacks, fit
tolerance and ergonomic peephole figures used throughout the engine.
All lengths share the door's linear unit (centimetres in the defaults).
"""

from __future__ import annotations

import math
import sys

# ==============================================================================
# Proportions
# ==============================================================================

# Golden ratio, used as a weight progression and as the default target ratio
PHI: float = (1 + math.sqrt(5)) / 2

# Above this panel count the growing progressions are rescaled so the
# largest weight is 1; below it the raw sequences are kept
MAX_UNSCALED_PANELS: int = 1000

# Weights of rescaled progressions never drop below this floor
MIN_WEIGHT: float = sys.float_info.min


# ==============================================================================
# Spacing Solver
# ==============================================================================

# Fallback edge distance as a fraction of door height
FALLBACK_EDGE_FRACTION: float = 0.05

# Sane range for a solved edge distance: [MIN_SOLVED_EDGE, height / 3]
MIN_SOLVED_EDGE: float = 1.0
MAX_SOLVED_EDGE_DIVISOR: float = 3.0


# ==============================================================================
# Fit Validation
# ==============================================================================

# Floating-point slack when comparing used height against available height
FIT_TOLERANCE: float = 0.01


# ==============================================================================
# Peephole Placement
# ==============================================================================

# Ergonomic viewing band, measured from the floor (cm)
PEEPHOLE_BAND_MIN_HEIGHT: float = 145.0
PEEPHOLE_BAND_MAX_HEIGHT: float = 180.0

# Midpoint of the band; the ideal center is door height minus this value
PEEPHOLE_IDEAL_HEIGHT: float = (PEEPHOLE_BAND_MIN_HEIGHT + PEEPHOLE_BAND_MAX_HEIGHT) / 2

# Default minimum clearance between peephole rim and a panel edge (cm)
DEFAULT_MIN_EDGE_DISTANCE: float = 10.0
