# -*- coding: utf-8 -*-
"""Constants used throughout the loop_closure_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers scattered across the codebase.  Every
tolerance below is also exposed as a keyword argument on the functions
and correctors that use it.
"""

# -----------------------------------------------------------------------------
# Angles
# -----------------------------------------------------------------------------

#: Degrees in a full circle (azimuth normalisation range is [0, 360))
FULL_CIRCLE_DEGREES: float = 360.0

#: Vectors shorter than this have no meaningful direction
DIRECTION_EPSILON: float = 1e-12

# -----------------------------------------------------------------------------
# Loop Closure
# -----------------------------------------------------------------------------

#: Closure distances below this value (length units) mean the loop is closed.
#: The azimuth and inclination of such an error are forced to zero and no
#: correction is propagated.
CLOSURE_EPSILON: float = 1e-4

#: A closed path needs at least this many entries (``[A, B, A]``)
MIN_LOOP_PATH_LENGTH: int = 3

# -----------------------------------------------------------------------------
# Deviating Shots
# -----------------------------------------------------------------------------

#: Shots whose endpoint mismatch is strictly greater than this value (length
#: units) are reported as deviating.
DEVIATION_THRESHOLD: float = 0.01

# -----------------------------------------------------------------------------
# Survey Corrections
# -----------------------------------------------------------------------------

#: Declination (degrees) assumed for surveys without metadata
DEFAULT_DECLINATION: float = 0.0

#: Grid convergence (degrees) assumed for surveys without metadata
DEFAULT_CONVERGENCE: float = 0.0

# -----------------------------------------------------------------------------
# Geodesy
# -----------------------------------------------------------------------------

#: EPSG code of the geographic CRS used for convergence computations (WGS 84)
WGS_1984_EPSG: int = 4326
