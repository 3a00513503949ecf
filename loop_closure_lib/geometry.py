# -*- coding: utf-8 -*-
"""Geometry primitives for survey measurements.

A survey shot is measured in polar form: a distance, a compass azimuth
(clockwise from north) and an inclination (from the horizontal plane,
positive upward).  Loop computations happen in Cartesian space
(easting, northing, elevation).  This module converts between the two.

Angles are radians everywhere in this module.  Degrees only appear at the
boundary, on :class:`~loop_closure_lib.models.Shot` fields.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from loop_closure_lib.constants import DIRECTION_EPSILON
from loop_closure_lib.constants import FULL_CIRCLE_DEGREES

# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


class Vector3D(NamedTuple):
    """An immutable 3-D vector (easting, northing, elevation)."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3D) -> Vector3D:  # type: ignore[override]
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:  # type: ignore[override]
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3D:  # type: ignore[override]
        return self.__mul__(scalar)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def to_polar(self) -> Polar:
        return vector_to_polar(self)


ZERO = Vector3D(0.0, 0.0, 0.0)


class Polar(NamedTuple):
    """A polar measurement: distance, azimuth and inclination (radians).

    ``distance`` is never negative.  The angles are not forced into any
    range; use :func:`normalize_azimuth` before storing them.
    """

    distance: float
    azimuth: float
    inclination: float

    def __mul__(self, scalar: float) -> Polar:  # type: ignore[override]
        """Scale the distance, keeping the direction."""
        return Polar(self.distance * scalar, self.azimuth, self.inclination)

    def __rmul__(self, scalar: float) -> Polar:  # type: ignore[override]
        return self.__mul__(scalar)

    @classmethod
    def from_degrees(
        cls, distance: float, azimuth: float, inclination: float,
    ) -> Polar:
        return cls(distance, math.radians(azimuth), math.radians(inclination))

    @property
    def azimuth_degrees(self) -> float:
        return math.degrees(self.azimuth)

    @property
    def inclination_degrees(self) -> float:
        return math.degrees(self.inclination)

    def to_vector(self) -> Vector3D:
        return polar_to_vector(self.distance, self.azimuth, self.inclination)


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


def polar_to_vector(
    distance: float, azimuth: float, inclination: float,
) -> Vector3D:
    """(distance, azimuth_rad, inclination_rad) -> cartesian delta.

    *azimuth* is measured clockwise from north (the +y axis) and
    *inclination* upward from the horizontal plane.
    """
    horiz = distance * math.cos(inclination)
    return Vector3D(
        horiz * math.sin(azimuth),
        horiz * math.cos(azimuth),
        distance * math.sin(inclination),
    )


def vector_to_polar(v: Vector3D) -> Polar:
    """Cartesian (easting, northing, elevation) -> :class:`Polar`.

    The azimuth is in ``(-pi, pi]`` and the inclination in
    ``[-pi/2, pi/2]``.  A zero or near-zero vector has no direction:
    both angles are returned as ``0.0`` rather than the noise of a
    degenerate ``atan2``.
    """
    distance = v.length
    horiz = math.hypot(v.x, v.y)
    azimuth = math.atan2(v.x, v.y) if horiz > DIRECTION_EPSILON else 0.0
    if distance < DIRECTION_EPSILON:
        return Polar(distance, 0.0, 0.0)
    return Polar(distance, azimuth, math.atan2(v.z, horiz))


def normalize_azimuth(degrees: float) -> float:
    """Normalise an azimuth in degrees to ``[0, 360)``."""
    result = degrees % FULL_CIRCLE_DEGREES
    # -1e-15 % 360 rounds up to exactly 360.0
    if result >= FULL_CIRCLE_DEGREES:
        result -= FULL_CIRCLE_DEGREES
    return result
