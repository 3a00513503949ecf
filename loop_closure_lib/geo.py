# -*- coding: utf-8 -*-
"""Meridian (grid) convergence.

Station positions live on a projected grid whose north differs from true
north by the meridian convergence.  A survey's ``convergence`` metadata is
this angle at the cave's location; it is added to the shot azimuths
together with the declination (see
:func:`~loop_closure_lib.loop.path.get_survey_corrections`).
"""

from __future__ import annotations

from pyproj import CRS
from pyproj import Proj
from pyproj import Transformer

from loop_closure_lib.constants import WGS_1984_EPSG


def meridian_convergence(x: float, y: float, crs: CRS | str | int) -> float:
    """Meridian convergence (degrees) at a point of a projected CRS.

    Args:
        x: Easting (or first axis) coordinate of the point.
        y: Northing (or second axis) coordinate of the point.
        crs: Projected CRS of the coordinates, as a :class:`pyproj.CRS`,
            an EPSG code or any string accepted by ``CRS.from_user_input``
            (e.g. ``"EPSG:23700"`` for the Hungarian EOV grid).

    Returns:
        Angle from true north to grid north as reported by PROJ.

    Raises:
        ValueError: If *crs* is not a projected CRS.
    """
    projected = CRS.from_user_input(crs)
    if not projected.is_projected:
        raise ValueError(f"Meridian convergence needs a projected CRS, got {crs!r}")

    transformer = Transformer.from_crs(
        projected,
        CRS.from_epsg(WGS_1984_EPSG),
        always_xy=True,
    )
    lon, lat = transformer.transform(x, y)
    factors = Proj(projected).get_factors(lon, lat)
    return factors.meridian_convergence


def utm_meridian_convergence(easting: float, northing: float, zone: int) -> float:
    """Meridian convergence (degrees) at a WGS 84 UTM coordinate.

    The hemisphere is determined by the sign of the zone:

    - Positive zone (1-60): Northern hemisphere
    - Negative zone (-1 to -60): Southern hemisphere

    Raises:
        ValueError: If zone is 0 or abs(zone) > 60
    """
    if zone == 0 or abs(zone) > 60:
        raise ValueError(
            f"UTM zone must be between -60 and 60 (excluding 0), got {zone}"
        )

    # Note: pyproj requires positive zone number and hemisphere specified separately
    hemisphere = "+north" if zone > 0 else "+south"
    utm_crs = CRS.from_proj4(
        f"+proj=utm +zone={abs(zone)} {hemisphere} +datum=WGS84 +units=m +no_defs"
    )
    return meridian_convergence(easting, northing, utm_crs)
