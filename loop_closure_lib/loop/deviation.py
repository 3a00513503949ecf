# -*- coding: utf-8 -*-
"""Detection and correction of shots deviating from their stations.

Once station positions have been adjusted (for example after a loop
correction and a traverse rebuild), a shot's own measurement may no longer
agree with the positions of its two endpoints.  For every shot of a loop
this module compares the shot vector, corrected for the survey's
declination and grid convergence, with the vector between its endpoint
stations, and proposes the raw measurement that would make them agree.

The station positions are taken as authoritative.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loop_closure_lib.constants import DEVIATION_THRESHOLD
from loop_closure_lib.geometry import Polar
from loop_closure_lib.geometry import normalize_azimuth
from loop_closure_lib.loop.path import get_survey_corrections
from loop_closure_lib.loop.path import is_forward
from loop_closure_lib.loop.path import resolve_leg_shots
from loop_closure_lib.loop.path import shot_vector
from loop_closure_lib.loop.path import signed_vector_for
from loop_closure_lib.loop.path import validate_loop_path

if TYPE_CHECKING:
    from loop_closure_lib.geometry import Vector3D
    from loop_closure_lib.models import Shot
    from loop_closure_lib.models import Station
    from loop_closure_lib.models import Survey

logger = logging.getLogger(__name__)


@dataclass
class DeviationRecord:
    """A shot that disagrees with its endpoint stations.

    Attributes:
        shot: The deviating shot (updated by :func:`adjust_shots`).
        diff: Position reached by the shot minus the position of the
            station it should reach, in the shot's surveyed direction.
        length: Proposed length.
        azimuth: Proposed raw azimuth in degrees (declination and
            convergence removed, normalised to ``[0, 360)``).
        clino: Proposed inclination in degrees.
        declination: Declination used for the comparison (degrees).
        convergence: Convergence used for the comparison (degrees).
        survey: Survey owning the shot.
    """

    shot: Shot
    diff: Vector3D
    length: float
    azimuth: float
    clino: float
    declination: float = 0.0
    convergence: float = 0.0
    survey: Survey | None = None

    @property
    def proposed(self) -> Polar:
        """The proposed raw measurement (radians)."""
        return Polar.from_degrees(self.length, self.azimuth, self.clino)


def find_loop_deviation_shots(
    path: Sequence[str],
    stations: Mapping[str, Station],
    *,
    threshold: float = DEVIATION_THRESHOLD,
) -> list[DeviationRecord]:
    """Find the shots of *path* whose measurement disagrees with the stations.

    Args:
        path: Closed walk of station names (``path[0] == path[-1]``).
        stations: Station name  ->  :class:`Station`.
        threshold: Shots are reported when ``diff.length`` is strictly
            greater than this value.

    Returns:
        One :class:`DeviationRecord` per deviating leg, in path order.

    Raises:
        InvalidLoopPathException: Malformed *path*.
        UnknownStationException: *path* names an unknown station.
        MissingShotException: A leg has no connecting center-line shot.
    """
    validate_loop_path(path, stations)

    result: list[DeviationRecord] = []

    for from_name, to_name, entry in resolve_leg_shots(path, stations):
        shot = entry.shot
        declination, convergence = get_survey_corrections(entry.survey)

        from_pos = stations[from_name].position
        to_pos = stations[to_name].position

        # Walking mismatch, flipped into the shot's surveyed direction.
        mismatch = (
            from_pos
            + signed_vector_for(shot, from_name, declination, convergence)
            - to_pos
        )
        diff = mismatch if is_forward(shot, from_name) else -mismatch

        if diff.length <= threshold:
            continue

        proposed = (shot_vector(shot, declination, convergence) - diff).to_polar()

        logger.debug(
            "Leg %s -> %s: %s deviates by %.4f",
            from_name, to_name, shot, diff.length,
        )

        result.append(
            DeviationRecord(
                shot=shot,
                diff=diff,
                length=proposed.distance,
                azimuth=normalize_azimuth(
                    proposed.azimuth_degrees - declination - convergence
                ),
                clino=proposed.inclination_degrees,
                declination=declination,
                convergence=convergence,
                survey=entry.survey,
            )
        )

    return result


def adjust_shots(records: Iterable[DeviationRecord]) -> bool:
    """Apply the proposed measurements of *records* to their shots.

    Returns:
        ``True`` if at least one shot was updated.
    """
    adjusted = 0
    for record in records:
        record.shot.length = record.length
        record.shot.azimuth = record.azimuth
        record.shot.clino = record.clino
        adjusted += 1

    if adjusted:
        logger.info("Adjusted %d deviating shot(s)", adjusted)
    return adjusted > 0
