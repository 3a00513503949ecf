# -*- coding: utf-8 -*-
"""Loop path helpers shared by the closure, propagation and deviation code.

A loop path is a closed walk of station names (``path[0] == path[-1]``).
Each consecutive pair ``(from, to)`` is a *leg* and must be connected by a
center-line shot, which may have been surveyed in either direction.

The traversal direction convention lives in :func:`signed_vector_for`:
a shot contributes its vector when it was surveyed from the leg's
``from`` station and the negated vector otherwise.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from typing import TYPE_CHECKING

from loop_closure_lib.constants import DEFAULT_CONVERGENCE
from loop_closure_lib.constants import DEFAULT_DECLINATION
from loop_closure_lib.constants import MIN_LOOP_PATH_LENGTH
from loop_closure_lib.errors import InvalidLoopPathException
from loop_closure_lib.errors import MissingShotException
from loop_closure_lib.errors import UnknownStationException
from loop_closure_lib.geometry import polar_to_vector

if TYPE_CHECKING:
    from loop_closure_lib.geometry import Vector3D
    from loop_closure_lib.models import Shot
    from loop_closure_lib.models import Station
    from loop_closure_lib.models import StationShot
    from loop_closure_lib.models import Survey

logger = logging.getLogger(__name__)


def validate_loop_path(
    path: Sequence[str],
    stations: Mapping[str, Station],
) -> None:
    """Check that *path* is a closed walk over known stations.

    Raises:
        InvalidLoopPathException: *path* is not a list or tuple, has fewer
            than three entries, or its first and last entries differ.
        UnknownStationException: A station of *path* is missing from
            *stations* (the first missing name is reported).
    """
    if not isinstance(path, (list, tuple)):
        raise InvalidLoopPathException(
            f"Loop path must be a list of station names, got {type(path).__name__}"
        )

    if len(path) < MIN_LOOP_PATH_LENGTH:
        raise InvalidLoopPathException(
            f"Loop path needs at least {MIN_LOOP_PATH_LENGTH} stations, "
            f"got {len(path)}"
        )

    if path[0] != path[-1]:
        raise InvalidLoopPathException(
            f"Loop path must start and end at the same station "
            f"({path[0]!r} != {path[-1]!r})"
        )

    for name in path:
        if name not in stations:
            raise UnknownStationException(name)


def iter_legs(path: Sequence[str]) -> Iterator[tuple[str, str]]:
    """Yield the consecutive ``(from, to)`` station pairs of *path*."""
    for i in range(len(path) - 1):
        yield path[i], path[i + 1]


def find_shot_between_stations(
    station: Station,
    from_name: str,
    to_name: str,
) -> StationShot:
    """Return the first center-line shot of *station* joining the two names.

    The shot may have been surveyed in either direction.

    Raises:
        MissingShotException: No incident center-line shot connects
            *from_name* and *to_name*.
    """
    for entry in station.shots:
        if entry.shot.is_center and entry.shot.connects(from_name, to_name):
            return entry
    raise MissingShotException(from_name, to_name)


def resolve_leg_shots(
    path: Sequence[str],
    stations: Mapping[str, Station],
) -> list[tuple[str, str, StationShot]]:
    """Find the connecting shot of every leg of an already validated *path*.

    Raises:
        MissingShotException: At the first leg without a connecting shot.
    """
    return [
        (from_name, to_name, find_shot_between_stations(
            stations[from_name], from_name, to_name,
        ))
        for from_name, to_name in iter_legs(path)
    ]


def get_survey_corrections(survey: Survey | None) -> tuple[float, float]:
    """Return ``(declination, convergence)`` of *survey* in degrees.

    Missing metadata falls back to :data:`DEFAULT_DECLINATION` and
    :data:`DEFAULT_CONVERGENCE`.
    """
    metadata = survey.metadata if survey is not None else None
    declination = metadata.declination if metadata is not None else None
    convergence = metadata.convergence if metadata is not None else None

    if declination is None or convergence is None:
        # TODO: confirm with the data model owners whether surveys without
        # corrections are legitimate or an upstream data bug.
        logger.debug(
            "Survey %s has no %s, assuming defaults",
            survey.name if survey is not None else "<none>",
            "declination" if declination is None else "convergence",
        )

    return (
        DEFAULT_DECLINATION if declination is None else declination,
        DEFAULT_CONVERGENCE if convergence is None else convergence,
    )


def is_forward(shot: Shot, from_name: str) -> bool:
    """True if *shot* was surveyed from *from_name*."""
    return shot.from_station_name == from_name


def shot_vector(
    shot: Shot,
    declination: float = 0.0,
    convergence: float = 0.0,
) -> Vector3D:
    """Vector of *shot* in its surveyed direction.

    The azimuth is corrected by ``declination + convergence`` (degrees).
    """
    return polar_to_vector(
        shot.length,
        math.radians(shot.azimuth + declination + convergence),
        math.radians(shot.clino),
    )


def signed_vector_for(
    shot: Shot,
    from_name: str,
    declination: float = 0.0,
    convergence: float = 0.0,
) -> Vector3D:
    """Vector of *shot* walked from *from_name* to its other endpoint.

    This is the shot vector when the shot was surveyed from *from_name*,
    and the negated vector otherwise.
    """
    v = shot_vector(shot, declination, convergence)
    return v if is_forward(shot, from_name) else -v
