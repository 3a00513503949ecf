# -*- coding: utf-8 -*-
"""Loop closure error.

Walking a closed loop from its start station and chaining every shot
vector should bring us back to the start position.  Measurement errors
accumulate, so in practice the walk ends somewhere else: the vector from
that end point back to the start is the *closure error* of the loop.

The walk uses each shot's raw azimuth, without declination or
convergence: the error is expressed in the frame the shots were recorded
in, which is the frame :mod:`propagation` writes corrections back into.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel

from loop_closure_lib.constants import CLOSURE_EPSILON
from loop_closure_lib.enums import Severity
from loop_closure_lib.geometry import Polar
from loop_closure_lib.geometry import vector_to_polar
from loop_closure_lib.loop.path import resolve_leg_shots
from loop_closure_lib.loop.path import signed_vector_for
from loop_closure_lib.loop.path import validate_loop_path

if TYPE_CHECKING:
    from loop_closure_lib.models import Cycle
    from loop_closure_lib.models import Station

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClosureError:
    """Closure error of a loop.

    Attributes:
        total_length: Sum of the measured lengths of the loop's shots.
        error: Vector from the end of the walk back to the start station,
            in polar form (radians).
    """

    total_length: float
    error: Polar

    @property
    def distance(self) -> float:
        return self.error.distance

    @property
    def azimuth_degrees(self) -> float:
        return self.error.azimuth_degrees

    @property
    def inclination_degrees(self) -> float:
        return self.error.inclination_degrees

    @property
    def error_percentage(self) -> float:
        """Closure distance relative to the loop length, in percent."""
        if self.total_length <= 0:
            return 0.0
        return self.error.distance / self.total_length * 100.0

    def is_closed(self, epsilon: float = CLOSURE_EPSILON) -> bool:
        return self.error.distance < epsilon


def calculate_closure_error(
    path: Sequence[str],
    stations: Mapping[str, Station],
    *,
    epsilon: float = CLOSURE_EPSILON,
) -> ClosureError:
    """Compute the closure error of the closed walk *path*.

    Never modifies stations or shots.

    Args:
        path: Closed walk of station names (``path[0] == path[-1]``).
        stations: Station name  ->  :class:`Station`.
        epsilon: Closure distances below this value get both angles set
            to exactly zero.

    Returns:
        The loop's :class:`ClosureError`.

    Raises:
        InvalidLoopPathException: Malformed *path*.
        UnknownStationException: *path* names an unknown station.
        MissingShotException: A leg has no connecting center-line shot.
    """
    validate_loop_path(path, stations)

    start_position = stations[path[0]].position
    calculated_position = start_position
    total_length = 0.0

    for from_name, _to_name, entry in resolve_leg_shots(path, stations):
        calculated_position = calculated_position + signed_vector_for(
            entry.shot, from_name,
        )
        total_length += entry.shot.length

    error = vector_to_polar(start_position - calculated_position)
    if error.distance < epsilon:
        error = Polar(error.distance, 0.0, 0.0)

    logger.debug(
        "Loop %s (%d legs): closure=%.4f over %.3f",
        " -> ".join(path), len(path) - 1, error.distance, total_length,
    )
    return ClosureError(total_length=total_length, error=error)


# ---------------------------------------------------------------------------
# Loop summaries
# ---------------------------------------------------------------------------


class LoopSummary(BaseModel):
    """Closure statistics of one cycle.

    Angles are in degrees.  ``severity`` is set when the loop exceeds the
    tolerance it was summarised with.
    """

    cycle_id: str
    path: list[str]
    distance: float
    total_length: float
    error_distance: float
    error_azimuth: float
    error_clino: float
    error_percentage: float
    severity: Severity | None = None


def summarize_loop(
    cycle: Cycle,
    stations: Mapping[str, Station],
    *,
    max_error_percentage: float | None = None,
    epsilon: float = CLOSURE_EPSILON,
) -> LoopSummary:
    """Compute the closure statistics of *cycle*.

    Args:
        cycle: The cycle to measure.
        stations: Station name  ->  :class:`Station`.
        max_error_percentage: Loops whose relative error exceeds this
            value are flagged with :attr:`Severity.WARNING`.
        epsilon: See :func:`calculate_closure_error`.
    """
    closure = calculate_closure_error(cycle.closed_path, stations, epsilon=epsilon)

    severity = None
    if (
        max_error_percentage is not None
        and closure.error_percentage > max_error_percentage
    ):
        severity = Severity.WARNING
        logger.warning(
            "Loop %s: closure %.3f (%.2f %%) exceeds %.2f %%",
            cycle.id, closure.distance, closure.error_percentage,
            max_error_percentage,
        )

    return LoopSummary(
        cycle_id=cycle.id,
        path=list(cycle.path),
        distance=cycle.distance,
        total_length=closure.total_length,
        error_distance=closure.distance,
        error_azimuth=closure.azimuth_degrees,
        error_clino=closure.inclination_degrees,
        error_percentage=closure.error_percentage,
        severity=severity,
    )


def summarize_loops(
    cycles: Iterable[Cycle],
    stations: Mapping[str, Station],
    *,
    max_error_percentage: float | None = None,
    epsilon: float = CLOSURE_EPSILON,
) -> list[LoopSummary]:
    """Summarise every cycle, in order."""
    return [
        summarize_loop(
            cycle,
            stations,
            max_error_percentage=max_error_percentage,
            epsilon=epsilon,
        )
        for cycle in cycles
    ]


def total_error_distance(summaries: Iterable[LoopSummary]) -> float:
    """Sum of the closure distances of *summaries*."""
    return sum(summary.error_distance for summary in summaries)
