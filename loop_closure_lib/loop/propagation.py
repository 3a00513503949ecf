# -*- coding: utf-8 -*-
"""Bowditch (compass rule) distribution of a loop closure error.

Each shot of the loop absorbs a share of the closure error proportional to
its length: a shot of length ``L`` in a loop of total length ``T`` is moved
by ``closure * L / T``.  The per-shot corrections, walked with the same
direction convention as the closure computation, add up to exactly the
closure error, so the corrected loop closes.

Shots are rewritten in place (``length``, ``azimuth``, ``clino``).  Station
positions are not touched: re-running the forward traverse from the
corrected shots is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from collections.abc import Sequence
from typing import TYPE_CHECKING

from loop_closure_lib.constants import CLOSURE_EPSILON
from loop_closure_lib.geometry import normalize_azimuth
from loop_closure_lib.geometry import vector_to_polar
from loop_closure_lib.loop.closure import ClosureError
from loop_closure_lib.loop.path import is_forward
from loop_closure_lib.loop.path import resolve_leg_shots
from loop_closure_lib.loop.path import signed_vector_for
from loop_closure_lib.loop.path import validate_loop_path

if TYPE_CHECKING:
    from loop_closure_lib.geometry import Polar
    from loop_closure_lib.models import Station

logger = logging.getLogger(__name__)


def propagate_error(
    path: Sequence[str],
    stations: Mapping[str, Station],
    closure_error: Polar | ClosureError,
    total_length: float,
    *,
    epsilon: float = CLOSURE_EPSILON,
) -> bool:
    """Distribute *closure_error* over the shots of *path* (Bowditch rule).

    Every leg's shot is resolved before the first shot is modified, so a
    missing shot leaves the whole loop untouched.

    Args:
        path: Closed walk of station names (``path[0] == path[-1]``).
        stations: Station name  ->  :class:`Station`.
        closure_error: The loop's closure error, as returned by
            :func:`~loop_closure_lib.loop.closure.calculate_closure_error`
            (either the :class:`ClosureError` or its ``error`` polar).
        total_length: Total measured length of the loop.
        epsilon: Closure distances below this value are not propagated.

    Returns:
        ``True`` if the shots were corrected, ``False`` if the loop was
        already closed.

    Raises:
        InvalidLoopPathException: Malformed *path*.
        UnknownStationException: *path* names an unknown station.
        MissingShotException: A leg has no connecting center-line shot.
    """
    validate_loop_path(path, stations)

    error = (
        closure_error.error
        if isinstance(closure_error, ClosureError)
        else closure_error
    )

    if error.distance < epsilon:
        logger.debug("Closure %.6f below %.6f -- nothing to propagate",
                     error.distance, epsilon)
        return False

    if total_length <= 0:
        raise ValueError(f"total_length must be positive, got {total_length}")

    legs = resolve_leg_shots(path, stations)

    for from_name, to_name, entry in legs:
        shot = entry.shot
        correction = (error * (shot.length / total_length)).to_vector()

        # Correct in walking direction, then store in surveyed direction.
        walked = signed_vector_for(shot, from_name) + correction
        corrected = vector_to_polar(walked if is_forward(shot, from_name) else -walked)

        logger.debug(
            "Leg %s -> %s: %s corrected by %.4f",
            from_name, to_name, shot, correction.length,
        )

        shot.length = corrected.distance
        shot.azimuth = normalize_azimuth(corrected.azimuth_degrees)
        shot.clino = corrected.inclination_degrees

    logger.info(
        "Distributed closure %.4f over %d shot(s) (total length %.3f)",
        error.distance, len(legs), total_length,
    )
    return True
