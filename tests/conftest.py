# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures for building small survey networks.
Station positions are computed with a minimal forward traverse, standing
in for the upstream code that positions stations in a real cave.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from pathlib import Path

import orjson
import pytest

from loop_closure_lib.geometry import ZERO
from loop_closure_lib.geometry import Vector3D
from loop_closure_lib.geometry import polar_to_vector
from loop_closure_lib.models import CaveNetwork
from loop_closure_lib.models import Shot
from loop_closure_lib.models import Survey
from loop_closure_lib.models import SurveyMetadata

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"

#: Legs of a 10 x 10 square walked clockwise from A (north, east, south, west)
SQUARE_LEGS = [
    ("A", "B", 10.0, 0.0, 0.0),
    ("B", "C", 10.0, 90.0, 0.0),
    ("C", "D", 10.0, 180.0, 0.0),
    ("D", "A", 10.0, 270.0, 0.0),
]

SQUARE_PATH = ["A", "B", "C", "D", "A"]


# =============================================================================
# Network Builders
# =============================================================================


def forward_positions(
    surveys: list[Survey],
    start: str,
    start_position: Vector3D = ZERO,
) -> dict[str, Vector3D]:
    """Position every reachable station by walking center-line shots (BFS).

    Each station is positioned once, from the first shot reaching it.
    Azimuths are corrected with the survey declination and convergence.
    """
    adjacency: dict[str, list[tuple[str, Vector3D]]] = {}
    for survey in surveys:
        metadata = survey.metadata or SurveyMetadata()
        correction = (metadata.declination or 0.0) + (metadata.convergence or 0.0)
        for shot in survey.center_shots:
            delta = polar_to_vector(
                shot.length,
                math.radians(shot.azimuth + correction),
                math.radians(shot.clino),
            )
            adjacency.setdefault(shot.from_station_name, []).append(
                (shot.to_station_name, delta)
            )
            adjacency.setdefault(shot.to_station_name, []).append(
                (shot.from_station_name, -delta)
            )

    positions = {start: start_position}
    queue: deque[str] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor, delta in adjacency.get(current, []):
            if neighbor in positions:
                continue
            positions[neighbor] = positions[current] + delta
            queue.append(neighbor)
    return positions


def make_shot(
    from_name: str,
    to_name: str,
    length: float,
    azimuth: float,
    clino: float,
    **kwargs,
) -> Shot:
    return Shot.model_validate(
        {
            "from": from_name,
            "to": to_name,
            "length": length,
            "azimuth": azimuth,
            "clino": clino,
            **kwargs,
        }
    )


def make_network(
    legs: list[tuple[str, str, float, float, float]],
    *,
    declination: float | None = None,
    convergence: float | None = None,
    positions: dict[str, Vector3D] | None = None,
    start: str = "A",
) -> CaveNetwork:
    """Build a single-survey network from ``(from, to, length, az, clino)`` legs.

    Positions default to a forward traverse from *start*.
    """
    metadata = None
    if declination is not None or convergence is not None:
        metadata = SurveyMetadata(declination=declination, convergence=convergence)

    survey = Survey(
        name="test",
        metadata=metadata,
        shots=[make_shot(*leg, id=i) for i, leg in enumerate(legs)],
    )
    if positions is None:
        positions = forward_positions([survey], start)
    return CaveNetwork.from_surveys("test cave", [survey], positions)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


@pytest.fixture
def square_cave_data(artifacts_dir: Path) -> dict:
    """Raw content of the two-survey square cave artifact."""
    return orjson.loads((artifacts_dir / "square_cave.json").read_bytes())


@pytest.fixture
def square_network() -> CaveNetwork:
    """A 10 x 10 square A -> B -> C -> D -> A that closes exactly."""
    return make_network(SQUARE_LEGS)


@pytest.fixture
def perturbed_square_network() -> CaveNetwork:
    """The square with the A -> B azimuth misread as 1 degree."""
    legs = list(SQUARE_LEGS)
    legs[0] = ("A", "B", 10.0, 1.0, 0.0)
    return make_network(legs)


@pytest.fixture
def network_builder():
    """Factory fixture exposing :func:`make_network`."""
    return make_network
