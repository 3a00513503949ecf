# -*- coding: utf-8 -*-
"""Survey network data models.

This module contains the records a loop computation reads and mutates:

- Shot: A single measurement between two stations
- SurveyMetadata: Declination and grid convergence of a survey
- Survey: An ordered collection of shots sharing the same corrections
- Station: A named, positioned station with its incident shots
- CaveNetwork: All stations and surveys of a cave
- Cycle: A closed walk through the network, as produced by a cycle finder

Shots, surveys and cycles are Pydantic models so they can be loaded from
and dumped to JSON.  Stations and the network are plain dataclasses: they
form an in-memory graph whose positions are computed upstream.

Shot measurements are stored in degrees.  Shots are mutable on purpose:
the correction functions rewrite ``length``, ``azimuth`` and ``clino`` in
place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Protocol

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from loop_closure_lib.enums import ShotType
from loop_closure_lib.geometry import Vector3D

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Survey records
# ---------------------------------------------------------------------------


class Shot(BaseModel):
    """A single survey shot between two stations.

    Angles are in degrees.  The shot has no preferred direction for
    geometric purposes: a loop walking it from ``to`` to ``from`` simply
    uses the negated vector.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    id: int | None = None
    type: ShotType = ShotType.CENTER
    from_station_name: str = Field(alias="from")
    to_station_name: str = Field(alias="to")
    length: float = Field(gt=0)
    azimuth: float
    clino: float
    comment: str | None = None

    @property
    def is_center(self) -> bool:
        return self.type == ShotType.CENTER

    @property
    def is_splay(self) -> bool:
        return self.type == ShotType.SPLAY

    @property
    def is_auxiliary(self) -> bool:
        return self.type == ShotType.AUXILIARY

    def connects(self, station_a: str, station_b: str) -> bool:
        """True if the shot's endpoints are ``{station_a, station_b}``."""
        return (
            self.from_station_name == station_a and self.to_station_name == station_b
        ) or (
            self.from_station_name == station_b and self.to_station_name == station_a
        )

    def __str__(self) -> str:
        return (
            f"Shot({self.from_station_name} -> {self.to_station_name}, "
            f"length={self.length:.3f}, azimuth={self.azimuth:.2f}, "
            f"clino={self.clino:.2f})"
        )


class SurveyMetadata(BaseModel):
    """Azimuth corrections of a survey, in degrees.

    Both values are added to a shot's raw azimuth to get its true / grid
    bearing.  ``None`` means the value is unknown.
    """

    declination: float | None = None
    convergence: float | None = None


class Survey(BaseModel):
    """An ordered collection of shots sharing declination and convergence."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    metadata: SurveyMetadata | None = None
    shots: list[Shot] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Survey name cannot be empty")
        return v

    @property
    def center_shots(self) -> list[Shot]:
        return [shot for shot in self.shots if shot.is_center]


class Cycle(BaseModel):
    """A cycle of the survey network.

    ``path`` lists each station of the loop once, in walking order; the
    start station is NOT repeated at the end.  Use :attr:`closed_path` for
    the closed walk expected by the loop functions.

    Attributes:
        id: Identifier assigned by the cycle finder
        path: Station names in walking order
        distance: Nominal total length of the loop
    """

    id: str
    path: list[str] = Field(min_length=2)
    distance: float = Field(default=0.0, ge=0)

    @property
    def closed_path(self) -> list[str]:
        """The path with its start station appended (``path[0] == path[-1]``)."""
        return [*self.path, self.path[0]]


# ---------------------------------------------------------------------------
# Station graph
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StationShot:
    """A shot incident to a station, together with its owning survey."""

    shot: Shot
    survey: Survey | None = None


@dataclass
class Station:
    """A surveyed station.

    Attributes:
        name: Station name, unique within a cave.
        position: Current position, computed upstream from the shots.
        shots: Back-references to every shot touching this station.
        survey: Survey that first positioned the station (if known).
    """

    name: str
    position: Vector3D
    shots: list[StationShot] = field(default_factory=list)
    survey: Survey | None = None


@dataclass
class CaveNetwork:
    """The stations and surveys of a cave.

    Attributes:
        name: Cave name.
        surveys: Surveys in the order they were recorded.
        stations: Station name  ->  :class:`Station`.
    """

    name: str
    surveys: list[Survey] = field(default_factory=list)
    stations: dict[str, Station] = field(default_factory=dict)

    # -- factory -----------------------------------------------------------

    @classmethod
    def from_surveys(
        cls,
        name: str,
        surveys: Iterable[Survey],
        positions: Mapping[str, Vector3D],
    ) -> CaveNetwork:
        """Build a network from surveys and already-computed positions.

        Every center-line shot is registered on both of its endpoint
        stations.  Shots with an endpoint that has no position are not
        connected (the traversal that computes positions did not reach
        them).

        Args:
            name: Cave name.
            surveys: Surveys holding the shots.
            positions: Station name  ->  position, e.g. the output of a
                forward traverse.
        """
        surveys = list(surveys)
        stations: dict[str, Station] = {
            st_name: Station(name=st_name, position=Vector3D(*pos))
            for st_name, pos in positions.items()
        }

        skipped = 0
        for survey in surveys:
            for shot in survey.center_shots:
                from_st = stations.get(shot.from_station_name)
                to_st = stations.get(shot.to_station_name)
                if from_st is None or to_st is None:
                    skipped += 1
                    continue

                entry = StationShot(shot=shot, survey=survey)
                from_st.shots.append(entry)
                if to_st is not from_st:
                    to_st.shots.append(entry)

                if from_st.survey is None:
                    from_st.survey = survey
                if to_st.survey is None:
                    to_st.survey = survey

        if skipped:
            logger.debug(
                "Cave %s: %d shot(s) not connected (unpositioned endpoints)",
                name, skipped,
            )

        return cls(name=name, surveys=surveys, stations=stations)

    # -- queries -----------------------------------------------------------

    @property
    def shots(self) -> list[Shot]:
        """Every shot of every survey."""
        return [shot for survey in self.surveys for shot in survey.shots]


class CycleProvider(Protocol):
    """Cycle discovery capability consumed by the loop engine.

    Implementations find the closed walks of a network (for instance with a
    spanning tree and its back edges).  The loop engine only requires that
    each returned :class:`Cycle` walks along existing center-line shots.
    """

    def cycles(self, network: CaveNetwork) -> Iterable[Cycle]: ...
