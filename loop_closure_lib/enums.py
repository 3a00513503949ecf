# -*- coding: utf-8 -*-
"""Enumerations for survey network data."""

from enum import Enum


class ShotType(str, Enum):
    """Category of a survey shot.

    Attributes:
        CENTER: Center-line shot between two survey stations.  Only these
            shots take part in loop closure computations.
        SPLAY: Splay shot measuring the passage walls from a station.
        AUXILIARY: Shot to or from an auxiliary (helper) station.
    """

    CENTER = "center"
    SPLAY = "splay"
    AUXILIARY = "auxiliary"


class Severity(str, Enum):
    """Severity level of a loop closure finding.

    Attributes:
        ERROR: The loop misclosure is unacceptable
        WARNING: The loop misclosure exceeds the configured tolerance
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
