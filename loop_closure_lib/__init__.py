# -*- coding: utf-8 -*-
"""Loop Closure Library.

A Python library for measuring and distributing loop closure errors in
cave survey networks.

Usage:
    from loop_closure_lib import CaveNetwork
    from loop_closure_lib import BowditchCorrector
    from loop_closure_lib import summarize_loops

    network = CaveNetwork.from_surveys("cave", surveys, positions)

    for summary in summarize_loops(cycles, network.stations):
        print(f"{summary.cycle_id}: {summary.error_percentage:.2f} %")

    corrector = BowditchCorrector()
    for cycle in cycles:
        corrector.correct_cycle(cycle, network.stations)
"""

__version__ = "0.1.0"

# Constants
from loop_closure_lib.constants import CLOSURE_EPSILON
from loop_closure_lib.constants import DEVIATION_THRESHOLD

# Enums
from loop_closure_lib.enums import Severity
from loop_closure_lib.enums import ShotType

# Errors
from loop_closure_lib.errors import InvalidLoopPathException
from loop_closure_lib.errors import LoopException
from loop_closure_lib.errors import MissingShotException
from loop_closure_lib.errors import UnknownStationException

# Geometry
from loop_closure_lib.geometry import ZERO
from loop_closure_lib.geometry import Polar
from loop_closure_lib.geometry import Vector3D
from loop_closure_lib.geometry import normalize_azimuth
from loop_closure_lib.geometry import polar_to_vector
from loop_closure_lib.geometry import vector_to_polar

# Loop engine
from loop_closure_lib.loop import BowditchCorrector
from loop_closure_lib.loop import ClosureError
from loop_closure_lib.loop import DeviationCorrector
from loop_closure_lib.loop import DeviationRecord
from loop_closure_lib.loop import LoopCorrector
from loop_closure_lib.loop import LoopSummary
from loop_closure_lib.loop import NoopCorrector
from loop_closure_lib.loop import adjust_shots
from loop_closure_lib.loop import calculate_closure_error
from loop_closure_lib.loop import find_loop_deviation_shots
from loop_closure_lib.loop import propagate_error
from loop_closure_lib.loop import summarize_loop
from loop_closure_lib.loop import summarize_loops

# Models
from loop_closure_lib.models import CaveNetwork
from loop_closure_lib.models import Cycle
from loop_closure_lib.models import CycleProvider
from loop_closure_lib.models import Shot
from loop_closure_lib.models import Station
from loop_closure_lib.models import StationShot
from loop_closure_lib.models import Survey
from loop_closure_lib.models import SurveyMetadata

__all__ = [
    # Constants
    "CLOSURE_EPSILON",
    "DEVIATION_THRESHOLD",
    "ZERO",
    # Loop engine
    "BowditchCorrector",
    # Models
    "CaveNetwork",
    "ClosureError",
    "Cycle",
    "CycleProvider",
    "DeviationCorrector",
    "DeviationRecord",
    # Errors
    "InvalidLoopPathException",
    "LoopCorrector",
    "LoopException",
    "LoopSummary",
    "MissingShotException",
    "NoopCorrector",
    # Geometry
    "Polar",
    # Enums
    "Severity",
    "Shot",
    "ShotType",
    "Station",
    "StationShot",
    "Survey",
    "SurveyMetadata",
    "UnknownStationException",
    "Vector3D",
    "adjust_shots",
    "calculate_closure_error",
    "find_loop_deviation_shots",
    "normalize_azimuth",
    "polar_to_vector",
    "propagate_error",
    "summarize_loop",
    "summarize_loops",
    "vector_to_polar",
]
