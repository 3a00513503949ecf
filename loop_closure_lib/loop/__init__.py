# -*- coding: utf-8 -*-
"""Loop closure engine for cave survey networks.

Usage::

    from loop_closure_lib.loop import calculate_closure_error
    from loop_closure_lib.loop import propagate_error

    path = [*cycle.path, cycle.path[0]]
    closure = calculate_closure_error(path, network.stations)
    if propagate_error(path, network.stations, closure, closure.total_length):
        ...  # rebuild station positions from the corrected shots

Available correctors:

- :class:`NoopCorrector` -- no correction
- :class:`BowditchCorrector` -- closure error distribution proportional to
  shot lengths
- :class:`DeviationCorrector` -- rewrites shots that disagree with their
  endpoint stations

To create a custom corrector, subclass :class:`LoopCorrector` and
implement the :meth:`~LoopCorrector.correct` method.
"""

from loop_closure_lib.loop.base import LoopCorrector
from loop_closure_lib.loop.closure import ClosureError
from loop_closure_lib.loop.closure import LoopSummary
from loop_closure_lib.loop.closure import calculate_closure_error
from loop_closure_lib.loop.closure import summarize_loop
from loop_closure_lib.loop.closure import summarize_loops
from loop_closure_lib.loop.closure import total_error_distance
from loop_closure_lib.loop.correctors import BowditchCorrector
from loop_closure_lib.loop.correctors import DeviationCorrector
from loop_closure_lib.loop.correctors import NoopCorrector
from loop_closure_lib.loop.deviation import DeviationRecord
from loop_closure_lib.loop.deviation import adjust_shots
from loop_closure_lib.loop.deviation import find_loop_deviation_shots
from loop_closure_lib.loop.path import find_shot_between_stations
from loop_closure_lib.loop.path import get_survey_corrections
from loop_closure_lib.loop.path import iter_legs
from loop_closure_lib.loop.path import signed_vector_for
from loop_closure_lib.loop.path import validate_loop_path
from loop_closure_lib.loop.propagation import propagate_error

__all__ = [
    "BowditchCorrector",
    "ClosureError",
    "DeviationCorrector",
    "DeviationRecord",
    "LoopCorrector",
    "LoopSummary",
    "NoopCorrector",
    "adjust_shots",
    "calculate_closure_error",
    "find_loop_deviation_shots",
    "find_shot_between_stations",
    "get_survey_corrections",
    "iter_legs",
    "propagate_error",
    "signed_vector_for",
    "summarize_loop",
    "summarize_loops",
    "total_error_distance",
    "validate_loop_path",
]
