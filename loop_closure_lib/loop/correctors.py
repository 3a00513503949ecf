# -*- coding: utf-8 -*-
"""Loop correctors.

- :class:`NoopCorrector` -- leaves every shot unchanged
- :class:`BowditchCorrector` -- measures the loop's closure error and
  distributes it over the shots in proportion to their lengths
- :class:`DeviationCorrector` -- rewrites the shots that disagree with
  their (already adjusted) endpoint stations
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from collections.abc import Sequence
from typing import TYPE_CHECKING

from loop_closure_lib.constants import CLOSURE_EPSILON
from loop_closure_lib.constants import DEVIATION_THRESHOLD
from loop_closure_lib.loop.base import LoopCorrector
from loop_closure_lib.loop.closure import calculate_closure_error
from loop_closure_lib.loop.deviation import adjust_shots
from loop_closure_lib.loop.deviation import find_loop_deviation_shots
from loop_closure_lib.loop.propagation import propagate_error

if TYPE_CHECKING:
    from loop_closure_lib.models import Station

logger = logging.getLogger(__name__)


class NoopCorrector(LoopCorrector):
    """Corrector that performs no correction."""

    @property
    def name(self) -> str:
        return "NoopCorrector"

    def correct(
        self,
        path: Sequence[str],
        stations: Mapping[str, Station],
    ) -> bool:
        return False


class BowditchCorrector(LoopCorrector):
    """Closure error distribution proportional to shot lengths.

    The closure error of the loop is measured with
    :func:`calculate_closure_error` and handed to :func:`propagate_error`.
    Loops already closed within ``epsilon`` are left unchanged.
    """

    def __init__(self, epsilon: float = CLOSURE_EPSILON) -> None:
        """Create a corrector.

        Args:
            epsilon: Closure distance under which a loop counts as closed
                (default from ``constants.CLOSURE_EPSILON``).
        """
        self._epsilon = epsilon

    @property
    def name(self) -> str:
        return "BowditchCorrector"

    def correct(
        self,
        path: Sequence[str],
        stations: Mapping[str, Station],
    ) -> bool:
        closure = calculate_closure_error(path, stations, epsilon=self._epsilon)
        changed = propagate_error(
            path,
            stations,
            closure,
            closure.total_length,
            epsilon=self._epsilon,
        )

        if changed:
            residual = calculate_closure_error(path, stations, epsilon=self._epsilon)
            logger.info(
                "Loop %s -> ... -> %s: closure %.4f (%.2f %%) -> %.6f",
                path[0], path[-2], closure.distance,
                closure.error_percentage, residual.distance,
            )
        return changed


class DeviationCorrector(LoopCorrector):
    """Rewrites shots whose measurement disagrees with their stations."""

    def __init__(self, threshold: float = DEVIATION_THRESHOLD) -> None:
        """Create a corrector.

        Args:
            threshold: Endpoint mismatch above which a shot is rewritten
                (default from ``constants.DEVIATION_THRESHOLD``).
        """
        self._threshold = threshold

    @property
    def name(self) -> str:
        return "DeviationCorrector"

    def correct(
        self,
        path: Sequence[str],
        stations: Mapping[str, Station],
    ) -> bool:
        records = find_loop_deviation_shots(
            path, stations, threshold=self._threshold,
        )
        if not records:
            return False

        logger.info(
            "Loop %s -> ... -> %s: %d deviating shot(s), worst %.4f",
            path[0], path[-2], len(records),
            max(record.diff.length for record in records),
        )
        return adjust_shots(records)
