# -*- coding: utf-8 -*-
"""Abstract base class for loop correctors.

To implement a new correction strategy:

1. Subclass ``LoopCorrector``.
2. Implement the ``correct`` method.
3. Optionally override ``name`` for logging / UI labels.

A corrector receives a closed path and the station map, rewrites the
measurements of the loop's shots in place and reports whether anything
changed.  Station positions are never modified: the caller rebuilds them
from the corrected shots.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loop_closure_lib.models import Cycle
    from loop_closure_lib.models import Station


class LoopCorrector(ABC):
    """Abstract base class for loop correction algorithms.

    Subclasses must implement :meth:`correct`.  The contract is:

    * Input: a closed path (``path[0] == path[-1]``) and the station map.
    * Output: ``True`` if at least one shot was modified.
    * Only shots along the path may be modified.
    """

    @property
    def name(self) -> str:
        """Human-readable name of the corrector (for logging / UI)."""
        return self.__class__.__name__

    @abstractmethod
    def correct(
        self,
        path: Sequence[str],
        stations: Mapping[str, Station],
    ) -> bool:
        """Correct the shots of one loop.

        Args:
            path: Closed walk of station names.
            stations: Station name  ->  :class:`Station`.

        Returns:
            ``True`` if any shot was modified.
        """
        ...

    def correct_cycle(
        self,
        cycle: Cycle,
        stations: Mapping[str, Station],
    ) -> bool:
        """Correct the loop described by *cycle*."""
        return self.correct(cycle.closed_path, stations)

    def correct_cycles(
        self,
        cycles: Iterable[Cycle],
        stations: Mapping[str, Station],
    ) -> int:
        """Correct each cycle in turn.

        Cycles sharing shots are corrected one after the other, each one
        seeing the shots as left by the previous corrections.

        Returns:
            Number of cycles whose shots were modified.
        """
        return sum(1 for cycle in cycles if self.correct_cycle(cycle, stations))
