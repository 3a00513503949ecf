# -*- coding: utf-8 -*-
"""Exceptions raised by the loop closure engine.

Every failure in this library is a caller-input error: a malformed path or
a network model that does not contain what the path refers to.  They are
raised before any shot is modified and never recovered internally.
"""

from __future__ import annotations


class LoopException(Exception):  # noqa: N818
    """Base exception for loop closure errors.

    Attributes:
        message: Error message
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidLoopPathException(LoopException, ValueError):
    """The path is not a closed walk of at least three entries."""


class UnknownStationException(LoopException, LookupError):
    """A station named in the path is absent from the station map.

    Attributes:
        station: Name of the first missing station
    """

    def __init__(self, station: str):
        self.station = station
        super().__init__(f"Station not found: {station!r}")


class MissingShotException(LoopException, LookupError):
    """No center-line shot connects two consecutive stations of the path.

    Attributes:
        from_station: Name of the leg's start station
        to_station: Name of the leg's end station
    """

    def __init__(self, from_station: str, to_station: str):
        self.from_station = from_station
        self.to_station = to_station
        super().__init__(
            f"No shot between stations {from_station!r} and {to_station!r}"
        )
