"""Exceptions raised by WritePy.

Stale issues and invalid ranges are reported as values on ``CorrectionResult``
and never raised.
"""


class WritePyError(Exception):
    """Base class for WritePy errors."""


class OverlappingCorrectionsError(WritePyError, ValueError):
    """A batch of corrections contains spans that overlap each other."""

    def __init__(self, first: tuple[int, int], second: tuple[int, int]) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"Corrections overlap: [{first[0]}, {first[1]}) and [{second[0]}, {second[1]})"
        )
