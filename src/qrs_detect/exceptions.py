"""Exceptions raised during PQRST detection."""


class QRSDetectionError(Exception):
    """Base class for all detection errors."""


class InvalidParameterError(QRSDetectionError, ValueError):
    """Raised when the signal, time base or settings cannot be used.

    Raised before any search runs. No partial output is produced.
    """


class WindowOutOfBoundsError(QRSDetectionError):
    """Raised when a beat window would extend past either end of the signal."""

    def __init__(self, r_peak: int, start: int, stop: int, n_times: int):
        self.r_peak = r_peak
        self.start = start
        self.stop = stop
        self.n_times = n_times
        super().__init__(
            f"Window [{start}, {stop}] around R peak at sample {r_peak} "
            f"exceeds signal range [0, {n_times - 1}]"
        )


class DegenerateSearchRangeError(QRSDetectionError):
    """Raised when a sub-peak search range within a beat window is empty."""

    def __init__(self, landmark: str, start: int, stop: int):
        self.landmark = landmark
        self.start = start
        self.stop = stop
        super().__init__(f"Empty search range [{start}, {stop}) for {landmark} wave")
