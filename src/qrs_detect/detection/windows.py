"""Fixed-shape beat windows around R peaks."""

from typing import NamedTuple

import numpy as np

from .._logging import logger
from ..exceptions import WindowOutOfBoundsError
from ..types import ECGSignal, SampleIndices


class BeatWindows(NamedTuple):
    """Batch of beat windows sharing one shape.

    Attributes:
        r_peaks: R-peak indices of the beats whose window fits the signal
        offsets: Window offsets relative to the R sample, shape (n_window,)
        indices: Absolute sample indices, shape (n_beats, n_window)
        waveforms: Signal samples at ``indices``, shape (n_beats, n_window)
    """

    r_peaks: SampleIndices
    offsets: np.ndarray
    indices: np.ndarray
    waveforms: np.ndarray

    @property
    def n_beats(self) -> int:
        return int(self.r_peaks.size)

    @property
    def center(self) -> int:
        """Position of the R sample within the window."""
        return int(np.flatnonzero(self.offsets == 0)[0])

    @classmethod
    def empty(cls) -> "BeatWindows":
        return cls(
            r_peaks=np.array([], dtype=np.intp),
            offsets=np.array([], dtype=np.intp),
            indices=np.empty((0, 0), dtype=np.intp),
            waveforms=np.empty((0, 0)),
        )


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def window_extent(n_samples: int) -> tuple[int, int]:
    """Samples before and after the R sample: ``(ceil(N/3), ceil(2N/3))``."""
    return _ceil_div(n_samples, 3), _ceil_div(2 * n_samples, 3)


def beat_window(n_samples: int) -> np.ndarray:
    """Offsets ``-ceil(N/3) .. ceil(2N/3)`` around an R peak, both ends included."""
    before, after = window_extent(n_samples)
    return np.arange(-before, after + 1, dtype=np.intp)


def check_window_bounds(r_peak: int, before: int, after: int, n_times: int) -> None:
    """Raise if the window around ``r_peak`` does not lie within the signal.

    Raises:
        WindowOutOfBoundsError: If the first or last window sample is outside
            ``[0, n_times - 1]``
    """
    start = r_peak - before
    stop = r_peak + after
    if start < 0 or stop > n_times - 1:
        raise WindowOutOfBoundsError(r_peak, start, stop, n_times)


def build_windows(ecg: ECGSignal, r_peaks: SampleIndices, n_samples: int) -> BeatWindows:
    """Cut one window per R peak out of the signal.

    Beats whose window runs off either end of the signal are dropped. They are
    never clipped, since every later stage relies on the shared window shape.

    Args:
        ecg: Single-lead ECG signal
        r_peaks: Strictly increasing R-peak indices
        n_samples: Expected samples per beat

    Returns:
        BeatWindows for the beats that fit
    """
    before, after = window_extent(n_samples)
    if before + after + 1 > ecg.size:
        if len(r_peaks):
            logger.warning(
                f"Dropped {len(r_peaks)}/{len(r_peaks)} beats: a window of {before + after + 1} samples "
                f"is longer than the signal ({ecg.size} samples)"
            )
        return BeatWindows.empty()

    kept = []
    for r_peak in r_peaks:
        try:
            check_window_bounds(int(r_peak), before, after, ecg.size)
        except WindowOutOfBoundsError as e:
            logger.debug(f"Dropping beat: {e}")
            continue
        kept.append(int(r_peak))

    n_dropped = len(r_peaks) - len(kept)
    if n_dropped:
        logger.warning(f"Dropped {n_dropped}/{len(r_peaks)} beats whose window exceeds the signal boundaries")

    offsets = beat_window(n_samples)
    kept_peaks = np.asarray(kept, dtype=np.intp)
    indices = kept_peaks[:, np.newaxis] + offsets[np.newaxis, :]
    return BeatWindows(
        r_peaks=kept_peaks,
        offsets=offsets,
        indices=indices,
        waveforms=ecg[indices],
    )
