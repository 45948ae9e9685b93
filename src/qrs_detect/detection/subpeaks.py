"""P, Q, S and T search within beat windows.

Within each window the searches run in a fixed order because each later range
is bounded by an earlier result:

1. Q (coarse): minimum before the R sample
2. S: minimum over the whole window
3. P: maximum from the window start up to the coarse Q
4. Q (refined): minimum from P up to the R sample
5. T: maximum from S to the window end

Ties resolve to the earliest sample, as with ``np.argmin``/``np.argmax``.
"""

from collections.abc import Callable

import numpy as np

from .._logging import logger
from ..constants import LANDMARKS
from ..exceptions import DegenerateSearchRangeError
from ..types import TimeBase
from .windows import BeatWindows


def _first_extremum(
    waveform: np.ndarray,
    start: int,
    stop: int,
    landmark: str,
    arg_func: Callable[[np.ndarray], np.intp],
) -> int:
    """Window position of the first extremum in ``waveform[start:stop]``."""
    if stop <= start:
        raise DegenerateSearchRangeError(landmark, start, stop)
    return start + int(arg_func(waveform[start:stop]))


def locate_beat(waveform: np.ndarray, center: int) -> tuple[int, int, int, int, int]:
    """Locate the five landmarks of one beat.

    Args:
        waveform: Samples of one beat window
        center: Position of the R sample within the window

    Returns:
        Window positions of P, Q, R, S and T

    Raises:
        DegenerateSearchRangeError: If any search range is empty
    """
    end = waveform.size
    q_coarse = _first_extremum(waveform, 0, center, "Q", np.argmin)
    s = _first_extremum(waveform, 0, end, "S", np.argmin)
    p = _first_extremum(waveform, 0, q_coarse + 1, "P", np.argmax)
    # The coarse Q may lie before P; search again between P and R
    q = _first_extremum(waveform, p, center + 1, "Q", np.argmin)
    t = _first_extremum(waveform, s, end, "T", np.argmax)
    return p, q, center, s, t


def locate_subpeaks(windows: BeatWindows) -> tuple[np.ndarray, np.ndarray]:
    """Locate P, Q, R, S and T in every beat window.

    Beats with an empty search range are dropped.

    Args:
        windows: Beat windows from ``build_windows``

    Returns:
        Tuple of:
        - beats: Indices of the kept beats into ``windows``, shape (n_kept,)
        - positions: Window positions of P, Q, R, S, T, shape (n_kept, 5)
    """
    beats = []
    positions = []
    if windows.n_beats:
        center = windows.center
        for beat, waveform in enumerate(windows.waveforms):
            try:
                positions.append(locate_beat(waveform, center))
            except DegenerateSearchRangeError as e:
                logger.debug(f"Dropping beat at sample {windows.r_peaks[beat]}: {e}")
                continue
            beats.append(beat)

    n_dropped = windows.n_beats - len(beats)
    if n_dropped:
        logger.warning(f"Dropped {n_dropped}/{windows.n_beats} beats with an empty sub-peak search range")

    return (
        np.asarray(beats, dtype=np.intp),
        np.asarray(positions, dtype=np.intp).reshape(-1, len(LANDMARKS)),
    )


def to_sample_indices(windows: BeatWindows, beats: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """Convert window positions to absolute sample indices, shape (n_kept, 5)."""
    return windows.indices[beats[:, np.newaxis], positions]


def map_to_time(time: TimeBase, indices: np.ndarray) -> np.ndarray:
    """Look up the sampling time of each sample index."""
    return time[indices]
