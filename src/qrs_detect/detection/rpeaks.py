"""R-peak search by prominence with a minimum separation."""

import math

import numpy as np
import scipy.signal

from .._logging import logger
from ..types import ECGSignal, SampleIndices


def _select_by_prominence(
    peaks: SampleIndices,
    prominences: np.ndarray,
    min_separation: int,
) -> np.ndarray:
    """Keep peaks greedily in order of decreasing prominence.

    A peak is kept when no already kept peak lies closer than ``min_separation``
    samples. Equal prominences are visited in index order, so the earliest peak
    wins a tie.

    Args:
        peaks: Sorted candidate indices
        prominences: Prominence of each candidate
        min_separation: Minimum distance between kept peaks in samples

    Returns:
        Boolean mask over ``peaks``
    """
    keep = np.zeros(peaks.size, dtype=bool)
    if min_separation <= 1:
        keep[:] = True
        return keep

    blocked = np.zeros(peaks.size, dtype=bool)
    for i in np.lexsort((peaks, -prominences)):
        if blocked[i]:
            continue
        keep[i] = True
        lo = np.searchsorted(peaks, peaks[i] - min_separation, side="right")
        hi = np.searchsorted(peaks, peaks[i] + min_separation, side="left")
        blocked[lo:hi] = True
    return keep


def find_r_peaks(ecg: ECGSignal, r_threshold: float, min_separation: int) -> SampleIndices:
    """Find R peaks as prominent, well separated local maxima.

    Args:
        ecg: Single-lead ECG signal
        r_threshold: Minimum prominence. The value is floored before use.
        min_separation: Minimum distance between two R peaks in samples

    Returns:
        Strictly increasing R-peak sample indices. Empty if no peak qualifies.
    """
    min_prominence = math.floor(r_threshold)
    candidates, properties = scipy.signal.find_peaks(ecg, prominence=min_prominence)
    if candidates.size == 0:
        return np.array([], dtype=np.intp)

    # No two samples are further apart than the signal is long
    min_separation = min(min_separation, ecg.size)
    keep = _select_by_prominence(candidates, properties["prominences"], min_separation)
    r_peaks = candidates[keep].astype(np.intp)
    logger.debug(
        f"{candidates.size} local maxima with prominence >= {min_prominence}, "
        f"{r_peaks.size} kept with separation >= {min_separation} samples"
    )
    return r_peaks
