"""Input normalization and per-call parameter resolution.

Every default the pipeline needs (time base, R threshold, beat period, window
size, R-R separation) is resolved here once, before any search runs. Anything
that makes the input unusable is reported as an ``InvalidParameterError``.
"""

import math
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict

from .._logging import logger
from ..config import DetectionSettings
from ..exceptions import InvalidParameterError
from ..types import ECGSignal, TimeBase


def _as_row(values: Any, name: str) -> np.ndarray:
    """Flatten a row or column shaped array to 1D."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 2 and 1 in arr.shape:
        if arr.shape[0] > arr.shape[1]:
            logger.debug(f"{name} has column shape {arr.shape}, transposing to a row")
        arr = arr.reshape(-1)
    if arr.ndim != 1:
        raise InvalidParameterError(f"{name} must be a single row or column of samples, got shape {arr.shape}")
    return arr


def as_single_lead(ecg: Any) -> ECGSignal:
    """Convert the input to a 1D float array of ECG samples.

    Args:
        ecg: Samples of one lead. 1D, or 2D with one row or one column.

    Returns:
        1D float array

    Raises:
        InvalidParameterError: If the signal is empty, has more than one lead
            or contains non-finite samples
    """
    signal = _as_row(ecg, "ECG signal")
    if signal.size == 0:
        raise InvalidParameterError("ECG signal is empty")
    if not np.all(np.isfinite(signal)):
        raise InvalidParameterError("ECG signal contains NaN or infinite samples")
    return signal


def resolve_time_base(time: Any | None, n_times: int) -> TimeBase:
    """Return the sampling times of the signal.

    Args:
        time: Explicit sampling times, or None for sample numbers ``1..n_times``
        n_times: Number of samples in the signal

    Raises:
        InvalidParameterError: If the time base does not match the signal length,
            is not strictly increasing or ends at a non-positive time
    """
    if time is None:
        return np.arange(1, n_times + 1, dtype=float)

    time = _as_row(time, "Time base")
    if time.size != n_times:
        raise InvalidParameterError(f"Time base has {time.size} values but the ECG signal has {n_times} samples")
    if not np.all(np.isfinite(time)):
        raise InvalidParameterError("Time base contains NaN or infinite values")
    if np.any(np.diff(time) <= 0):
        raise InvalidParameterError("Time base must be strictly increasing")
    if time[-1] <= 0:
        raise InvalidParameterError(f"Time base must end at a positive time, got {time[-1]}")
    return time


def default_r_threshold(ecg: ECGSignal, std_factor: float) -> float:
    """R threshold from the spread of the signal (sample standard deviation)."""
    if ecg.size < 2:
        return 0.0
    return float(std_factor * np.std(ecg, ddof=1))


class DetectionParameters(BaseModel):
    """Parameters of one detection call, resolved from settings and the signal.

    Attributes:
        r_threshold: Minimum R-peak prominence before flooring
        heart_rate_hz: Approximate heart rate in Hz
        sfreq: Sampling frequency derived as ``n_times / time[-1]``
        beat_period: Shrunk beat period in seconds
        n_samples: Expected samples per beat, ``floor(beat_period * sfreq)``
        min_separation: Minimum R-R distance in samples
    """

    model_config = ConfigDict(frozen=True)

    r_threshold: float
    heart_rate_hz: float
    sfreq: float
    beat_period: float
    n_samples: int
    min_separation: int

    @classmethod
    def resolve(cls, ecg: ECGSignal, time: TimeBase, settings: DetectionSettings) -> "DetectionParameters":
        """Resolve all parameters for a normalized signal and time base."""
        if settings.r_threshold is None:
            r_threshold = default_r_threshold(ecg, settings.threshold_std_factor)
        else:
            r_threshold = settings.r_threshold

        sfreq = ecg.size / float(time[-1])
        beat_period = settings.period_margin * (1 / settings.heart_rate_hz)
        if not math.isfinite(beat_period * sfreq):
            raise InvalidParameterError(
                f"heart_rate_hz={settings.heart_rate_hz} gives a beat length that is not a finite number of samples"
            )
        n_samples = math.floor(beat_period * sfreq)
        min_separation = math.floor(settings.separation_factor * n_samples)

        params = cls(
            r_threshold=r_threshold,
            heart_rate_hz=settings.heart_rate_hz,
            sfreq=sfreq,
            beat_period=beat_period,
            n_samples=n_samples,
            min_separation=min_separation,
        )
        logger.debug(
            f"Resolved parameters: r_threshold={r_threshold:.4g}, sfreq={sfreq:.4g} Hz, "
            f"beat_period={beat_period:.4g} s, samples_per_beat={n_samples}, min_separation={min_separation}"
        )
        return params
