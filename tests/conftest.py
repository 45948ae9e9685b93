"""Shared test fixtures for qrs-detect tests."""

import neurokit2 as nk
import numpy as np
import pytest

SFREQ = 100
N_TIMES = 500

# Offset from the R sample and amplitude of each landmark
LANDMARK_SHAPE = {
    "P": (-20, 0.2),
    "Q": (-8, -0.3),
    "R": (0, 1.0),
    "S": (8, -0.4),
    "T": (30, 0.3),
}

# Wider layout whose P wave lies before the window start at 1 Hz and 100 Hz (-27 .. 54)
WIDE_LANDMARK_SHAPE = {
    "P": (-30, 0.2),
    "Q": (-10, -0.3),
    "R": (0, 1.0),
    "S": (10, -0.4),
    "T": (30, 0.3),
}


def make_periodic_ecg(
    r_peaks: list[int],
    n_times: int = N_TIMES,
    shape: dict[str, tuple[int, float]] = LANDMARK_SHAPE,
) -> np.ndarray:
    """Zero baseline with one sample per landmark around every R peak.

    Landmarks that would fall outside the signal are left out.
    """
    ecg = np.zeros(n_times)
    for r_peak in r_peaks:
        for offset, amplitude in shape.values():
            idx = r_peak + offset
            if 0 <= idx < n_times:
                ecg[idx] = amplitude
    return ecg


@pytest.fixture
def time_base() -> np.ndarray:
    """Sampling times in seconds at 100 Hz, starting at one sample period."""
    return np.arange(1, N_TIMES + 1) / SFREQ


@pytest.fixture
def periodic_ecg() -> tuple[np.ndarray, list[int]]:
    """Noiseless periodic waveform: 5 beats of 100 samples (1 Hz at 100 Hz).

    Returns:
        Tuple of (ecg, r_peaks)
    """
    r_peaks = [30, 130, 230, 330, 430]
    return make_periodic_ecg(r_peaks), r_peaks


@pytest.fixture
def edge_ecg() -> tuple[np.ndarray, list[int]]:
    """Periodic waveform whose first and last R peaks sit too close to the ends.

    Returns:
        Tuple of (ecg, r_peaks)
    """
    r_peaks = [10, 110, 210, 310, 480]
    return make_periodic_ecg(r_peaks), r_peaks


@pytest.fixture
def wide_periodic_ecg() -> tuple[np.ndarray, list[int]]:
    """Periodic waveform with the wider landmark layout, all windows inside the signal.

    Returns:
        Tuple of (ecg, r_peaks)
    """
    r_peaks = [40, 140, 240, 340, 440]
    return make_periodic_ecg(r_peaks, shape=WIDE_LANDMARK_SHAPE), r_peaks


@pytest.fixture
def simulated_ecg() -> tuple[np.ndarray, np.ndarray]:
    """Simulated single-lead ECG at 60 bpm.

    Returns:
        Tuple of (ecg, time) with time in seconds
    """
    sfreq = 250
    duration = 10
    ecg = nk.ecg_simulate(
        duration=duration,
        sampling_rate=sfreq,
        noise=0.01,
        heart_rate=60,
        random_state=0,
    )
    time = np.arange(1, len(ecg) + 1) / sfreq
    return np.asarray(ecg, dtype=float), time


@pytest.fixture
def landmark_shape() -> dict[str, tuple[int, float]]:
    """Offset from the R sample and amplitude of each landmark in the periodic fixtures."""
    return dict(LANDMARK_SHAPE)
