"""Tests for batch detection and worker count handling."""

import os

import numpy as np
import pytest

import qrs_detect
from qrs_detect.utils import get_n_processes


def _total_cpus() -> int:
    return os.cpu_count() or 1


@pytest.mark.parametrize(
    "n_jobs, n_tasks",
    [(None, 10), (-1, 10), (1, 10), (2, 10), (-2, 10), (0, 10), (100, 5), (-100, 10)],
)
def test_n_jobs_handling(n_jobs: int | None, n_tasks: int):
    result = get_n_processes(n_jobs, n_tasks)

    assert 1 <= result <= n_tasks
    assert result <= max(_total_cpus(), n_jobs or 0)


def test_n_jobs_exact_values():
    total_cpus = _total_cpus()

    assert get_n_processes(1, 10) == 1
    assert get_n_processes(0, 10) == 1
    assert get_n_processes(100, 5) == 5
    assert get_n_processes(-100, 10) == 1
    assert get_n_processes(-1, 10) == min(total_cpus, 10)
    assert get_n_processes(-2, 10) == min(max(1, total_cpus - 1), 10)
    assert get_n_processes(4, 0) == 1


def test_detect_many_sequential(periodic_ecg: tuple[np.ndarray, list[int]], time_base: np.ndarray):
    ecg, r_peaks = periodic_ecg
    detector = qrs_detect.QRSDetector(qrs_detect.Settings(detection={"r_threshold": 0.5}))

    results = detector.detect_many([ecg, np.zeros_like(ecg), ecg], times=[time_base, None, time_base])

    assert len(results) == 3
    assert results[0].r.indices == r_peaks
    assert results[1].is_empty
    assert results[2] == detector.detect(ecg, time_base)


def test_detect_many_array_input(periodic_ecg: tuple[np.ndarray, list[int]], time_base: np.ndarray):
    ecg, r_peaks = periodic_ecg
    detector = qrs_detect.QRSDetector(qrs_detect.Settings(detection={"r_threshold": 0.5}))

    results = detector.detect_many(np.vstack([ecg, -ecg]), times=[time_base, time_base])

    assert results[0].r.indices == r_peaks
    assert results[1].r.indices != r_peaks


def test_detect_many_parallel(periodic_ecg: tuple[np.ndarray, list[int]], time_base: np.ndarray):
    ecg, _ = periodic_ecg
    detector = qrs_detect.QRSDetector(qrs_detect.Settings(detection={"r_threshold": 0.5}))
    recordings = [ecg, np.roll(ecg, 5), np.roll(ecg, -5)]
    times = [time_base] * 3

    parallel = detector.detect_many(recordings, times=times, n_jobs=2)
    sequential = detector.detect_many(recordings, times=times, n_jobs=1)

    assert parallel == sequential


def test_detect_many_mismatched_times(periodic_ecg: tuple[np.ndarray, list[int]]):
    ecg, _ = periodic_ecg

    with pytest.raises(qrs_detect.InvalidParameterError, match="2 time bases for 3 recordings"):
        qrs_detect.QRSDetector().detect_many([ecg, ecg, ecg], times=[None, None])


def test_detect_many_invalid_recording():
    with pytest.raises(qrs_detect.InvalidParameterError):
        qrs_detect.QRSDetector().detect_many([np.zeros(10), np.array([])])
