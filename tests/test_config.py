"""Tests for settings models and config file loading."""

import json

import numpy as np
import pydantic
import pytest

import qrs_detect
from qrs_detect import ConfigLoader, DetectionSettings, Settings


def test_default_settings():
    settings = Settings()

    assert settings.detection.heart_rate_hz == 1.0
    assert settings.detection.r_threshold is None
    assert settings.detection.period_margin == 0.8
    assert settings.detection.separation_factor == 0.8
    assert settings.detection.threshold_std_factor == 3.0
    assert settings.n_jobs == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"heart_rate_hz": 0},
        {"heart_rate_hz": -2.0},
        {"heart_rate_hz": float("inf")},
        {"r_threshold": -0.1},
        {"period_margin": 1.5},
        {"separation_factor": 0},
    ],
)
def test_invalid_detection_settings(kwargs: dict):
    with pytest.raises(pydantic.ValidationError):
        DetectionSettings(**kwargs)


def test_assignment_is_validated():
    settings = Settings()

    with pytest.raises(pydantic.ValidationError):
        settings.detection.heart_rate_hz = 0

    settings.detection.heart_rate_hz = 1.5
    assert settings.detection.heart_rate_hz == 1.5


def test_from_json(tmp_path):
    path = tmp_path / "detection.json"
    path.write_text(json.dumps({"detection": {"heart_rate_hz": 1.2, "r_threshold": 2.0}, "n_jobs": 2}))

    settings = ConfigLoader.from_file(path)

    assert settings.detection.heart_rate_hz == 1.2
    assert settings.detection.r_threshold == 2.0
    assert settings.n_jobs == 2


def test_from_toml(tmp_path):
    path = tmp_path / "detection.toml"
    path.write_text("n_jobs = -1\n\n[detection]\nheart_rate_hz = 0.5\n")

    settings = ConfigLoader.from_file(str(path))

    assert settings.detection.heart_rate_hz == 0.5
    assert settings.detection.r_threshold is None
    assert settings.n_jobs == -1


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported config file format"):
        ConfigLoader.from_file(tmp_path / "detection.yaml")


def test_detect_with_config_file(tmp_path, periodic_ecg: tuple[np.ndarray, list[int]], time_base: np.ndarray):
    ecg, r_peaks = periodic_ecg
    path = tmp_path / "detection.toml"
    path.write_text("[detection]\nr_threshold = 0.5\n")

    complexes = qrs_detect.detect(ecg, time=time_base, settings=path)

    assert complexes.r.indices == r_peaks


def test_detect_with_invalid_config_file(tmp_path, periodic_ecg: tuple[np.ndarray, list[int]]):
    ecg, _ = periodic_ecg
    path = tmp_path / "detection.json"
    path.write_text(json.dumps({"detection": {"heart_rate_hz": 0}}))

    with pytest.raises(qrs_detect.InvalidParameterError, match="heart_rate_hz"):
        qrs_detect.detect(ecg, settings=path)


def test_detect_with_missing_config_file(tmp_path, periodic_ecg: tuple[np.ndarray, list[int]]):
    ecg, _ = periodic_ecg

    with pytest.raises(FileNotFoundError):
        qrs_detect.detect(ecg, settings=tmp_path / "missing.toml")


def test_resolve_settings_overrides():
    base = Settings(detection=DetectionSettings(heart_rate_hz=2.0, r_threshold=1.0))

    resolved = qrs_detect.resolve_settings(base, heart_rate_hz=1.5)

    assert resolved.detection.heart_rate_hz == 1.5
    assert resolved.detection.r_threshold == 1.0
    assert base.detection.heart_rate_hz == 2.0
    assert qrs_detect.resolve_settings(base) is base
