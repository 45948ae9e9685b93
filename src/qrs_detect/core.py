"""Main PQRST detection orchestrator."""

import multiprocessing
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import numpy as np
import pydantic
from tqdm import tqdm

from . import utils
from ._logging import logger
from .complexes import Complexes
from .config import ConfigLoader, DetectionSettings, Settings
from .detection import (
    DetectionParameters,
    as_single_lead,
    build_windows,
    find_r_peaks,
    locate_subpeaks,
    resolve_time_base,
    to_sample_indices,
)
from .exceptions import InvalidParameterError


class QRSDetector:
    """Locate the P, Q, R, S and T landmarks of every beat in a single-lead ECG.

    The pipeline runs four stages once per recording:
    1. R peaks: prominent local maxima at least ``min_separation`` samples apart
    2. Beat windows: a fixed window of samples around every R peak
    3. Sub-peaks: Q, S, P, refined Q and T searched in order within each window
    4. Time mapping: window positions converted to samples and sampling times

    Args:
        settings: Detection settings. If None, uses default settings.

    Examples:
        # Defaults: 1 Hz heart rate, threshold of 3 standard deviations
        detector = QRSDetector()
        complexes = detector.detect(ecg)

        # Explicit time base in seconds and a faster heart rate
        settings = Settings(detection=DetectionSettings(heart_rate_hz=1.5))
        complexes = QRSDetector(settings).detect(ecg, time=t)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    @property
    def detection_settings(self) -> DetectionSettings:
        """Return the detection section of the settings."""
        return self.settings.detection

    def resolve(self, ecg: Any, time: Any | None = None) -> tuple[np.ndarray, np.ndarray, DetectionParameters]:
        """Normalize the inputs and resolve all parameters for one recording.

        Returns:
            Tuple of (signal, time base, resolved parameters)

        Raises:
            InvalidParameterError: If the signal or time base cannot be used
        """
        signal = as_single_lead(ecg)
        time_base = resolve_time_base(time, signal.size)
        params = DetectionParameters.resolve(signal, time_base, self.detection_settings)
        return signal, time_base, params

    def detect(self, ecg: Any, time: Any | None = None) -> Complexes:
        """Detect the PQRST complexes of one recording.

        Args:
            ecg: Samples of one lead, as a 1D array or a single row/column
            time: Sampling times matching ``ecg``. Defaults to sample numbers ``1..len(ecg)``.

        Returns:
            Complexes with one entry per beat. Empty if no R peak was found.

        Raises:
            InvalidParameterError: If the signal or time base cannot be used
        """
        signal, time_base, params = self.resolve(ecg, time)
        start = utils.log_start(signal.size)

        r_peaks = find_r_peaks(signal, params.r_threshold, params.min_separation)
        if r_peaks.size == 0:
            logger.warning(
                f"No R peaks with prominence >= {np.floor(params.r_threshold):g} found in {signal.size} samples"
            )
            return Complexes.empty()

        windows = build_windows(signal, r_peaks, params.n_samples)
        beats, positions = locate_subpeaks(windows)
        indices = to_sample_indices(windows, beats, positions)
        complexes = Complexes.from_indices(signal, time_base, indices)

        if complexes.is_empty:
            logger.warning(f"None of the {r_peaks.size} R peaks produced a complete beat")
        utils.log_end(start, complexes.n_beats)
        return complexes

    def _detect_pair(self, recording: tuple[Any, Any | None]) -> Complexes:
        ecg, time = recording
        return self.detect(ecg, time)

    def detect_many(
        self,
        recordings: Sequence[Any] | np.ndarray,
        times: Sequence[Any | None] | None = None,
        n_jobs: int | None = None,
    ) -> list[Complexes]:
        """Detect the PQRST complexes of several independent recordings.

        Args:
            recordings: Sequence of single-lead signals, or a 2D array with one
                recording per row
            times: Optional time base per recording. None uses sample numbers for all.
            n_jobs: Number of worker processes. Defaults to ``settings.n_jobs``.

        Returns:
            One Complexes record per recording, in input order

        Raises:
            InvalidParameterError: If ``times`` does not match ``recordings`` or
                any recording cannot be used
        """
        n_recordings = len(recordings)
        if times is None:
            times = [None] * n_recordings
        elif len(times) != n_recordings:
            raise InvalidParameterError(f"Got {len(times)} time bases for {n_recordings} recordings")

        if n_jobs is None:
            n_jobs = self.settings.n_jobs
        processes = utils.get_n_processes(n_jobs, n_recordings)
        pairs = list(zip(recordings, times))

        if processes == 1:
            return list(
                tqdm(
                    (self._detect_pair(pair) for pair in pairs),
                    total=n_recordings,
                    desc="PQRST detection",
                    unit="recording",
                    disable=n_recordings < 2,
                )
            )

        logger.info(f"Starting parallel detection with {processes} CPUs")
        with multiprocessing.Pool(processes=processes) as pool:
            return list(
                tqdm(
                    pool.imap(self._detect_pair, pairs),
                    total=n_recordings,
                    desc="PQRST detection",
                    unit="recording",
                )
            )


def _load_settings(settings: Settings | str | Path | None) -> Settings:
    if settings is None or settings == "default":
        return Settings()
    elif isinstance(settings, (str, Path)):
        try:
            return ConfigLoader.from_file(settings)
        except pydantic.ValidationError as e:
            raise InvalidParameterError(f"Invalid settings in {settings}: {e}") from e
    elif isinstance(settings, Settings):
        return settings
    raise TypeError(f"settings must be a Settings object, str, Path, or None, got {type(settings).__name__}")


def resolve_settings(
    settings: Settings | str | Path | None = None,
    r_threshold: float | None = None,
    heart_rate_hz: float | None = None,
) -> Settings:
    """Build the Settings for one call, applying keyword overrides.

    Args:
        settings: Settings object, path to a JSON/TOML config file, or None for defaults
        r_threshold: Overrides ``settings.detection.r_threshold`` if given
        heart_rate_hz: Overrides ``settings.detection.heart_rate_hz`` if given

    Raises:
        InvalidParameterError: If an override or the config file is invalid
        TypeError: If settings has an unsupported type
    """
    settings_obj = _load_settings(settings)
    overrides = {
        key: value
        for key, value in (("r_threshold", r_threshold), ("heart_rate_hz", heart_rate_hz))
        if value is not None
    }
    if not overrides:
        return settings_obj

    try:
        detection = DetectionSettings.model_validate({**settings_obj.detection.model_dump(), **overrides})
    except pydantic.ValidationError as e:
        raise InvalidParameterError(f"Invalid detection parameters {overrides}: {e}") from e
    return settings_obj.model_copy(update={"detection": detection})


def detect(
    ecg: Any,
    time: Any | None = None,
    r_threshold: float | None = None,
    heart_rate_hz: float | None = None,
    settings: Settings | str | Path | None = None,
) -> Complexes:
    """Detect the PQRST complexes of a single-lead ECG recording.

    This is the main high-level API. It resolves the settings once and runs
    the detection pipeline.

    Args:
        ecg: Samples of one lead, as a 1D array or a single row/column
        time: Sampling times matching ``ecg``. Defaults to sample numbers ``1..len(ecg)``.
        r_threshold: Minimum R-peak prominence. Defaults to 3 sample standard
            deviations of the signal.
        heart_rate_hz: Approximate heart rate in Hz. Defaults to 1.0.
        settings: Settings object, path to a JSON/TOML config file, or None.
            Keyword arguments take precedence over it.

    Returns:
        Complexes with one entry per beat, in R-peak order. Empty if no R peak was found.

    Raises:
        InvalidParameterError: If the heart rate is not positive, the signal is
            empty or the time base does not match the signal
        TypeError: If settings has an unsupported type
        FileNotFoundError: If settings is a path that doesn't exist

    Examples:
        # Sample numbers as time base, 1 Hz heart rate
        complexes = qrs_detect.detect(ecg)

        # Time base in seconds, 72 bpm, fixed threshold
        complexes = qrs_detect.detect(ecg, time=t, r_threshold=1.0, heart_rate_hz=1.2)
        rr_intervals = np.diff(complexes.r.times)

        # Load from config file
        complexes = qrs_detect.detect(ecg, settings="detection.toml")
    """
    settings_obj = resolve_settings(settings, r_threshold=r_threshold, heart_rate_hz=heart_rate_hz)
    return QRSDetector(settings_obj).detect(ecg, time)
