"""Pydantic models for configuration."""

import pydantic
from pydantic import BaseModel, Field

from ..constants import DEFAULT_HEART_RATE_HZ, PERIOD_MARGIN, SEPARATION_FACTOR, THRESHOLD_STD_FACTOR


class DetectionSettings(BaseModel):
    """Settings for the PQRST detection pipeline.

    Attributes:
        heart_rate_hz: Approximate heart rate in Hz. Sizes the beat window and
            the minimum R-R separation. Must be positive.
        r_threshold: Minimum prominence of an R peak, in signal units. The value
            is floored before use. If None, ``threshold_std_factor`` times the
            sample standard deviation of the signal is used.
        period_margin: Fraction of the nominal beat period ``1 / heart_rate_hz``
            taken as the beat period.
        separation_factor: Fraction of the samples per beat required between
            two R peaks.
        threshold_std_factor: Multiplier of the signal standard deviation for the
            default R threshold.

    Examples:
        # Defaults: 1 Hz heart rate, threshold from signal spread
        settings = DetectionSettings()

        # 72 bpm with a fixed threshold
        settings = DetectionSettings(heart_rate_hz=1.2, r_threshold=2.0)
    """

    model_config = pydantic.ConfigDict(validate_assignment=True)

    heart_rate_hz: float = Field(default=DEFAULT_HEART_RATE_HZ, gt=0, allow_inf_nan=False)
    r_threshold: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    period_margin: float = Field(default=PERIOD_MARGIN, gt=0, le=1)
    separation_factor: float = Field(default=SEPARATION_FACTOR, gt=0, le=1)
    threshold_std_factor: float = Field(default=THRESHOLD_STD_FACTOR, gt=0)


class Settings(BaseModel):
    """Complete settings for PQRST detection.

    Args:
        detection: Detection pipeline settings
        n_jobs: Number of worker processes used by batch detection.
            -1 or None uses all CPUs, values below -1 leave ``|n_jobs| - 1``
            CPUs free.

    Examples:
        settings = Settings()
        settings.detection.heart_rate_hz = 1.5

        settings = Settings(detection={"heart_rate_hz": 1.2}, n_jobs=-1)
    """

    model_config = pydantic.ConfigDict(validate_assignment=True)

    detection: DetectionSettings = Field(default_factory=DetectionSettings)
    n_jobs: int | None = 1
