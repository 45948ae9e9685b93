"""qrs-detect: P, Q, R, S and T landmark detection in single-lead ECG recordings.

The detector finds R peaks by prominence, cuts a fixed window around each one
and searches every window for the Q and S troughs and the P and T peaks. It
works offline on a complete recording and returns one record per landmark with
the amplitude, time and sample index of every beat.
"""

from ._logging import logger, set_log_file, set_log_level
from .complexes import Complexes, WavePoints
from .config import ConfigLoader, DetectionSettings, Settings
from .core import QRSDetector, detect, resolve_settings
from .exceptions import (
    DegenerateSearchRangeError,
    InvalidParameterError,
    QRSDetectionError,
    WindowOutOfBoundsError,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "logger",
    "set_log_level",
    "set_log_file",
    "detect",
    "resolve_settings",
    "QRSDetector",
    "Complexes",
    "WavePoints",
    "Settings",
    "DetectionSettings",
    "ConfigLoader",
    "QRSDetectionError",
    "InvalidParameterError",
    "WindowOutOfBoundsError",
    "DegenerateSearchRangeError",
]


def __dir__():
    return __all__
