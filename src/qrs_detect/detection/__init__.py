"""Detection stages: R peaks, beat windows and sub-peaks."""

from .parameters import DetectionParameters, as_single_lead, resolve_time_base
from .rpeaks import find_r_peaks
from .subpeaks import locate_beat, locate_subpeaks, map_to_time, to_sample_indices
from .windows import BeatWindows, beat_window, build_windows, check_window_bounds, window_extent

__all__ = [
    "BeatWindows",
    "DetectionParameters",
    "as_single_lead",
    "beat_window",
    "build_windows",
    "check_window_bounds",
    "find_r_peaks",
    "locate_beat",
    "locate_subpeaks",
    "map_to_time",
    "resolve_time_base",
    "to_sample_indices",
    "window_extent",
]
