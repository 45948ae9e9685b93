"""Result records for detected PQRST complexes."""

from typing import Literal, Self

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import LANDMARK_FIELDS, LANDMARKS
from .types import ECGSignal, Landmark, TimeBase

LandmarkField = Literal["amplitude", "time", "index"]


class WavePoints(BaseModel):
    """Amplitude, time and sample index of one landmark for every beat.

    All three lists have one entry per beat, in beat order.

    Attributes:
        amplitudes: Signal value at the landmark
        times: Time of the landmark in the caller's time base
        indices: Zero-based sample index of the landmark
    """

    model_config = ConfigDict(frozen=True)

    amplitudes: list[float] = Field(default_factory=list)
    times: list[float] = Field(default_factory=list)
    indices: list[int] = Field(default_factory=list)

    @field_validator("amplitudes", "times", "indices", mode="before")
    @classmethod
    def convert_to_list(cls, v: list | np.ndarray) -> list:
        """Accept numpy arrays as well as lists."""
        return np.asarray(v).tolist()

    @model_validator(mode="after")
    def validate_consistent_lengths(self) -> Self:
        lengths = {len(self.amplitudes), len(self.times), len(self.indices)}
        if len(lengths) > 1:
            raise ValueError(
                f"Inconsistent lengths: {len(self.amplitudes)} amplitudes, "
                f"{len(self.times)} times, {len(self.indices)} indices"
            )
        return self

    def __len__(self) -> int:
        return len(self.amplitudes)

    @property
    def pairs(self) -> list[tuple[float, float]]:
        """(amplitude, time) per beat."""
        return list(zip(self.amplitudes, self.times))


class Complexes(BaseModel):
    """Detected P, Q, R, S and T landmarks, one entry per beat.

    Beats are ordered by R-peak position. An empty record means that no R peak
    was found in the signal (or none of them produced a complete beat).

    Examples:
        >>> complexes = qrs_detect.detect(ecg, heart_rate_hz=1.2)
        >>> complexes.r.times  # R-peak times
        >>> complexes.to_dataframe()  # one row per beat
    """

    model_config = ConfigDict(frozen=True)

    p: WavePoints = Field(default_factory=WavePoints)
    q: WavePoints = Field(default_factory=WavePoints)
    r: WavePoints = Field(default_factory=WavePoints)
    s: WavePoints = Field(default_factory=WavePoints)
    t: WavePoints = Field(default_factory=WavePoints)

    @model_validator(mode="after")
    def validate_consistent_beats(self) -> Self:
        """Ensure all landmarks cover the same beats."""
        lengths = {name: len(self.landmark(name)) for name in LANDMARKS}
        if len(set(lengths.values())) > 1:
            raise ValueError(f"Inconsistent number of beats per landmark: {lengths}")
        return self

    @classmethod
    def empty(cls) -> "Complexes":
        """Record with no beats."""
        return cls()

    @classmethod
    def from_indices(cls, ecg: ECGSignal, time: TimeBase, indices: np.ndarray) -> "Complexes":
        """Build the record from absolute sample indices.

        Args:
            ecg: Signal the indices refer to
            time: Sampling times of the signal
            indices: Sample indices with shape (n_beats, 5), columns in P, Q, R, S, T order
        """
        fields = {
            name.lower(): WavePoints(
                amplitudes=ecg[indices[:, col]],
                times=time[indices[:, col]],
                indices=indices[:, col],
            )
            for col, name in enumerate(LANDMARKS)
        }
        return cls(**fields)

    @property
    def n_beats(self) -> int:
        return len(self.r)

    @property
    def is_empty(self) -> bool:
        return self.n_beats == 0

    def __len__(self) -> int:
        return self.n_beats

    def landmark(self, name: Landmark | str) -> WavePoints:
        """Get the record of one landmark by name ('P' ... 'T', any case)."""
        key = name.upper()
        if key not in LANDMARKS:
            raise KeyError(f"Unknown landmark '{name}'. Expected one of {list(LANDMARKS)}")
        return getattr(self, key.lower())

    def get_array(self, name: Landmark | str, field: LandmarkField = "time") -> np.ndarray:
        """Get one landmark field as a numpy array.

        Examples:
            >>> rr = np.diff(complexes.get_array("R", "time"))
            >>> q_idx = complexes.get_array("Q", "index")
        """
        points = self.landmark(name)
        if field == "amplitude":
            return np.array(points.amplitudes, dtype=float)
        elif field == "time":
            return np.array(points.times, dtype=float)
        elif field == "index":
            return np.array(points.indices, dtype=np.intp)
        raise ValueError(f"Unknown field '{field}'. Expected one of {list(LANDMARK_FIELDS)}")

    def to_dataframe(self) -> pd.DataFrame:
        """One row per beat with ``{landmark}_{field}`` columns, e.g. ``R_time``."""
        data = {
            f"{name}_{field}": self.get_array(name, field) for name in LANDMARKS for field in LANDMARK_FIELDS
        }
        return pd.DataFrame(data)
