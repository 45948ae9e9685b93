"""Type definitions for ECG data structures."""

from typing import Annotated, Literal, TypeAlias

import numpy as np
import numpy.typing as npt

# Single-lead ECG trace, shape (n_timepoints,)
ECGSignal: TypeAlias = Annotated[
    npt.NDArray[np.floating],
    "Shape: (n_timepoints,)",
]

# Sampling times matching an ECGSignal, strictly increasing, shape (n_timepoints,)
TimeBase: TypeAlias = Annotated[
    npt.NDArray[np.floating],
    "Shape: (n_timepoints,)",
]

# Sample indices into an ECGSignal
SampleIndices: TypeAlias = npt.NDArray[np.intp]

Landmark = Literal["P", "Q", "R", "S", "T"]
