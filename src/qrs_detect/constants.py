"""Constants for PQRST detection."""

# Landmark names in temporal order within a beat
LANDMARKS = ("P", "Q", "R", "S", "T")

# Per-landmark fields exposed by the result records
LANDMARK_FIELDS = ("amplitude", "time", "index")

# Approximate heart rate assumed when none is given (Hz)
DEFAULT_HEART_RATE_HZ = 1.0

# Fraction of the nominal beat period used to size the beat window
PERIOD_MARGIN = 0.8

# Fraction of the samples per beat required between two R peaks
SEPARATION_FACTOR = 0.8

# Default R threshold is this many sample standard deviations of the signal
THRESHOLD_STD_FACTOR = 3.0
