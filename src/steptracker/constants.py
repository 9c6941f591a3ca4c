"""
Constants for step and calorie calculations.

Physiological coefficients, unit factors and defaults shared by the parser,
the metrics calculator and the command-line interface.
"""

# Estimated step length as a fraction of body height
STRIDE_COEFFICIENT = 0.45

# Walking burns half of what the running formula gives for the same speed and time
WALKING_CALORIES_COEFFICIENT = 0.5

M_IN_KM = 1000
MIN_IN_H = 60
SEC_IN_MIN = 60
SEC_IN_H = 3600

# Step counts are bounded like a signed 64-bit integer
MAX_STEPS = 2**63 - 1

# Default body profile used when neither arguments nor environment provide one
DEFAULT_WEIGHT_KG = 75.0
DEFAULT_HEIGHT_M = 1.75
DEFAULT_LOG_LEVEL = "WARNING"

# Record layouts: number of comma-separated fields
DAY_LAYOUT = 2
TRAINING_LAYOUT = 3
RECORD_LAYOUTS = (DAY_LAYOUT, TRAINING_LAYOUT)

# Duration unit suffixes in seconds
DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

# Accepted activity labels (lower-cased) mapped to activity names
ACTIVITY_MAPPING = {
    "running": "running",
    "бег": "running",
    "walking": "walking",
    "ходьба": "walking",
}
