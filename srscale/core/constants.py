"""
Constants for srscale.

Central location for file-format details and default values.
"""

# ============================================================
# EXPORT FORMAT
# ============================================================
# The normalized dataset and bounds file are consumed by existing
# symbolic-regression tooling, so these must not change.

# Separator between values of a normalized dataset row
DATA_DELIMITER = ","

# Separator between min and max on a bounds line
BOUNDS_DELIMITER = " "

LINE_TERMINATOR = "\n"

FILE_ENCODING = "utf-8"

# Double.toString switches to scientific notation outside [1e-3, 1e7)
DECIMAL_NOTATION_MIN = 1e-3
DECIMAL_NOTATION_MAX = 1e7

# ============================================================
# DEFAULTS
# ============================================================

DEFAULT_CSV_DELIMITER = ","

DEFAULT_DATA_SUFFIX = "_normalized.csv"
DEFAULT_BOUNDS_SUFFIX = "_bounds.txt"

# Prefix for temporary files used by atomic writes
TEMP_FILE_PREFIX = ".srscale-"

# Relative tolerance used when checking round-trip reconstruction
ROUND_TRIP_RTOL = 1e-9
