"""Constants used across the package."""

# Significant decimal digits beyond which rounding cannot alter a float.
FLOAT_DIGITS = 17

# Name of the pandas Series and DataFrame accessor.
ACCESSOR_NAME = "rounding"
