"""
System constants that should never change.

These are technical/unit limits, not user preferences.
User-configurable values should go in config.yaml instead.
"""

# Unit conversion
BYTES_PER_MB = 1024 * 1024  # Binary megabyte used for all size estimates
SECONDS_PER_MINUTE = 60
SIZE_DECIMALS = 2  # Estimated sizes are rounded for display

# Logging
VERBOSE_LOGGING_THRESHOLD = 2  # -vv switches on logger names and DEBUG

# Defaults used when config.yaml is absent or incomplete
DEFAULT_PLATFORM = "generic"
DEFAULT_RECORDING_TYPE = "meeting"
DEFAULT_CONFIG_FILENAME = "config.yaml"
