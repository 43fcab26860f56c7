"""Constants for versionmark CLI."""

# Default file locations
DEFAULT_CONFIG_FILE = ".versionmark.yaml"
CAPTURE_FILE_PREFIX = "versionmark"
DEFAULT_CAPTURE_PATTERN = f"{CAPTURE_FILE_PREFIX}-*.json"

# Timeouts (seconds)
CAPTURE_TIMEOUT = 60  # per version command
REGEX_TIMEOUT = 2.0  # per version regex match

DEFAULT_REPORT_DEPTH = 2
