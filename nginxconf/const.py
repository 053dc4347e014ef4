"""
Application constants and metadata.
"""

# Application info
APP_NAME = "nginxconf"
APP_VERSION = "0.1.0"

# Default values
DEFAULT_MAX_DEPTH = 200
DEFAULT_FILENAME = "<string>"
INDENT = "\t"
