"""
Central constants for the artifact relay package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

import os
import tempfile

# ============================================================================
# Destination Keys
# ============================================================================

# Key strategies for the destination object
KEY_STRATEGY_GENERATED = "generated"
KEY_STRATEGY_FIXED = "fixed"
KEY_STRATEGIES = [KEY_STRATEGY_GENERATED, KEY_STRATEGY_FIXED]

# File name used when the source URL path has no usable basename
DEFAULT_ARTIFACT_NAME = "release.zip"

# Length of the random suffix in generated keys (hex characters)
GENERATED_KEY_RANDOM_LENGTH = 12

# ============================================================================
# Credential Cache
# ============================================================================

# Default cache slot for the destination credential file
DEFAULT_CREDENTIAL_CACHE_KEY = "destination-credentials.json"

# Base directory for ephemeral working files (e.g. /tmp in a function runtime)
DEFAULT_WORK_DIR = os.path.join(tempfile.gettempdir(), "artifact-relay")

DEFAULT_CACHE_DIR = os.path.join(DEFAULT_WORK_DIR, "credentials")
DEFAULT_DOWNLOAD_DIR = os.path.join(DEFAULT_WORK_DIR, "downloads")

# Permissions for cached credential files (owner read/write only)
CACHE_FILE_MODE = 0o600

# ============================================================================
# HTTP Constants
# ============================================================================

# Default timeout for artifact downloads (seconds), sized for large releases
DEFAULT_HTTP_TIMEOUT = 300.0

# Connect timeout (seconds)
DEFAULT_CONNECT_TIMEOUT = 10.0

# Streaming chunk sizes (bytes)
MIN_CHUNK_SIZE = 8192
MAX_CHUNK_SIZE = 65536

# URL schemes accepted as artifact sources
REMOTE_URL_SCHEMES = ("http://", "https://")

# Object store URI scheme for credential sources
OBJECT_URI_SCHEME = "s3://"

# ============================================================================
# Email Delivery
# ============================================================================

MAILGUN_API_BASE_URL = "https://api.mailgun.net/v3"

# Display name used in the From header
NOTIFY_SENDER_NAME = "Artifact Relay"

NOTIFY_SUBJECT_SUCCESS = "Download Status: Complete"
NOTIFY_SUBJECT_FAILURE = "Download Status: Failed"

# ============================================================================
# Outcome and Audit
# ============================================================================

AUDIT_STATUS_SUCCESS = "Success"
AUDIT_STATUS_ERROR = "Error"

HTTP_STATUS_OK = 200
HTTP_STATUS_SERVER_ERROR = 500

# HTTP status code groups used for log messages
HTTP_CLIENT_ERROR_MIN = 400
HTTP_CLIENT_ERROR_MAX = 499
HTTP_SERVER_ERROR_MIN = 500
HTTP_SERVER_ERROR_MAX = 599

RESULT_MESSAGE_SUCCESS = "Download and email notification complete."
RESULT_MESSAGE_FAILURE = "An error occurred"

# ============================================================================
# Exit Codes
# ============================================================================

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_USER_INTERRUPT = 130  # User pressed Ctrl+C

# ============================================================================
# Logging
# ============================================================================

# Map LOG_LEVEL names to setup_logging verbosity
LOG_LEVEL_VERBOSITY = {
    "WARNING": 0,
    "INFO": 1,
    "DEBUG": 2,
    "TRACE": 3,
}
