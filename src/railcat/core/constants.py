"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_NAME_LENGTH = 255
MAX_SHORT_NAME_LENGTH = 50
MAX_COUNTRY_LENGTH = 100
MAX_NUMBER_LENGTH = 50
MAX_STATE_LENGTH = 100
MAX_URL_LENGTH = 2048
MAX_TAG_LENGTH = 100

# Pagination defaults
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Token settings
DEFAULT_PERMISSIONS_CLAIM = "permissions"
LEGACY_SUBJECT_CLAIM = "id"
# Legacy issuers write exp in milliseconds; larger values are read as such
MILLISECOND_TIMESTAMP_THRESHOLD = 10**11

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Request tracing
REQUEST_ID_HEADER = "X-Request-ID"

# Paths the access log skips
UNLOGGED_PATH_PREFIXES = ("/health/", "/docs", "/redoc", "/openapi.json")
