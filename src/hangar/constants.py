"""
Global constants for the hangar CLI.
"""

# Default team a target points at
DEFAULT_TEAM = "main"

# API constants
API_PREFIX = "/api/v1"
TEAM_PATH = API_PREFIX + "/teams/{team}"
PIPELINE_CONFIG_PATH = API_PREFIX + "/teams/{team}/pipelines/{pipeline}/config"
CONFIG_VERSION_HEADER = "X-Concourse-Config-Version"
DEFAULT_REQUEST_TIMEOUT = 30.0

# HTTP Headers
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Keyring service template for target tokens
TOKEN_SERVICE_TEMPLATE = "hangar:{target}:token"

# Logging constants
LOG_APP_NAME = "hangar"
LOG_FILE_NAME = "hangar"
LOG_RETENTION_DAYS = 7
LOG_LINES_TO_SHOW = 20

# Marker written in place of sensitive values
REDACTION_MARKER = "<redacted>"

# Field-name fragments treated as sensitive when rendering diffs.
# Matching is case-sensitive, so common casings are listed explicitly.
SENSITIVE_FIELD_PATTERNS = (
    "password", "Password", "PASSWORD",
    "secret", "Secret", "SECRET",
    "token", "Token", "TOKEN",
    "private_key", "privateKey", "PRIVATE_KEY",
    "api_key", "apiKey", "API_KEY",
    "credential", "Credential", "CREDENTIAL",
)

# Sensitive data keys for log sanitization (matched case-insensitively)
SENSITIVE_KEYS = (
    "password", "token", "access_token", "refresh_token", "secret",
    "client_secret", "private_key", "authorization", "x-api-key", "api_key",
    "bearer", "cookie", "credential",
)
