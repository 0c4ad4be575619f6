"""
Centralized constants for the RadarCol contract pipeline.

Import from here instead of redefining in services or routers.
"""

# Result-size cap accepted by the upstream list endpoint
MIN_RESULT_LIMIT = 1
MAX_RESULT_LIMIT = 100

# Title searches shorter than this are not sent upstream
MIN_TITLE_LENGTH = 3

# Page size used when the caller does not pick one
DEFAULT_PAGE_SIZE = 10

# Upstream request timeout in seconds
DEFAULT_TIMEOUT_SECONDS = 10.0

DEFAULT_API_BASE_URL = "https://radarcol-model-api.onrender.com"
CONTRACTS_ENDPOINT = "/contracts"
ANALYSIS_ENDPOINT_TEMPLATE = "/contracts/{id}/analysis"

# Upstream risk labels -> internal tier. Keys are lowercase.
RISK_LEVEL_LABELS = {
    "alto": "high",
    "medio": "medium",
    "bajo": "low",
    "high": "high",
    "medium": "medium",
    "low": "low",
}

# Tier used when an upstream label is not recognised (non-strict mode)
FALLBACK_RISK_LEVEL = "low"
