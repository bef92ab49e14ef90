"""
Constants for culinary_contacts package.

Centralizes magic numbers and configuration defaults.
"""

# External APIs
HUNTER_DOMAIN_SEARCH_URL = "https://api.hunter.io/v2/domain-search"
SEARCH_API_URL = "https://www.searchapi.io/api/v1/search"
HUNTER_RESULT_LIMIT = 10  # Contacts requested per domain-search call

# Timeouts and pacing (seconds)
API_TIMEOUT_SECONDS = 30.0
REQUEST_DELAY_SECONDS = 1.0  # Fixed pause before every external call
RATE_LIMIT_COOLDOWN_SECONDS = 10.0  # Pause after an HTTP 429

# Cache
CACHE_TTL_DAYS = 30
CACHE_SNAPSHOT_KEY = "company-cache-data"
DEFAULT_CACHE_DIR = "data/cache"

# Export
EXPORT_BATCH_SIZE = 5  # Flush to the sink every N processed listings
MAX_CONTACTS_PER_JOB = 3
MAX_CELL_LENGTH = 50

# Contact scoring (lower is better)
INVALID_CONTACT_SCORE = 1000
BASE_CONTACT_SCORE = 500
GENERIC_EMAIL_PENALTY = 200
PERSONAL_EMAIL_BONUS = 100
NAMED_CONTACT_BONUS = 50
UNNAMED_CONTACT_PENALTY = 50
PERSONAL_TYPE_BONUS = 75
GENERIC_TYPE_PENALTY = 25

# Placeholder values used by the provider and the export
NOT_AVAILABLE = "N/A"
UNKNOWN_NAME = "Unknown"
EXCLUDED_NAME = "Excluded"

# Strategy source tags (cache keys and contact attribution)
PRIMARY_DOMAIN_TAG = "primary_domain"
PRIMARY_NAME_TAG = "primary_name"
FALLBACK_LOCATION_TAG = "location"
PARENT_DOMAIN_TAG = "parent_domain"
ADDRESS_TAG_PREFIX = "address_"

# Tags for lookups that returned nothing
RATE_LIMITED_TAG = "rate_limited"
NO_API_KEY_TAG = "no_api_key"
ERROR_TAG = "error"
EXCLUDED_TAG = "excluded"
