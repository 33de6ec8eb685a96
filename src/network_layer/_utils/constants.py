# Environment variables
ENV_REQUEST_TIMEOUT = "NETWORK_LAYER_REQUEST_TIMEOUT"
ENV_RAISE_FOR_STATUS = "NETWORK_LAYER_RAISE_FOR_STATUS"
ENV_TRUST_ENV = "NETWORK_LAYER_TRUST_ENV"

# Files
DOTENV_FILE = ".env"

# Headers
HEADER_CACHE_CONTROL = "Cache-Control"

# Defaults
DEFAULT_REQUEST_TIMEOUT = 30.0

LOGGER_NAME = "network_layer"
