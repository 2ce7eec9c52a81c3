from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Content type served by the health endpoint in every case, including "{}".
HEALTH_CONTENT_TYPE = "application/json"

# Tag attached to the synthetic process identity entries.
VERSION_TAG = "version"
