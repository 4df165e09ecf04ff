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


class EnumStylePreference(str, Enum):
    """Homepage styles offered by the builder service."""

    MODERN = "modern"
    PROFESSIONAL = "professional"
    MINIMAL = "minimal"
    BOLD = "bold"
    CLASSIC = "classic"


BEARER_SCHEME = "Bearer"
WORKFLOW_ID_PREFIX = "workflow"
SCREENSHOT_FORMAT = "png"
SCREENSHOT_VIEWPORT = "desktop"
