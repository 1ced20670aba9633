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


class EnumResponseKey(str, Enum):
    """Status keys carried by every response envelope."""

    SUCCESS = "Success"
    CREATED = "Created"
    DATA_NOT_FOUND = "Data Not Found"
    UNKNOWN_ERROR = "Unknown Error"
    INVALID_REQUEST = "Invalid Request"
    UNAUTHORIZED = "Unauthorized"
    SERVER_ERROR = "Server Error"


DEFAULT_ROLE = "Manager"

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
ALLOWED_PAGE_LIMITS = (5, 10, 20, 50)

DEFAULT_TEST_QUESTIONS = 10
