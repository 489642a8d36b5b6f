from .base import ApplicationError, ErrorCode, ErrorLevel
from .config import Configuration, Settings, get_configuration
from .errors import ConfigurationError, NoSendHandlerError
