"""
Custom application-specific exceptions.
"""

class BaseAppException(Exception):
    """Base exception for the application."""
    pass

class ConfigurationError(BaseAppException):
    """Raised when server-side configuration (e.g. the AI credential) is missing or invalid."""
    pass

class RequestValidationError(BaseAppException):
    """Raised when the incoming request body cannot be turned into a GenerationRequest."""
    pass

class AIClientError(BaseAppException):
    """Raised for errors related to the AI client."""
    pass

class ParsingError(BaseAppException):
    """Raised when parsing AI output fails."""
    pass

class MissingCredentialError(ConfigurationError):
    """Raised when no usable API key is configured for the selected AI provider."""
    pass
