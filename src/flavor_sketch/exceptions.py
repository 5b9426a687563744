"""Custom exceptions for flavor-sketch."""


class FlavorSketchError(Exception):
    """Base exception for flavor-sketch."""

    pass


class ConfigurationError(FlavorSketchError):
    """Raised when the API key is missing."""

    pass


class GatewayError(FlavorSketchError):
    """Raised when a call to the generation API fails."""

    pass


class RateLimitError(GatewayError):
    """Raised when API rate limit is exceeded."""

    pass


class AuthenticationError(GatewayError):
    """Raised when the API rejects the configured key."""

    pass


class NoImageData(GatewayError):
    """Raised when an image response carries no inline image."""

    pass


class MalformedColorResponse(FlavorSketchError):
    """Raised when the color reply is not a 6-digit hex code."""

    pass


class MalformedTranslationResponse(FlavorSketchError):
    """Raised when the translation reply does not match the input shape."""

    pass
