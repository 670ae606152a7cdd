from __future__ import annotations


class TransportError(RuntimeError):
    """The generation service could not be reached or answered with a failure status."""

    user_message = "Failed to communicate with the AI service."


class ResponseFormatError(ValueError):
    """The reply text could not be parsed into the beautify result shape."""

    user_message = "The AI returned an invalid response format. Please try again."


class ConfigurationError(ValueError):
    """Required setup is missing or invalid. Raised at startup, never per request."""
