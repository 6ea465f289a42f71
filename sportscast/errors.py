class ForecastError(Exception):
    """Base class for every error raised by the forecast pipeline."""


class MissingCredentialError(ForecastError):
    """The upstream API key is not configured. Fatal at startup."""


class InvalidLocationError(ForecastError):
    """The request did not carry a usable location."""


class UpstreamError(ForecastError):
    """Transport, auth or timeout failure while talking to the model provider."""


class SchemaMismatchError(ForecastError):
    """Model output does not match the forecast schema, even after repair."""
