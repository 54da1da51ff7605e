"""Exceptions raised while reporting results to the ingress API."""


class ReporterError(Exception):
    """Base class for all reporter failures."""


class ConfigurationError(ReporterError, ValueError):
    """Endpoint or API key is missing."""


class InvalidInputError(ReporterError, ValueError):
    """A command-line value failed local validation."""


class IngressTransportError(ReporterError, RuntimeError):
    """The request could not be delivered to the ingress API."""


class IngressRejectedError(ReporterError, RuntimeError):
    """The ingress API answered with something other than a created status."""

    def __init__(self, status_code: int, detail: str | None, message: str) -> None:
        """Initialize with the HTTP status and the server-provided detail."""
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
