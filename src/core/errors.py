# core/errors.py


class RaytracerError(Exception):
    """Base class for all errors raised by the renderer."""


class ConfigurationError(RaytracerError, ValueError):
    """
    Invalid render settings, camera parameters or scene description.

    Raised before any rendering work starts.
    """


class RenderError(RaytracerError, RuntimeError):
    """A work unit failed, so no pixel buffer is produced."""
