"""Exceptions raised by lambert_rtx."""


class SceneError(ValueError):
    """Raised when a scene description is malformed."""
