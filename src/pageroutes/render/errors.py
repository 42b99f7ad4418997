"""Render layer error hierarchy."""

from pageroutes.errors import PageRoutesError


class RenderError(PageRoutesError):
    """Base for all pageroutes.render errors."""


class RenderNotInstalledError(RenderError):
    """Raised when kida is not installed."""
