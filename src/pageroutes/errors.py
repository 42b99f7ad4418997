"""pageroutes exception hierarchy.

Shared across discovery, configuration, and rendering so every module
raises and catches the same types.
"""


class PageRoutesError(Exception):
    """Base for all pageroutes-specific errors."""


class ConfigurationError(PageRoutesError):
    """Raised when router configuration is invalid.

    Typically raised from ``RouterConfig.__post_init__`` or
    ``RouterConfig.from_mapping()``.
    """


class PagesDirectoryError(PageRoutesError, FileNotFoundError):
    """Raised when the pages directory does not exist or is not a directory.

    Subclasses ``FileNotFoundError`` so callers treating filesystem
    failures uniformly still catch it.
    """
