"""
Custom exceptions for termhyo.

The width engine never raises; these errors come from the table layer
(rendering lifecycle) and from configuration loading.
"""


class TermhyoError(Exception):
    """Base exception class for all termhyo errors."""
    pass


class NoColumnsError(TermhyoError):
    """Raised when rendering a table that has no columns defined."""

    def __init__(self, message: str = "no columns defined"):
        super().__init__(message)


class TableAlreadyRenderedError(TermhyoError):
    """Raised when render() is called on a table that was already rendered."""

    def __init__(self, message: str = "table has already been rendered"):
        super().__init__(message)


class AddAfterRenderError(TermhyoError):
    """Raised when adding a row to a table after it has been rendered."""

    def __init__(self, message: str = "cannot add row after table has been rendered"):
        super().__init__(message)


class NoMarkdownHeaderError(TermhyoError):
    """Raised when a Markdown table has no non-empty header title."""

    def __init__(self, message: str = "markdown table requires at least one non-empty header"):
        super().__init__(message)


class ConfigError(TermhyoError, ValueError):
    """Exception raised when a configuration file holds invalid values."""

    def __init__(self, message: str, path: str = None, key: str = None):
        super().__init__(message)
        self.path = path
        self.key = key

    def __str__(self):
        base_msg = super().__str__()
        if self.key:
            base_msg += f" (Key: {self.key})"
        if self.path:
            base_msg += f" (Path: {self.path})"
        return base_msg
