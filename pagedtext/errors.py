"""Exception hierarchy shared by the pagedtext pipeline."""

from __future__ import annotations


class PagedTextError(Exception):
    """Base class for errors raised by pagedtext."""


class RetrievalFailure(PagedTextError, RuntimeError):
    """Raised when the source text cannot be fetched or read."""


class MalformedDirective(PagedTextError, ValueError):
    """Raised when an ``image:`` directive carries a non-integer position.

    Attributes
    ----------
    line : str
        Raw directive line that failed to parse.
    line_number : int | None
        1-based position of the line in the source text, when known.
    """

    def __init__(self, message: str, *, line: str, line_number: int | None = None):
        super().__init__(message)
        self.line = line
        self.line_number = line_number


class ConfigError(PagedTextError, ValueError):
    """Raised when the document configuration is invalid or incomplete."""


__all__ = ["ConfigError", "MalformedDirective", "PagedTextError", "RetrievalFailure"]
