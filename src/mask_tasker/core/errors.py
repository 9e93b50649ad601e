"""Exceptions raised while loading data files."""

from __future__ import annotations

from typing import Optional


class ScoresError(Exception):
    """Base class for data-file errors."""


class LoadError(ScoresError):
    """The resource could not be fetched or the server answered with a non-OK status."""

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(ScoresError):
    """The resource was fetched but is not valid JSON or does not match the expected shape."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url
