"""Error taxonomy shared by scanners, mutators and the outer surfaces."""

from __future__ import annotations


class DesignToolsError(Exception):
    """Base class for every failure the scan/mutate engine reports."""

    kind = "error"


class NotFoundError(DesignToolsError):
    """A selector, variable, token path or class identifier is absent."""

    kind = "not_found"


class AmbiguousError(DesignToolsError):
    """An identifier matches more than one candidate and nothing narrows it."""

    kind = "ambiguous"

    def __init__(self, message: str, count: int) -> None:
        super().__init__(message)
        self.count = count


class InvalidPathError(DesignToolsError, ValueError):
    """Empty, absolute, or root-escaping file path."""

    kind = "invalid_path"


class UnparsableError(DesignToolsError, ValueError):
    """A shadow or class value does not have the minimal expected shape."""

    kind = "unparsable"
