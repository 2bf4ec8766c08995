from __future__ import annotations

from typing import Optional

from confusables_db.codepoints import format_codepoint


class ConfusablesError(Exception):
    """Base class for all errors raised by confusables_db."""


class LoadError(ConfusablesError):
    """A record set could not be turned into a Database."""

    def __init__(
        self,
        message: str,
        *,
        codepoint: Optional[int] = None,
        index: Optional[int] = None,
    ) -> None:
        self.codepoint = codepoint
        self.index = index
        if index is not None:
            message = f"{message} (record {index})"
        super().__init__(message)


class DeserializationError(LoadError):
    pass


class EmptyTargetError(LoadError):
    def __init__(self, source: int, *, index: Optional[int] = None) -> None:
        super().__init__(
            f"empty target for source {format_codepoint(source)}",
            codepoint=source,
            index=index,
        )


class DuplicateSourceError(LoadError):
    def __init__(self, source: int, *, index: Optional[int] = None) -> None:
        super().__init__(
            f"duplicate mapping for source {format_codepoint(source)}",
            codepoint=source,
            index=index,
        )


class InvalidSourceCodepointError(LoadError):
    def __init__(self, source: int, *, index: Optional[int] = None) -> None:
        super().__init__(
            f"invalid unicode source codepoint: {format_codepoint(source)}",
            codepoint=source,
            index=index,
        )


class InvalidTargetCodepointError(LoadError):
    def __init__(
        self, target: int, *, source: Optional[int] = None, index: Optional[int] = None
    ) -> None:
        self.source = source
        message = f"invalid unicode target codepoint: {format_codepoint(target)}"
        if source is not None:
            message += f" for source {format_codepoint(source)}"
        super().__init__(message, codepoint=target, index=index)


class GeneratorError(ConfusablesError):
    """The upstream confusables.txt could not be retrieved or converted."""


class ParseError(GeneratorError):
    def __init__(self, message: str, *, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


__all__ = [
    "ConfusablesError",
    "DeserializationError",
    "DuplicateSourceError",
    "EmptyTargetError",
    "GeneratorError",
    "InvalidSourceCodepointError",
    "InvalidTargetCodepointError",
    "LoadError",
    "ParseError",
]
