"""Exceptions raised while decoding YAML front matter."""

from __future__ import annotations

from typing import Literal, Optional

DecodeErrorKind = Literal["yaml", "validation"]


class FrontMatterError(ValueError):
    """Base class for front matter failures."""


class FrontMatterDecodeError(FrontMatterError):
    """Raised when the metadata block is not valid YAML or does not fit the target type."""

    def __init__(self, message: str, *, kind: DecodeErrorKind, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.cause = cause


__all__ = ["DecodeErrorKind", "FrontMatterError", "FrontMatterDecodeError"]
