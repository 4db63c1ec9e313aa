from __future__ import annotations

from typing import Any


class DocumentError(ValueError):
    """Base error for Brazilian document parsing."""


class FormatError(DocumentError):
    """Input does not hold a valid document of the requested kind."""

    def __init__(self, document: str, value: Any) -> None:
        self.document = document
        self.value = value
        super().__init__(f"Invalid {document}: {value!r}")


class NullOrMissingInputError(DocumentError):
    """Entry point received no input at all."""

    def __init__(self, document: str) -> None:
        self.document = document
        super().__init__(f"{document} value is required")


class InvalidArgumentError(DocumentError):
    """Unknown document kind or out of range request argument."""
