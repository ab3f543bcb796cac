from __future__ import annotations

from typing import Any


class BlueprintError(Exception):
    """Base class for all landing blueprint errors."""


class GenerationFailure(BlueprintError):
    """A generation or regeneration call produced no usable result."""


class EmptyResponseError(GenerationFailure):
    def __init__(self, message: str = "Empty response from model") -> None:
        super().__init__(message)


class UnparseableResponseError(GenerationFailure):
    def __init__(self, raw_text: str) -> None:
        super().__init__("Invalid JSON returned by model")
        self.raw_text = raw_text


class InvalidResponseError(GenerationFailure):
    """Parsed JSON that does not satisfy the blueprint or section shape."""

    def __init__(self, reason: str, *, payload: Any = None) -> None:
        super().__init__(f"Model response does not match the expected shape: {reason}")
        self.reason = reason
        self.payload = payload


class MissingCredentialError(BlueprintError):
    pass


class SectionNotFoundError(BlueprintError):
    def __init__(self, section_id: str) -> None:
        super().__init__(f"Section not found: {section_id}")
        self.section_id = section_id


class SectionLockedError(BlueprintError):
    def __init__(self, section_id: str) -> None:
        super().__init__(f"Section is locked: {section_id}")
        self.section_id = section_id


__all__ = [
    "BlueprintError",
    "EmptyResponseError",
    "GenerationFailure",
    "InvalidResponseError",
    "MissingCredentialError",
    "SectionLockedError",
    "SectionNotFoundError",
    "UnparseableResponseError",
]
