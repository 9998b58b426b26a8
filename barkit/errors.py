"""
Error taxonomy for encoding and rendering.

Hierarchy:
    BarkitError
    ├── EncodeError
    │   └── ValidationError
    │       ├── InvalidLength
    │       └── InvalidCharacter
    └── GenerateError
        ├── InvalidDimension
        └── WriteError

Validation errors are subclasses of EncodeError, so callers of ``encode``
can catch either the broad or the specific type.
"""

__all__ = [
    "BarkitError",
    "EncodeError",
    "ValidationError",
    "InvalidLength",
    "InvalidCharacter",
    "GenerateError",
    "InvalidDimension",
    "WriteError",
]


class BarkitError(Exception):
    """Base class for all barkit errors."""


class EncodeError(BarkitError):
    """A payload could not be turned into a module pattern."""


class ValidationError(EncodeError):
    """A payload was rejected before encoding."""

    def __init__(self, message: str, payload: str, symbology: str):
        super().__init__(message)
        self.payload = payload
        self.symbology = symbology


class InvalidLength(ValidationError):
    """Payload length is outside what the symbology accepts."""

    def __init__(self, payload: str, symbology: str, expected: str):
        super().__init__(
            f"{symbology} payload has length {len(payload)}, expected {expected}",
            payload,
            symbology,
        )
        self.length = len(payload)
        self.expected = expected


class InvalidCharacter(ValidationError):
    """Payload contains a character outside the symbology alphabet."""

    def __init__(self, payload: str, symbology: str, character: str, position: int):
        super().__init__(
            f"Invalid character {character!r} at position {position} for {symbology}",
            payload,
            symbology,
        )
        self.character = character
        self.position = position


class GenerateError(BarkitError):
    """A module pattern could not be rendered."""


class InvalidDimension(GenerateError, ValueError):
    """Height, module width or image size is out of range."""


class WriteError(GenerateError):
    """The output sink refused the rendered bytes."""
