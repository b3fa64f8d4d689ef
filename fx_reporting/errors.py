"""Error types raised while building instructions."""
from __future__ import annotations


class InstructionError(Exception):
    """Base class for instruction construction failures."""


class InvalidArgumentError(InstructionError, ValueError):
    """A single field value violates its constraint."""

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidStateError(InstructionError, RuntimeError):
    """The accumulated fields do not form a valid instruction."""

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


class InstructionFileError(InstructionError):
    """An instruction file could not be read or contains an invalid record."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
