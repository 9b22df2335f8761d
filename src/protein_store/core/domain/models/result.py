#!/usr/bin/env python3
# src/protein_store/core/domain/models/result.py

"""
Domain model for the outcome of operations that can fail without raising.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Enumeration of recoverable failure reasons."""

    INVALID_INDEX = auto()
    IO_FAILURE = auto()
    PARSE_FAILURE = auto()


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a computed value or a typed failure.

    Exactly one of ``value`` and ``error`` is meaningful: a result with
    ``error`` set carries no value, even if the value would have been 0.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Result[T]":
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        """True when the operation produced a value."""
        return self.error is None
