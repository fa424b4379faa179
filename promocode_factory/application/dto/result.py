"""Outcome of an application operation."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from promocode_factory.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")

STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATE: 400,
    ErrorKind.INVALID_INPUT: 400,
}


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Either the data produced by an operation or the domain error that
    stopped it.

    Expected failures (missing partner, inactive partner, bad input) are
    returned rather than raised, so callers can branch on them without
    exception handling. Use unwrap() at a boundary that maps exceptions.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[DomainException] = None

    @classmethod
    def ok(cls, data: T) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: DomainException) -> "OperationResult[T]":
        return cls(success=False, error=error)

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    @property
    def status_code(self) -> int:
        """HTTP status code matching the outcome."""
        if self.success:
            return 200
        return STATUS_CODES[self.error.kind]

    def unwrap(self) -> T:
        """Return the data, or raise the carried domain error."""
        if not self.success:
            raise self.error
        return self.data
