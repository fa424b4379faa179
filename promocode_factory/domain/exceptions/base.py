"""Base domain exception."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of expected, caller-recoverable failures."""

    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    INVALID_INPUT = "invalid_input"


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    kind: ErrorKind = ErrorKind.INVALID_STATE

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
