"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, ErrorKind
from .partner import (
    ActiveLimitNotFoundException,
    InvalidLimitException,
    PartnerLimitNotFoundException,
    PartnerNotActiveException,
    PartnerNotFoundException,
)

__all__ = [
    "DomainException",
    "ErrorKind",
    "ActiveLimitNotFoundException",
    "InvalidLimitException",
    "PartnerLimitNotFoundException",
    "PartnerNotActiveException",
    "PartnerNotFoundException",
]
