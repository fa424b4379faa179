"""Data Transfer Objects for application layer."""

from .partner import PartnerLimitResponse, PartnerResponse
from .result import OperationResult

__all__ = [
    "OperationResult",
    "PartnerLimitResponse",
    "PartnerResponse",
]
