"""Application services (use cases)."""

from .partner_service import PartnerService

__all__ = [
    "PartnerService",
]
