"""Domain Entities - Core business objects."""

from .partner import Partner, PartnerPromoCodeLimit, utcnow

__all__ = [
    "Partner",
    "PartnerPromoCodeLimit",
    "utcnow",
]
