"""Pydantic schemas for API request/response validation."""

from .partner import (
    PartnerLimitSchema,
    PartnerSchema,
    SetPartnerPromoCodeLimitRequestSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "PartnerLimitSchema",
    "PartnerSchema",
    "SetPartnerPromoCodeLimitRequestSchema",
    "ErrorResponseSchema",
]
