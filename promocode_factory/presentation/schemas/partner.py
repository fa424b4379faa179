"""Partner-related Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SetPartnerPromoCodeLimitRequestSchema(BaseModel):
    """Schema for POST /v1/partners/{partner_id}/limits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "limit": 100,
                    "end_date": "2026-12-31T00:00:00Z",
                }
            ]
        }
    )
    limit: int = Field(
        ...,
        ge=1,
        description="Maximum number of promo codes the partner may issue",
        examples=[100],
    )
    end_date: datetime = Field(
        ...,
        description="When the limit expires",
        examples=["2026-12-31T00:00:00Z"],
    )


class PartnerLimitSchema(BaseModel):
    """Schema for a promo code limit."""

    id: str = Field(
        ...,
        description="UUID of the limit",
    )
    partner_id: str = Field(
        ...,
        description="UUID of the partner owning the limit",
    )
    limit: int = Field(
        ...,
        gt=0,
        description="Maximum number of promo codes",
        examples=[100],
    )
    create_date: str = Field(
        ...,
        description="ISO 8601 timestamp of creation",
    )
    end_date: str = Field(
        ...,
        description="ISO 8601 timestamp of expiry",
    )
    cancel_date: Optional[str] = Field(
        None,
        description="ISO 8601 timestamp of cancellation (null while active)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "partner_id": "7d994823-8226-4273-b063-1a95f3cc1df8",
                    "limit": 100,
                    "create_date": "2026-10-19T12:00:00+00:00",
                    "end_date": "2026-12-31T00:00:00+00:00",
                    "cancel_date": None,
                }
            ]
        }
    )


class PartnerSchema(BaseModel):
    """Schema for a partner with its limit history."""

    id: str = Field(
        ...,
        description="UUID of the partner",
    )
    name: str = Field(
        ...,
        description="Partner display name",
        examples=["Garden Supplies Ltd"],
    )
    is_active: bool = Field(
        ...,
        description="Inactive partners cannot receive new limits",
    )
    number_issued_promo_codes: int = Field(
        ...,
        ge=0,
        description="Promo codes issued under the current limit",
    )
    limits: list[PartnerLimitSchema] = Field(
        ...,
        description="Limit history, oldest first",
    )
