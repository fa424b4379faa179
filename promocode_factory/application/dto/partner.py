"""Data transfer objects for partner operations."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class PartnerLimitResponse:
    """Response data for a single promo code limit."""

    id: str
    partner_id: str
    limit: int
    create_date: str
    end_date: str
    cancel_date: Optional[str]

    @classmethod
    def from_entity(cls, limit) -> "PartnerLimitResponse":
        return cls(
            id=str(limit.id),
            partner_id=str(limit.partner_id),
            limit=limit.limit,
            create_date=limit.create_date.isoformat(),
            end_date=limit.end_date.isoformat(),
            cancel_date=limit.cancel_date.isoformat() if limit.cancel_date else None,
        )


@dataclass(frozen=True)
class PartnerResponse:
    """Response data for a partner with its limit history."""

    id: str
    name: str
    is_active: bool
    number_issued_promo_codes: int
    limits: List[PartnerLimitResponse]

    @classmethod
    def from_entity(cls, partner) -> "PartnerResponse":
        return cls(
            id=str(partner.id),
            name=partner.name,
            is_active=partner.is_active,
            number_issued_promo_codes=partner.number_issued_promo_codes,
            limits=[PartnerLimitResponse.from_entity(limit) for limit in partner.limits],
        )
