"""Partner aggregate and its promo code limit history."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PartnerPromoCodeLimit:
    """
    A limit on the number of promo codes a partner may issue.

    A limit with no cancel_date is the partner's active limit. Limits
    are never deleted; superseded ones keep their cancel_date as history.
    """

    partner_id: UUID
    limit: int
    end_date: datetime
    id: UUID = field(default_factory=uuid4)
    create_date: datetime = field(default_factory=utcnow)
    cancel_date: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        """Check if this limit has not been cancelled."""
        return self.cancel_date is None

    def cancel(self, at: datetime) -> None:
        """Mark the limit as cancelled. A limit can only be cancelled once."""
        if self.cancel_date is not None:
            raise ValueError(f"Limit {self.id} is already cancelled")
        self.cancel_date = at


@dataclass
class Partner:
    """
    A partner allowed to issue promo codes.

    Owns its limits exclusively. At most one of them is active
    (has no cancel_date) at any time.
    """

    name: str
    id: UUID = field(default_factory=uuid4)
    is_active: bool = True
    number_issued_promo_codes: int = 0
    limits: List[PartnerPromoCodeLimit] = field(default_factory=list)

    def find_active_limit(self) -> Optional[PartnerPromoCodeLimit]:
        """Return the limit that has not been cancelled, if there is one."""
        for limit in self.limits:
            if limit.cancel_date is None:
                return limit
        return None

    def find_limit(self, limit_id: UUID) -> Optional[PartnerPromoCodeLimit]:
        for limit in self.limits:
            if limit.id == limit_id:
                return limit
        return None
