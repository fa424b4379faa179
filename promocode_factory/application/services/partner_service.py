"""Partner service - orchestrates promo code limit use cases."""

from datetime import datetime
from typing import Callable, List
from uuid import UUID

import structlog

from promocode_factory.domain.entities import Partner, PartnerPromoCodeLimit, utcnow
from promocode_factory.domain.exceptions import (
    ActiveLimitNotFoundException,
    InvalidLimitException,
    PartnerLimitNotFoundException,
    PartnerNotActiveException,
    PartnerNotFoundException,
)
from promocode_factory.domain.interfaces import PartnerRepository
from promocode_factory.application.dto import OperationResult, PartnerResponse

logger = structlog.get_logger(__name__)


class PartnerService:
    """
    Application service for partner promo code limit use cases.

    This is the only place where a partner's limits and issued promo
    code counter are changed.
    """

    def __init__(
        self,
        partner_repository: PartnerRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._partner_repo = partner_repository
        self._clock = clock

    async def set_promo_code_limit(
        self,
        partner_id: UUID,
        limit: int,
        end_date: datetime,
    ) -> OperationResult[PartnerPromoCodeLimit]:
        """
        Assign a new promo code limit to a partner.

        The current active limit, if any, is cancelled and the issued
        promo code counter is reset. If no limit is active the counter
        is left as it is. The new limit is appended and the partner is
        saved once.

        Args:
            partner_id: The partner's unique identifier
            limit: Maximum number of promo codes, must be positive
            end_date: When the new limit expires

        Returns:
            OperationResult carrying the new limit, or a
            PartnerNotFoundException, PartnerNotActiveException or
            InvalidLimitException
        """
        log = logger.bind(partner_id=str(partner_id), limit=limit)

        partner = await self._partner_repo.get_by_id(partner_id)
        if partner is None:
            log.warning("promo_code_limit_rejected", reason="partner_not_found")
            return OperationResult.fail(PartnerNotFoundException(str(partner_id)))

        if not partner.is_active:
            log.warning("promo_code_limit_rejected", reason="partner_not_active")
            return OperationResult.fail(PartnerNotActiveException(str(partner_id)))

        if limit <= 0:
            log.warning("promo_code_limit_rejected", reason="invalid_limit")
            return OperationResult.fail(InvalidLimitException(limit))

        now = self._clock()

        active_limit = partner.find_active_limit()
        if active_limit is not None:
            partner.number_issued_promo_codes = 0
            active_limit.cancel(now)
            log = log.bind(cancelled_limit_id=str(active_limit.id))

        new_limit = PartnerPromoCodeLimit(
            partner_id=partner.id,
            limit=limit,
            create_date=now,
            end_date=end_date,
        )
        partner.limits.append(new_limit)

        await self._partner_repo.update(partner)

        log.info(
            "promo_code_limit_set",
            limit_id=str(new_limit.id),
            end_date=end_date.isoformat(),
            counter_reset=active_limit is not None,
        )

        return OperationResult.ok(new_limit)

    async def cancel_promo_code_limit(
        self,
        partner_id: UUID,
    ) -> OperationResult[PartnerPromoCodeLimit]:
        """
        Cancel the partner's active limit without assigning a new one.

        The issued promo code counter is not changed.

        Returns:
            OperationResult carrying the cancelled limit, or a
            PartnerNotFoundException, PartnerNotActiveException or
            ActiveLimitNotFoundException
        """
        log = logger.bind(partner_id=str(partner_id))

        partner = await self._partner_repo.get_by_id(partner_id)
        if partner is None:
            log.warning("promo_code_limit_cancel_rejected", reason="partner_not_found")
            return OperationResult.fail(PartnerNotFoundException(str(partner_id)))

        if not partner.is_active:
            log.warning("promo_code_limit_cancel_rejected", reason="partner_not_active")
            return OperationResult.fail(PartnerNotActiveException(str(partner_id)))

        active_limit = partner.find_active_limit()
        if active_limit is None:
            log.warning("promo_code_limit_cancel_rejected", reason="no_active_limit")
            return OperationResult.fail(ActiveLimitNotFoundException(str(partner_id)))

        active_limit.cancel(self._clock())
        await self._partner_repo.update(partner)

        log.info("promo_code_limit_cancelled", limit_id=str(active_limit.id))

        return OperationResult.ok(active_limit)

    async def get_partner_limit(
        self,
        partner_id: UUID,
        limit_id: UUID,
    ) -> OperationResult[PartnerPromoCodeLimit]:
        """Look up a single limit from a partner's history."""
        partner = await self._partner_repo.get_by_id(partner_id)
        if partner is None:
            return OperationResult.fail(PartnerNotFoundException(str(partner_id)))

        limit = partner.find_limit(limit_id)
        if limit is None:
            return OperationResult.fail(
                PartnerLimitNotFoundException(str(partner_id), str(limit_id))
            )

        return OperationResult.ok(limit)

    async def get_partner(self, partner_id: UUID) -> OperationResult[Partner]:
        partner = await self._partner_repo.get_by_id(partner_id)
        if partner is None:
            return OperationResult.fail(PartnerNotFoundException(str(partner_id)))
        return OperationResult.ok(partner)

    async def get_partners(self) -> List[PartnerResponse]:
        """
        Retrieve all partners.

        Returns:
            List of PartnerResponse objects
        """
        partners = await self._partner_repo.get_all()

        logger.info("partners_retrieved", count=len(partners))

        return [PartnerResponse.from_entity(partner) for partner in partners]
