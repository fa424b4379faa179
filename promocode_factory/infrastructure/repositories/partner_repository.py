"""PostgreSQL repository implementation for partners."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from promocode_factory.domain.entities import Partner, PartnerPromoCodeLimit
from promocode_factory.domain.interfaces import PartnerRepository
from promocode_factory.infrastructure.database.models import (
    PartnerModel,
    PartnerPromoCodeLimitModel,
)


class PostgresPartnerRepository(PartnerRepository):
    """
    PostgreSQL-backed partner repository.

    Changes are flushed to the session; the surrounding session scope
    commits them as one transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, partner_id: UUID) -> Optional[Partner]:
        model = await self._get_model(str(partner_id))

        if model is None:
            return None

        return self._to_entity(model)

    async def get_all(self) -> List[Partner]:
        stmt = (
            select(PartnerModel)
            .options(selectinload(PartnerModel.limits))
            .order_by(PartnerModel.name)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def add(self, partner: Partner) -> Partner:
        model = PartnerModel(
            id=str(partner.id),
            name=partner.name,
            is_active=partner.is_active,
            number_issued_promo_codes=partner.number_issued_promo_codes,
        )

        for limit in partner.limits:
            model.limits.append(self._to_limit_model(limit))

        self._session.add(model)
        await self._session.flush()

        return partner

    async def update(self, partner: Partner) -> Partner:
        model = await self._get_model(str(partner.id))

        if model is None:
            raise ValueError(f"Partner {partner.id} not found")

        model.name = partner.name
        model.is_active = partner.is_active
        model.number_issued_promo_codes = partner.number_issued_promo_codes

        existing = {limit_model.id: limit_model for limit_model in model.limits}
        for limit in partner.limits:
            limit_model = existing.get(str(limit.id))
            if limit_model is None:
                model.limits.append(self._to_limit_model(limit))
            else:
                limit_model.cancel_date = limit.cancel_date

        await self._session.flush()

        return partner

    async def _get_model(self, partner_id: str) -> Optional[PartnerModel]:
        stmt = (
            select(PartnerModel)
            .options(selectinload(PartnerModel.limits))
            .where(PartnerModel.id == partner_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_limit_model(self, limit: PartnerPromoCodeLimit) -> PartnerPromoCodeLimitModel:
        return PartnerPromoCodeLimitModel(
            id=str(limit.id),
            partner_id=str(limit.partner_id),
            limit=limit.limit,
            create_date=limit.create_date,
            end_date=limit.end_date,
            cancel_date=limit.cancel_date,
        )

    def _to_entity(self, model: PartnerModel) -> Partner:
        limits = [
            PartnerPromoCodeLimit(
                id=UUID(limit.id),
                partner_id=UUID(limit.partner_id),
                limit=limit.limit,
                create_date=limit.create_date,
                end_date=limit.end_date,
                cancel_date=limit.cancel_date,
            )
            for limit in model.limits
        ]

        return Partner(
            id=UUID(model.id),
            name=model.name,
            is_active=model.is_active,
            number_issued_promo_codes=model.number_issued_promo_codes,
            limits=limits,
        )
