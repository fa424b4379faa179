"""
Integration tests for partner persistence.

These tests verify:
1. Partners round-trip through PostgresPartnerRepository with their limits
2. A limit assignment is written as new rows plus a cancel date, once
3. Rolled-back sessions leave no partial state
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from promocode_factory.application.services import PartnerService
from promocode_factory.domain.entities import PartnerPromoCodeLimit
from promocode_factory.infrastructure.repositories import PostgresPartnerRepository
from tests.integration.conftest import make_partner


class TestPartnerRepository:
    """Tests for PostgresPartnerRepository."""

    @pytest.mark.asyncio
    async def test_get_by_id_returns_partner_with_limits(self, session_factory, active_partner):
        async with session_factory() as session:
            partner = await PostgresPartnerRepository(session).get_by_id(active_partner.id)

        assert partner is not None
        assert partner.id == active_partner.id
        assert partner.name == "Active Partner"
        assert partner.number_issued_promo_codes == 10
        assert len(partner.limits) == 1
        assert partner.limits[0].id == active_partner.limits[0].id
        assert partner.limits[0].cancel_date is None

    @pytest.mark.asyncio
    async def test_get_by_id_unknown_returns_none(self, test_session):
        assert await PostgresPartnerRepository(test_session).get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_update_unknown_partner_raises(self, test_session):
        with pytest.raises(ValueError):
            await PostgresPartnerRepository(test_session).update(make_partner("Ghost"))

    @pytest.mark.asyncio
    async def test_limit_assignment_is_persisted(self, session_factory, active_partner):
        end_date = datetime.now(timezone.utc) + timedelta(days=1)

        async with session_factory() as session:
            service = PartnerService(PostgresPartnerRepository(session))
            result = await service.set_promo_code_limit(active_partner.id, 100, end_date)
            await session.commit()

        async with session_factory() as session:
            partner = await PostgresPartnerRepository(session).get_by_id(active_partner.id)

        assert partner.number_issued_promo_codes == 0
        assert len(partner.limits) == 2
        assert partner.limits[0].id == active_partner.limits[0].id
        assert partner.limits[0].cancel_date is not None
        assert partner.limits[1].id == result.data.id
        assert partner.limits[1].limit == 100
        assert partner.limits[1].cancel_date is None

    @pytest.mark.asyncio
    async def test_rollback_discards_assignment(self, session_factory, active_partner):
        async with session_factory() as session:
            service = PartnerService(PostgresPartnerRepository(session))
            await service.set_promo_code_limit(
                active_partner.id,
                100,
                datetime.now(timezone.utc) + timedelta(days=1),
            )
            await session.rollback()

        async with session_factory() as session:
            partner = await PostgresPartnerRepository(session).get_by_id(active_partner.id)

        assert len(partner.limits) == 1
        assert partner.limits[0].cancel_date is None
        assert partner.number_issued_promo_codes == 10

    @pytest.mark.asyncio
    async def test_get_all_ordered_by_name(self, session_factory, inactive_partner, active_partner):
        async with session_factory() as session:
            partners = await PostgresPartnerRepository(session).get_all()

        assert [p.name for p in partners] == ["Active Partner", "Inactive Partner"]

    @pytest.mark.asyncio
    async def test_limit_history_keeps_insertion_order(self, test_session, session_factory):
        """Limits come back in the order they were added, not by timestamp."""
        now = datetime.now(timezone.utc)
        partner = make_partner("Ordered Partner", limit=None)
        for limit, created in ((10, now), (20, now - timedelta(days=3)), (30, now)):
            partner.limits.append(
                PartnerPromoCodeLimit(
                    partner_id=partner.id,
                    limit=limit,
                    create_date=created,
                    end_date=now + timedelta(days=30),
                    cancel_date=now if limit != 30 else None,
                )
            )
        await PostgresPartnerRepository(test_session).add(partner)
        await test_session.commit()

        async with session_factory() as session:
            loaded = await PostgresPartnerRepository(session).get_by_id(partner.id)

        assert [limit.id for limit in loaded.limits] == [limit.id for limit in partner.limits]
        assert [limit.limit for limit in loaded.limits] == [10, 20, 30]
