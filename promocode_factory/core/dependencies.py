"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from promocode_factory.infrastructure.database import get_db_session
from promocode_factory.infrastructure.repositories import PostgresPartnerRepository
from promocode_factory.application.services import PartnerService


DbSession = Annotated[AsyncSession, Depends(get_db_session)]


# Repository dependencies
async def get_partner_repository(
    session: DbSession,
) -> PostgresPartnerRepository:
    """Get a PartnerRepository instance."""
    return PostgresPartnerRepository(session)


# Service dependencies
async def get_partner_service(
    partner_repo: Annotated[PostgresPartnerRepository, Depends(get_partner_repository)],
) -> PartnerService:
    """Get a PartnerService instance."""
    return PartnerService(partner_repository=partner_repo)
