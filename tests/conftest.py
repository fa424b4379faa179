"""
Shared fixtures.

Provides an in-memory PartnerRepository that records every write, so
tests can assert how many times a use case persisted a partner.
"""

import copy
from typing import Dict, List, Optional
from uuid import UUID

import pytest

from promocode_factory.domain.entities import Partner
from promocode_factory.domain.interfaces import PartnerRepository


class InMemoryPartnerRepository(PartnerRepository):
    """Dictionary-backed repository that tracks update calls."""

    def __init__(self, partners: Optional[List[Partner]] = None):
        self._partners: Dict[UUID, Partner] = {p.id: p for p in partners or []}
        self.updated: List[Partner] = []

    @property
    def update_count(self) -> int:
        return len(self.updated)

    async def get_by_id(self, partner_id: UUID) -> Optional[Partner]:
        return self._partners.get(partner_id)

    async def get_all(self) -> List[Partner]:
        return sorted(self._partners.values(), key=lambda p: p.name)

    async def add(self, partner: Partner) -> Partner:
        self._partners[partner.id] = partner
        return partner

    async def update(self, partner: Partner) -> Partner:
        self.updated.append(copy.deepcopy(partner))
        self._partners[partner.id] = partner
        return partner


class FailingPartnerRepository(InMemoryPartnerRepository):
    """Repository whose writes always fail."""

    async def update(self, partner: Partner) -> Partner:
        raise ConnectionError("database unavailable")


@pytest.fixture
def partner_repository() -> InMemoryPartnerRepository:
    return InMemoryPartnerRepository()
