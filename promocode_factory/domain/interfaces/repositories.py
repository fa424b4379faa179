"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from promocode_factory.domain.entities import Partner


class PartnerRepository(ABC):
    """
    Abstract repository for Partner persistence.

    A partner is loaded and saved together with its full limit
    history. Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def get_by_id(self, partner_id: UUID) -> Optional[Partner]:
        """
        Retrieve a partner with its limits.

        Args:
            partner_id: The partner's unique identifier

        Returns:
            The partner if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_all(self) -> List[Partner]:
        """
        Retrieve all partners.

        Returns:
            List of partners, ordered by name
        """
        ...

    @abstractmethod
    async def add(self, partner: Partner) -> Partner:
        """
        Persist a new partner.

        Args:
            partner: The partner to add

        Returns:
            The saved partner
        """
        ...

    @abstractmethod
    async def update(self, partner: Partner) -> Partner:
        """
        Persist changes to an existing partner as a single write.

        Scalar fields are overwritten and the limit history is
        synchronized: new limits are inserted and cancel dates of
        existing limits are stored.

        Args:
            partner: The partner to update

        Returns:
            The updated partner
        """
        ...
