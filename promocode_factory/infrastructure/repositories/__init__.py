"""Repository implementations."""

from .partner_repository import PostgresPartnerRepository

__all__ = [
    "PostgresPartnerRepository",
]
