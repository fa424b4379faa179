"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import Base, PartnerModel, PartnerPromoCodeLimitModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "PartnerModel",
    "PartnerPromoCodeLimitModel",
]
