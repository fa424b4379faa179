"""SQLAlchemy ORM models for partners and their promo code limits."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class PartnerModel(Base):
    """Persisted partner record."""

    __tablename__ = "partners"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    number_issued_promo_codes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    limits: Mapped[list["PartnerPromoCodeLimitModel"]] = relationship(
        "PartnerPromoCodeLimitModel",
        back_populates="partner",
        cascade="all, delete-orphan",
        # History order is insertion order; timestamps may tie or be out of order.
        order_by="PartnerPromoCodeLimitModel.position",
        collection_class=ordering_list("position"),
    )


class PartnerPromoCodeLimitModel(Base):
    """Persisted promo code limit record within a partner's history."""

    __tablename__ = "partner_promo_code_limits"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    partner_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("partners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    limit: Mapped[int] = mapped_column(Integer, nullable=False)
    create_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    cancel_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    partner: Mapped["PartnerModel"] = relationship(
        "PartnerModel",
        back_populates="limits",
    )
