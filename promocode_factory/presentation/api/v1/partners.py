"""Partner and promo code limit API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from promocode_factory.application.dto import PartnerLimitResponse, PartnerResponse
from promocode_factory.application.services import PartnerService
from promocode_factory.core.dependencies import DbSession, get_partner_service
from promocode_factory.core.metrics import (
    record_limit_assignment,
    record_limit_cancellation,
    track_limit_assignment_latency,
)
from promocode_factory.presentation.schemas import (
    ErrorResponseSchema,
    PartnerLimitSchema,
    PartnerSchema,
    SetPartnerPromoCodeLimitRequestSchema,
)

partners_router = APIRouter(
    prefix="/partners",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Partner not found"},
    },
)

PartnerId = Annotated[UUID, Path(description="UUID of the partner")]


def _limit_schema(limit: PartnerLimitResponse) -> PartnerLimitSchema:
    return PartnerLimitSchema(
        id=limit.id,
        partner_id=limit.partner_id,
        limit=limit.limit,
        create_date=limit.create_date,
        end_date=limit.end_date,
        cancel_date=limit.cancel_date,
    )


def _partner_schema(partner: PartnerResponse) -> PartnerSchema:
    return PartnerSchema(
        id=partner.id,
        name=partner.name,
        is_active=partner.is_active,
        number_issued_promo_codes=partner.number_issued_promo_codes,
        limits=[_limit_schema(limit) for limit in partner.limits],
    )


@partners_router.get(
    "",
    response_model=list[PartnerSchema],
    summary="List Partners",
)
async def get_partners(
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
) -> list[PartnerSchema]:
    partners = await partner_service.get_partners()
    return [_partner_schema(partner) for partner in partners]


@partners_router.get(
    "/{partner_id}",
    response_model=PartnerSchema,
    summary="Get Partner",
    description="Retrieve a partner together with its full limit history.",
)
async def get_partner(
    partner_id: PartnerId,
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
) -> PartnerSchema:
    result = await partner_service.get_partner(partner_id)
    return _partner_schema(PartnerResponse.from_entity(result.unwrap()))


@partners_router.get(
    "/{partner_id}/limits/{limit_id}",
    response_model=PartnerLimitSchema,
    summary="Get Partner Limit",
)
async def get_partner_limit(
    partner_id: PartnerId,
    limit_id: Annotated[UUID, Path(description="UUID of the limit")],
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
) -> PartnerLimitSchema:
    result = await partner_service.get_partner_limit(partner_id, limit_id)
    return _limit_schema(PartnerLimitResponse.from_entity(result.unwrap()))


@partners_router.post(
    "/{partner_id}/limits",
    response_model=PartnerLimitSchema,
    status_code=201,
    summary="Set Partner Promo Code Limit",
    description="""
    Assign a new promo code limit to a partner.

    The partner's current active limit, if any, is cancelled and its
    issued promo code counter is reset to zero.
    """,
    responses={
        201: {"description": "Limit created"},
        400: {"model": ErrorResponseSchema, "description": "Partner not active or invalid limit"},
    },
)
async def set_partner_promo_code_limit(
    partner_id: PartnerId,
    request: SetPartnerPromoCodeLimitRequestSchema,
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
    session: DbSession,
) -> PartnerLimitSchema:
    with track_limit_assignment_latency():
        result = await partner_service.set_promo_code_limit(
            partner_id,
            request.limit,
            request.end_date,
        )

    record_limit_assignment(result)

    new_limit = result.unwrap()
    # Commit before responding; a failed commit must not produce a 201.
    await session.commit()

    return _limit_schema(PartnerLimitResponse.from_entity(new_limit))


@partners_router.post(
    "/{partner_id}/limits/cancel",
    response_model=PartnerLimitSchema,
    summary="Cancel Partner Promo Code Limit",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Partner not active or has no active limit"},
    },
)
async def cancel_partner_promo_code_limit(
    partner_id: PartnerId,
    partner_service: Annotated[PartnerService, Depends(get_partner_service)],
    session: DbSession,
) -> PartnerLimitSchema:
    result = await partner_service.cancel_promo_code_limit(partner_id)

    record_limit_cancellation(result)

    cancelled_limit = result.unwrap()
    await session.commit()

    return _limit_schema(PartnerLimitResponse.from_entity(cancelled_limit))
