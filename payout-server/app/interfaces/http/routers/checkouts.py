"""Checkout (withdrawal) request endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.interfaces.http.deps import get_checkout_service
from app.modules.checkouts.service import CheckoutService
from app.schemas import (
    CheckoutApprove,
    CheckoutCreate,
    CheckoutCreateResponse,
    CheckoutResponse,
    SuccessResponse,
)

router = APIRouter()


@router.post(
    "/checkout_requests",
    response_model=CheckoutCreateResponse,
    summary="Request a withdrawal, reserving the amount",
)
async def create_checkout_request(
    payload: CheckoutCreate,
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutCreateResponse:
    checkout = await service.create_checkout_request(payload.user_id, payload.amount)
    return CheckoutCreateResponse(id=checkout.id)


@router.get("/checkout_request/{checkout_id}", response_model=CheckoutResponse, summary="Get a checkout request")
async def get_checkout_request(
    checkout_id: str,
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutResponse:
    return CheckoutResponse.from_domain(await service.get(checkout_id))


@router.post(
    "/checkout_request/{checkout_id}/approve",
    response_model=SuccessResponse,
    summary="Approve a pending checkout request",
)
async def approve_checkout_request(
    checkout_id: str,
    payload: Optional[CheckoutApprove] = None,
    service: CheckoutService = Depends(get_checkout_service),
) -> SuccessResponse:
    transfer_number = payload.transaction_number if payload else None
    await service.approve_checkout_request(checkout_id, transfer_number)
    return SuccessResponse()


@router.post(
    "/checkout_request/{checkout_id}/reject",
    response_model=SuccessResponse,
    summary="Reject a pending checkout request",
)
async def reject_checkout_request(
    checkout_id: str,
    service: CheckoutService = Depends(get_checkout_service),
) -> SuccessResponse:
    await service.reject_checkout_request(checkout_id)
    return SuccessResponse()
