"""
Verification API endpoints.

Provides email checks, request submission and the admin review queue.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api.dependencies import get_verification_service
from shared.exceptions import ValidationError
from shared.models import ApiResponse

from .interfaces import IVerificationService
from .models import (
    BulkReviewRequest,
    BulkReviewResponse,
    EmailCheckRequest,
    EmailCheckResponse,
    ReviewRequest,
    SubmitResponse,
    VerificationCreate,
    VerificationRequest,
)
from .rules import check_educational_email

router = APIRouter()


@router.post("/validate-email", response_model=EmailCheckResponse)
async def validate_email(request: EmailCheckRequest) -> JSONResponse:
    """
    Check whether an address qualifies for student verification.

    Answers 400 with ``valid: false`` for a rejected address.
    """
    if not isinstance(request.email, str) or not request.email:
        body = EmailCheckResponse(valid=False, message="Email is required")
        return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))
    try:
        check_educational_email(request.email)
    except ValidationError as e:
        body = EmailCheckResponse(valid=False, message=e.message)
        return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))
    body = EmailCheckResponse(valid=True, message="Email domain is valid")
    return JSONResponse(status_code=200, content=body.model_dump(by_alias=True))


@router.post("/verify-student", response_model=SubmitResponse)
async def submit_verification(
    request: VerificationCreate,
    service: IVerificationService = Depends(get_verification_service),
) -> SubmitResponse:
    """Submit a verification request. It always starts pending."""
    created = await service.submit(request)
    return SubmitResponse(
        message="Verification request submitted successfully",
        id=created.id,
    )


@router.get("/verifications", response_model=ApiResponse[list[VerificationRequest]])
async def list_verifications(
    status: Optional[str] = Query(default=None, description="Filter by status"),
    service: IVerificationService = Depends(get_verification_service),
) -> ApiResponse[list[VerificationRequest]]:
    return ApiResponse(data=await service.list_verifications(status))


@router.get("/verifications/pending", response_model=ApiResponse[list[VerificationRequest]])
async def list_pending_verifications(
    service: IVerificationService = Depends(get_verification_service),
) -> ApiResponse[list[VerificationRequest]]:
    return ApiResponse(data=await service.list_pending())


@router.post("/verifications/bulk-action", response_model=BulkReviewResponse)
async def bulk_review(
    request: BulkReviewRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> BulkReviewResponse:
    """
    Approve or reject several requests.

    Unknown ids are skipped and listed in ``skipped``; ``count`` is the
    number of requests actually updated.
    """
    result = await service.bulk_review(request.ids, request.action, request.notes)
    return BulkReviewResponse(
        message=f"{result.count} verification requests updated",
        data=result.updated,
        count=result.count,
        skipped=result.skipped,
    )


@router.get("/verifications/{verification_id}", response_model=ApiResponse[VerificationRequest])
async def get_verification(
    verification_id: int,
    service: IVerificationService = Depends(get_verification_service),
) -> ApiResponse[VerificationRequest]:
    return ApiResponse(data=await service.get_verification(verification_id))


@router.put("/verifications/{verification_id}", response_model=ApiResponse[VerificationRequest])
async def review_verification(
    verification_id: int,
    request: ReviewRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> ApiResponse[VerificationRequest]:
    """
    Approve or reject a verification request.

    Send ``version`` to refuse the review if someone else changed the
    request in the meantime.
    """
    updated = await service.review(
        verification_id,
        request.status,
        notes=request.notes,
        expected_version=request.version,
    )
    return ApiResponse(
        message=f"Verification {updated.status.value} successfully",
        data=updated,
    )
