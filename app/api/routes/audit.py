from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.adapters.engines.mock import MockAuditorSecEngine, MockAudityzerEngine
from app.core.config import settings
from app.core.errors import AppError, ProcessingAppError
from app.schemas.audit import AuditLookupResponse, AuditRequest, AuditResponse
from app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Audit"])

_audit_service = AuditService(
    scan_engine=MockAudityzerEngine(),
    analysis_engine=MockAuditorSecEngine(),
    delay_seconds=settings.app.audit_delay_seconds,
)


def get_audit_service() -> AuditService:
    return _audit_service


@router.post(
    "/audit",
    response_model=AuditResponse,
    response_model_exclude_none=True,
)
async def create_audit(
    payload: AuditRequest,
    service: AuditService = Depends(get_audit_service),
) -> AuditResponse:
    """Run a mock security audit over a submitted contract.

    Returns a fixed set of two findings (one high, one medium) after a
    simulated engine delay.

    Raises:
        ValidationAppError: 400 when contract code or address is invalid.
        ProcessingAppError: 500 on any unexpected failure.
    """
    try:
        return await service.run_audit(payload)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("audit.failed")
        raise ProcessingAppError(
            code="audit_processing_failed",
            message="Audit processing failed",
        ) from exc


@router.get(
    "/audit/{audit_id}",
    response_model=AuditLookupResponse,
    response_model_exclude_none=True,
)
def get_audit(
    audit_id: str,
    service: AuditService = Depends(get_audit_service),
) -> AuditLookupResponse:
    """Fetch audit results.

    Audits are not stored: any id yields the same single canned finding.
    """
    try:
        return service.get_audit(audit_id)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("audit.fetch_failed")
        raise ProcessingAppError(
            code="audit_fetch_failed",
            message="Failed to fetch audit results",
        ) from exc
