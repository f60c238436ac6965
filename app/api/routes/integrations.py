"""Mocked third-party engine endpoints (Audityzer, AuditorSEC)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.routes.audit import get_audit_service
from app.core.errors import AppError, ProcessingAppError
from app.schemas.integrations import AnalyzeRequest, AnalyzeResponse, ScanRequest, ScanResponse
from app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Integrations"])


@router.post("/audityzer/scan", response_model=ScanResponse)
async def audityzer_scan(
    payload: ScanRequest,
    service: AuditService = Depends(get_audit_service),
) -> ScanResponse:
    """Submit contract code to the (mocked) Audityzer scanner."""
    try:
        return await service.scan(payload)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("audityzer.scan_failed")
        raise ProcessingAppError(
            code="audityzer_scan_failed",
            message="Audityzer scan failed",
            details={"engine": "audityzer"},
        ) from exc


@router.post("/auditorsec/analyze", response_model=AnalyzeResponse)
async def auditorsec_analyze(
    payload: AnalyzeRequest,
    service: AuditService = Depends(get_audit_service),
) -> AnalyzeResponse:
    """Submit a deployed contract to the (mocked) AuditorSEC analyzer."""
    try:
        return await service.analyze(payload)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("auditorsec.analysis_failed")
        raise ProcessingAppError(
            code="auditorsec_analysis_failed",
            message="Analysis failed",
            details={"engine": "auditorsec"},
        ) from exc
