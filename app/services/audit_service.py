"""Mock audit service shaping responses for every audit endpoint.

No analysis happens here. The service:
- Validates inputs before doing anything else
- Generates opaque run identifiers
- Returns fixed findings/recommendations independent of the contract
- Simulates external engine latency with a non-blocking wait
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from app.adapters.engines.base import AbstractAnalysisEngine, AbstractScanEngine
from app.core.contract_validation import (
    validate_analyze_request,
    validate_audit_request,
    validate_scan_request,
)
from app.schemas.audit import (
    AuditLookupResponse,
    AuditRequest,
    AuditResponse,
    Finding,
    SeveritySummary,
)
from app.schemas.integrations import (
    AnalyzeRequest,
    AnalyzeResponse,
    Recommendation,
    ScanFinding,
    ScanRequest,
    ScanResponse,
)
from app.utils.ids import new_id
from app.utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)

AUDIT_FINDINGS: tuple[Finding, ...] = (
    Finding(
        severity="high",
        type="reentrancy",
        line=45,
        description="Potential reentrancy vulnerability detected",
    ),
    Finding(
        severity="medium",
        type="integer-overflow",
        line=67,
        description="Unchecked arithmetic operation",
    ),
)

# Returned by the lookup endpoint for any id.
STORED_AUDIT_FINDINGS: tuple[Finding, ...] = (
    Finding(severity="high", type="reentrancy", line=45),
)


def summarize(findings: Iterable[Finding]) -> SeveritySummary:
    """Count findings by severity."""
    summary = SeveritySummary()
    for finding in findings:
        summary.total += 1
        setattr(summary, finding.severity, getattr(summary, finding.severity) + 1)
    return summary


class AuditService:
    """Builds mock audit, scan and analysis results.

    Args:
        scan_engine: Audityzer-style engine used by ``scan``.
        analysis_engine: AuditorSEC-style engine used by ``analyze``.
        delay_seconds: Simulated latency applied to ``run_audit``.
    """

    def __init__(
        self,
        *,
        scan_engine: AbstractScanEngine,
        analysis_engine: AbstractAnalysisEngine,
        delay_seconds: float = 1.0,
    ) -> None:
        self.scan_engine = scan_engine
        self.analysis_engine = analysis_engine
        self.delay_seconds = delay_seconds

    async def run_audit(self, payload: AuditRequest) -> AuditResponse:
        """Run a mock audit over the submitted contract.

        Raises:
            ValidationAppError: If the request body is invalid.
        """
        validate_audit_request(payload)

        audit_id = new_id("audit")
        findings = [finding.model_copy() for finding in AUDIT_FINDINGS]

        logger.info(
            "audit.started",
            extra={
                "audit_id": audit_id,
                "network": payload.network,
                "code_chars": len(payload.contract_code),
            },
        )

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        return AuditResponse(
            audit_id=audit_id,
            network=payload.network,
            vulnerabilities=findings,
            summary=summarize(findings),
            timestamp=utc_timestamp(),
        )

    def get_audit(self, audit_id: str) -> AuditLookupResponse:
        """Return the canned result for ``audit_id``.

        Nothing is persisted, so the id is echoed back without any lookup.
        """
        return AuditLookupResponse(
            audit_id=audit_id,
            vulnerabilities=[finding.model_copy() for finding in STORED_AUDIT_FINDINGS],
            timestamp=utc_timestamp(),
        )

    async def scan(self, payload: ScanRequest) -> ScanResponse:
        validate_scan_request(payload)

        findings = await self.scan_engine.scan(payload.contract_code)
        scan_id = new_id("scan")
        logger.info(
            "scan.completed",
            extra={
                "scan_id": scan_id,
                "engine": self.scan_engine.name,
                "finding_count": len(findings),
            },
        )
        return ScanResponse(
            scan_id=scan_id,
            findings=[ScanFinding(**finding) for finding in findings],
        )

    async def analyze(self, payload: AnalyzeRequest) -> AnalyzeResponse:
        validate_analyze_request(payload)

        recommendations = await self.analysis_engine.analyze(
            payload.contract_code, payload.contract_address
        )
        analysis_id = new_id("analysis")
        logger.info(
            "analysis.completed",
            extra={
                "analysis_id": analysis_id,
                "engine": self.analysis_engine.name,
                "recommendation_count": len(recommendations),
            },
        )
        return AnalyzeResponse(
            analysis_id=analysis_id,
            recommendations=[Recommendation(**item) for item in recommendations],
        )
