"""Unit tests for AuditService."""

import asyncio
import logging
import time
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.adapters.engines.mock import MockAuditorSecEngine, MockAudityzerEngine
from app.core.errors import ValidationAppError
from app.schemas.audit import AuditRequest, Finding
from app.schemas.integrations import AnalyzeRequest, ScanRequest
from app.services.audit_service import AuditService, summarize

VALID_ADDRESS = "0x" + "a" * 40


def _service(delay_seconds: float = 0) -> AuditService:
    return AuditService(
        scan_engine=MockAudityzerEngine(),
        analysis_engine=MockAuditorSecEngine(),
        delay_seconds=delay_seconds,
    )


def _audit_request(**overrides) -> AuditRequest:
    body = {
        "contractCode": "contract X{}",
        "contractAddress": VALID_ADDRESS,
        "network": "testnet",
    }
    body.update(overrides)
    return AuditRequest(**body)


class TestSummarize:
    def test_counts_by_severity(self) -> None:
        findings = [
            Finding(severity="high", type="a", line=1),
            Finding(severity="low", type="b", line=2),
            Finding(severity="low", type="c", line=3),
        ]

        summary = summarize(findings)

        assert summary.model_dump() == {"total": 3, "high": 1, "medium": 0, "low": 2}

    def test_empty(self) -> None:
        assert summarize([]).total == 0


class TestRunAudit:
    @pytest.mark.asyncio
    async def test_returns_fixed_findings(self) -> None:
        result = await _service().run_audit(_audit_request())

        assert result.success is True
        assert result.status == "completed"
        assert result.network == "testnet"
        assert result.audit_id.startswith("audit_")
        assert [f.type for f in result.vulnerabilities] == ["reentrancy", "integer-overflow"]
        assert result.summary.model_dump() == {"total": 2, "high": 1, "medium": 1, "low": 0}

    @pytest.mark.asyncio
    async def test_findings_do_not_depend_on_input(self) -> None:
        service = _service()

        first = await service.run_audit(_audit_request(contractCode="contract A{}"))
        second = await service.run_audit(_audit_request(contractCode="pragma solidity ^0.8.0;"))

        assert first.vulnerabilities == second.vulnerabilities

    @pytest.mark.asyncio
    async def test_invalid_request_skips_delay_and_log(self, caplog: pytest.LogCaptureFixture) -> None:
        service = _service(delay_seconds=5)

        start = time.perf_counter()
        with caplog.at_level(logging.INFO, logger="app.services.audit_service"):
            with pytest.raises(ValidationAppError):
                await service.run_audit(_audit_request(contractAddress="0x123"))

        assert time.perf_counter() - start < 1
        assert not [r for r in caplog.records if r.getMessage() == "audit.started"]

    @pytest.mark.asyncio
    async def test_logs_audit_started_without_contract_code(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="app.services.audit_service"):
            result = await _service().run_audit(_audit_request(contractCode="secret source"))

        started = [r for r in caplog.records if r.getMessage() == "audit.started"]
        assert len(started) == 1
        assert started[0].audit_id == result.audit_id
        assert "secret source" not in repr(started[0].__dict__)

    @pytest.mark.asyncio
    async def test_delay_does_not_serialize_concurrent_audits(self) -> None:
        service = _service(delay_seconds=0.3)

        start = time.perf_counter()
        results = await asyncio.gather(*(service.run_audit(_audit_request()) for _ in range(5)))
        elapsed = time.perf_counter() - start

        assert len(results) == 5
        assert elapsed < 1.0


class TestGetAudit:
    def test_any_id_returns_single_canned_finding(self) -> None:
        result = _service().get_audit("never-generated")

        assert result.audit_id == "never-generated"
        assert result.status == "completed"
        assert len(result.vulnerabilities) == 1
        assert result.vulnerabilities[0].severity == "high"
        assert result.vulnerabilities[0].description is None


class TestIntegrations:
    @pytest.mark.asyncio
    async def test_scan_uses_engine_findings(self) -> None:
        engine = MagicMock()
        engine.name = "stub"
        engine.scan = AsyncMock(
            return_value=[{"id": "X-1", "severity": "low", "title": "Stub"}]
        )
        service = AuditService(scan_engine=engine, analysis_engine=MockAuditorSecEngine())

        result = await service.scan(ScanRequest(contractCode="contract X{}"))

        engine.scan.assert_awaited_once_with("contract X{}")
        assert result.scan_id.startswith("scan_")
        assert result.findings[0].id == "X-1"

    @pytest.mark.asyncio
    async def test_scan_validates_before_calling_engine(self) -> None:
        engine = MagicMock()
        engine.scan = AsyncMock()
        service = AuditService(scan_engine=engine, analysis_engine=MockAuditorSecEngine())

        with pytest.raises(ValidationAppError):
            await service.scan(ScanRequest())

        engine.scan.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_analyze_returns_recommendation(self) -> None:
        result = await _service().analyze(
            AnalyzeRequest(contractCode="contract X{}", contractAddress=VALID_ADDRESS)
        )

        assert result.status == "success"
        assert result.analysis_id.startswith("analysis_")
        assert result.recommendations[0].priority == "critical"
        assert result.recommendations[0].recommendation == "Add checks for reentrancy"
