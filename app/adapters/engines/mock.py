"""Canned stand-ins for the Audityzer and AuditorSEC engines.

Neither engine is actually contacted; both return fixed payloads regardless
of the submitted contract.
"""

from typing import Any

from app.adapters.engines.base import AbstractAnalysisEngine, AbstractScanEngine

AUDITYZER_FINDINGS: tuple[dict[str, Any], ...] = (
    {"id": "AUD-001", "severity": "high", "title": "Reentrancy Risk"},
)

AUDITORSEC_RECOMMENDATIONS: tuple[dict[str, Any], ...] = (
    {"priority": "critical", "recommendation": "Add checks for reentrancy"},
)


class MockAudityzerEngine(AbstractScanEngine):
    name = "audityzer"

    async def scan(self, contract_code: str) -> list[dict[str, Any]]:
        return [dict(finding) for finding in AUDITYZER_FINDINGS]


class MockAuditorSecEngine(AbstractAnalysisEngine):
    name = "auditorsec"

    async def analyze(self, contract_code: str, contract_address: str) -> list[dict[str, Any]]:
        return [dict(item) for item in AUDITORSEC_RECOMMENDATIONS]
