"""Pydantic schemas for audit requests and responses.

Request models accept loosely-typed contract fields so that missing or
wrong-typed values reach ``app.core.contract_validation`` and produce
field-specific 400 responses instead of FastAPI's generic 422.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["high", "medium", "low"]


class AuditRequest(BaseModel):
    """Body of ``POST /api/audit``."""

    model_config = ConfigDict(populate_by_name=True)

    contract_code: Any = Field(
        default=None,
        alias="contractCode",
        description="Solidity (or other) contract source code.",
    )
    contract_address: Any = Field(
        default=None,
        alias="contractAddress",
        description="Deployed contract address, 0x followed by 40 hex digits.",
    )
    network: str | None = Field(
        default=None,
        description="Free-form network name (e.g. 'mainnet', 'sepolia').",
    )


class Finding(BaseModel):
    """A single reported (mocked) vulnerability."""

    severity: Severity
    type: str = Field(..., description="Short vulnerability tag, e.g. 'reentrancy'.")
    line: int = Field(..., ge=0, description="Source line the finding points at.")
    description: str | None = Field(default=None)


class SeveritySummary(BaseModel):
    """Finding counts by severity."""

    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0


class AuditResponse(BaseModel):
    """Result of ``POST /api/audit``."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    audit_id: str = Field(..., alias="auditId")
    network: str | None = None
    status: Literal["completed"] = "completed"
    vulnerabilities: list[Finding]
    summary: SeveritySummary
    timestamp: str


class AuditLookupResponse(BaseModel):
    """Result of ``GET /api/audit/{auditId}``.

    Audits are never stored, so this is always a canned result.
    """

    model_config = ConfigDict(populate_by_name=True)

    audit_id: str = Field(..., alias="auditId")
    status: Literal["completed"] = "completed"
    vulnerabilities: list[Finding]
    timestamp: str
