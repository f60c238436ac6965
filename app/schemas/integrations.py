"""Pydantic schemas for the mocked third-party engine endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ScanRequest(BaseModel):
    """Body of ``POST /api/audityzer/scan``."""

    model_config = ConfigDict(populate_by_name=True)

    contract_code: Any = Field(default=None, alias="contractCode")


class ScanFinding(BaseModel):
    id: str
    severity: str
    title: str


class ScanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["success"] = "success"
    scan_id: str = Field(..., alias="scanId")
    findings: list[ScanFinding]


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/auditorsec/analyze``."""

    model_config = ConfigDict(populate_by_name=True)

    contract_code: Any = Field(default=None, alias="contractCode")
    contract_address: Any = Field(default=None, alias="contractAddress")


class Recommendation(BaseModel):
    priority: str
    recommendation: str


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["success"] = "success"
    analysis_id: str = Field(..., alias="analysisId")
    recommendations: list[Recommendation]
