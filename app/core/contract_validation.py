"""Input validation for contract audit requests.

Every check raises ``ValidationAppError`` before any side effect happens, so a
rejected request never reaches the simulated engine delay or the audit log.
"""

from __future__ import annotations

import re
from typing import Any

from app.core.errors import ValidationAppError
from app.schemas.audit import AuditRequest
from app.schemas.integrations import AnalyzeRequest, ScanRequest

# fullmatch: "$" alone would also accept a trailing newline
CONTRACT_ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{40}")


def is_valid_contract_address(value: Any) -> bool:
    return isinstance(value, str) and CONTRACT_ADDRESS_PATTERN.fullmatch(value) is not None


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def validate_audit_request(payload: AuditRequest) -> None:
    """Validate the body of ``POST /api/audit``.

    Raises:
        ValidationAppError: ``invalid_contract_code`` when the code is missing,
            not a string or empty; ``invalid_contract_address`` when the
            address does not match ``0x`` + 40 hex digits.
    """
    if not _is_present(payload.contract_code):
        raise ValidationAppError(
            code="invalid_contract_code",
            message="Invalid contract code",
            details={"field": "contractCode", "expected": "non-empty string"},
        )

    if not is_valid_contract_address(payload.contract_address):
        raise ValidationAppError(
            code="invalid_contract_address",
            message="Invalid contract address",
            details={"field": "contractAddress", "expected": "0x followed by 40 hex digits"},
        )


def validate_scan_request(payload: ScanRequest) -> None:
    if not _is_present(payload.contract_code):
        raise ValidationAppError(
            code="contract_code_required",
            message="Contract code required",
            details={"field": "contractCode"},
        )


def validate_analyze_request(payload: AnalyzeRequest) -> None:
    # The address format is not enforced here, only its presence.
    if not (_is_present(payload.contract_code) and _is_present(payload.contract_address)):
        raise ValidationAppError(
            code="contract_details_required",
            message="Contract details required",
        )
