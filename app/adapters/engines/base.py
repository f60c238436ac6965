from abc import ABC, abstractmethod
from typing import Any


class AbstractScanEngine(ABC):
	"""Interface for engines that scan contract source (Audityzer-style)."""

	name: str = "scan-engine"

	@abstractmethod
	async def scan(self, contract_code: str) -> list[dict[str, Any]]:
		"""Scan contract source code.

		Args:
			contract_code: Contract source as submitted by the client.

		Returns:
			list[dict[str, Any]]: Findings with ``id``, ``severity`` and ``title`` keys.
		"""
		...


class AbstractAnalysisEngine(ABC):
	"""Interface for engines that analyze a deployed contract (AuditorSEC-style)."""

	name: str = "analysis-engine"

	@abstractmethod
	async def analyze(self, contract_code: str, contract_address: str) -> list[dict[str, Any]]:
		"""Analyze a contract and return remediation advice.

		Args:
			contract_code: Contract source as submitted by the client.
			contract_address: On-chain address of the deployed contract.

		Returns:
			list[dict[str, Any]]: Recommendations with ``priority`` and ``recommendation`` keys.
		"""
		...
