"""Programmatic uvicorn entry point.

Usage:
    python -m app.run
    contract-audit-api          # via pyproject.toml [project.scripts]
"""

from __future__ import annotations

import uvicorn

from app.core.config import settings


def main() -> None:
    """Start the API on the configured host and port (default 0.0.0.0:5000)."""
    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
