"""Pytest configuration and fixtures shared across all test modules.

Environment defaults must be set before anything imports ``app.core.config``,
because settings (and the module-level audit service) are built at import.
"""

import os

# CRITICAL: Set these before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("APP_AUDIT_DELAY_SECONDS", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

VALID_ADDRESS = "0x" + "a" * 40


@pytest.fixture
def app() -> FastAPI:
    """Fresh application (and fresh rate limiter) per test."""
    from app.core.app_factory import create_app

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def valid_audit_body() -> dict[str, str]:
    return {
        "contractCode": "contract X{}",
        "contractAddress": VALID_ADDRESS,
        "network": "testnet",
    }
