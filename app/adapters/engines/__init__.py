"""Audit engine adapter layer - abstracts over external analysis engines."""

from app.adapters.engines.base import AbstractAnalysisEngine, AbstractScanEngine
from app.adapters.engines.mock import MockAuditorSecEngine, MockAudityzerEngine

__all__ = [
    "AbstractAnalysisEngine",
    "AbstractScanEngine",
    "MockAuditorSecEngine",
    "MockAudityzerEngine",
]
