"""Workflow coordination package."""

from .orchestrator import DedupeOrchestrator, DedupeReport

__all__ = [
    "DedupeOrchestrator",
    "DedupeReport",
]
