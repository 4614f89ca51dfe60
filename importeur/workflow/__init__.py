"""Workflow coordination package."""

from .detection import DetectionEngine
from .importer import ImportOrchestrator, SteamImportAction, ImportFailure
from .progress import ImportProgress, FailedImportLog

__all__ = [
    "DetectionEngine",
    "ImportOrchestrator",
    "SteamImportAction",
    "ImportFailure",
    "ImportProgress",
    "FailedImportLog",
]
