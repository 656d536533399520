"""Application layer - use cases and orchestration."""

from .commands import AutoFillCommand, GenerateReportCommand
from .dtos import ProjectReportOutput

__all__ = [
    "AutoFillCommand",
    "GenerateReportCommand",
    "ProjectReportOutput",
]
