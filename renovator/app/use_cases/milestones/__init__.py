"""
Milestone Use Cases
"""

from .manage_milestones_use_case import ManageMilestonesUseCase, progress_percentage
from .dtos import (
    CreateMilestoneCommand,
    MilestoneDetailResponse,
    MilestoneResponse,
    TimelineResponse,
    UpdateMilestoneCommand,
)

__all__ = [
    "ManageMilestonesUseCase",
    "progress_percentage",
    "CreateMilestoneCommand",
    "MilestoneDetailResponse",
    "MilestoneResponse",
    "TimelineResponse",
    "UpdateMilestoneCommand",
]
