"""
Project Use Cases
"""

from .manage_projects_use_case import ManageProjectsUseCase
from .dtos import CreateProjectCommand, ProjectResponse, UpdateProjectCommand

__all__ = [
    "ManageProjectsUseCase",
    "CreateProjectCommand",
    "ProjectResponse",
    "UpdateProjectCommand",
]
