"""
Work Item Template Use Cases
"""

from .manage_templates_use_case import ManageTemplatesUseCase, SeedDefaultTemplatesUseCase
from .defaults import DEFAULT_TEMPLATES
from .dtos import (
    CreateTemplateCommand,
    SeedTemplatesResponse,
    TemplateResponse,
    UpdateTemplateCommand,
)

__all__ = [
    "ManageTemplatesUseCase",
    "SeedDefaultTemplatesUseCase",
    "DEFAULT_TEMPLATES",
    "CreateTemplateCommand",
    "SeedTemplatesResponse",
    "TemplateResponse",
    "UpdateTemplateCommand",
]
