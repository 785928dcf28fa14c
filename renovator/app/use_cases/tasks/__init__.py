"""
Task Use Cases
"""

from .manage_tasks_use_case import ManageTasksUseCase
from .dtos import (
    AddTaskNoteCommand,
    CreateTaskCommand,
    CreateTasksFromTemplatesCommand,
    TaskResponse,
    UpdateTaskCommand,
)

__all__ = [
    "ManageTasksUseCase",
    "AddTaskNoteCommand",
    "CreateTaskCommand",
    "CreateTasksFromTemplatesCommand",
    "TaskResponse",
    "UpdateTaskCommand",
]
