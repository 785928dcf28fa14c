"""
Renovator Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project lifecycle status"""

    planning = "planning"
    active = "active"
    on_hold = "on_hold"
    completed = "completed"
    archived = "archived"


class MilestoneStatus(str, Enum):
    """Milestone status"""

    not_started = "not_started"
    in_progress = "in_progress"
    completed = "completed"
    overdue = "overdue"


class TaskStatus(str, Enum):
    """Task status"""

    todo = "todo"
    in_progress = "in_progress"
    completed = "completed"
    blocked = "blocked"


class TaskPriority(str, Enum):
    """Task priority"""

    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class WorkItemCategory(str, Enum):
    """Trade category of a work item template"""

    demolition = "demolition"
    framing = "framing"
    electrical = "electrical"
    plumbing = "plumbing"
    hvac = "hvac"
    drywall = "drywall"
    painting = "painting"
    flooring = "flooring"
    finishing = "finishing"
    cleanup = "cleanup"
    inspection = "inspection"
    other = "other"


class BudgetCategory(str, Enum):
    """Budget line item category"""

    labor = "labor"
    materials = "materials"
    equipment = "equipment"
    subcontractors = "subcontractors"
    permits = "permits"
    contingency = "contingency"
    other = "other"


class ResourceType(str, Enum):
    """Kind of project resource"""

    material = "material"
    equipment = "equipment"
    subcontractor = "subcontractor"
    other = "other"


class ResourceStatus(str, Enum):
    """Procurement status of a resource"""

    needed = "needed"
    ordered = "ordered"
    received = "received"
    cancelled = "cancelled"
