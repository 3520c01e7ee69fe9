"""
Enumerations and constants for the academic records model.
"""

from enum import Enum


class Role(Enum):
    """Role tag carried by every person."""
    STUDENT = "student"
    TEACHER = "teacher"


class AcademicStatus(Enum):
    """Lifecycle state of a student. No transition rules are enforced."""
    ACTIVE = "active"
    ACADEMIC_LEAVE = "academicLeave"
    GRADUATED = "graduated"
    EXPELLED = "expelled"
