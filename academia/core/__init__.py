"""
Core module containing the academic records object model.
"""

from .abstract_entity import AbstractEntity
from .academics import Course, Group
from .enums import AcademicStatus, Role
from .exceptions import UniversityError
from .identity import DEFAULT_ALLOCATOR, IdentityAllocator
from .people import Person, Student, Teacher
from .records import AcademicPerformance, ContactInfo, PersonInfo
from .university import University

__all__ = [
    # Entities
    "AbstractEntity",
    "Person",
    "Student",
    "Teacher",
    "Course",
    "Group",
    "University",
    
    # Records
    "ContactInfo",
    "PersonInfo",
    "AcademicPerformance",
    
    # Identity
    "IdentityAllocator",
    "DEFAULT_ALLOCATOR",
    
    # Enums
    "Role",
    "AcademicStatus",
    
    # Exceptions
    "UniversityError",
]
