"""
People in the university: the shared identity record and its two roles.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .abstract_entity import AbstractEntity
from .academics import Course
from .enums import AcademicStatus, Role
from .exceptions import UniversityError
from .identity import DEFAULT_ALLOCATOR, IdentityAllocator
from .records import AcademicPerformance, ContactInfo, PersonInfo


logger = logging.getLogger(__name__)

InfoBundle = Union[PersonInfo, Mapping[str, Any]]


class Person(AbstractEntity):
    """Identity shared by every member of the university.

    The ``role`` tag is what registries dispatch on; subclasses only add
    the payload belonging to that role.
    """

    def __init__(self, info: InfoBundle, role: Role, allocator: Optional[IdentityAllocator] = None):
        info = PersonInfo.coerce(info)
        allocator = allocator or DEFAULT_ALLOCATOR
        super().__init__(allocator.next_id())
        self._first_name = info.first_name
        self._last_name = info.last_name
        self._birth_day = info.birth_day
        self._gender = info.gender
        self._contact_info = info.contact
        self._role = Role(role)

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_day(self) -> date:
        return self._birth_day

    @property
    def gender(self) -> str:
        return self._gender

    @property
    def contact_info(self) -> ContactInfo:
        return self._contact_info.model_copy()

    @property
    def role(self) -> Role:
        return self._role

    @property
    def full_name(self) -> str:
        return f"{self._last_name} {self._first_name}"

    @property
    def age(self) -> int:
        """Age in whole years as of today."""
        return self.age_on(date.today())

    def age_on(self, today: date) -> int:
        """Age in whole years on ``today``.

        Zero or negative for birth days that have not happened yet.
        """
        age = today.year - self._birth_day.year
        if (today.month, today.day) < (self._birth_day.month, self._birth_day.day):
            age -= 1
        return age

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'first_name': self._first_name,
            'last_name': self._last_name,
            'full_name': self.full_name,
            'birth_day': self._birth_day.isoformat(),
            'gender': self._gender,
            'contact_info': self._contact_info.model_dump(),
            'role': self._role.value,
        })
        return base_dict


class Teacher(Person):
    """Teacher with specializations and the courses assigned to them."""

    def __init__(self, info: InfoBundle, specializations: Optional[Iterable[str]] = None,
                 allocator: Optional[IdentityAllocator] = None):
        super().__init__(info, Role.TEACHER, allocator=allocator)
        self._specializations: List[str] = list(specializations or [])
        self._courses: List[Course] = []

    @property
    def specializations(self) -> List[str]:
        return self._specializations.copy()

    def assign_course(self, course: Course) -> None:
        """Assign a course. The same course may be assigned more than once."""
        self._courses.append(course)
        self.touch()
        logger.debug(f"Teacher {self.id} assigned course {course.name!r}")

    def remove_course(self, course_name: str) -> None:
        """Drop every assigned course named ``course_name``."""
        self._courses = [course for course in self._courses if course.name != course_name]
        self.touch()
        logger.debug(f"Teacher {self.id} unassigned course {course_name!r}")

    def get_courses(self) -> List[Course]:
        return self._courses.copy()

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'specializations': self._specializations.copy(),
            'courses': [course.name for course in self._courses],
        })
        return base_dict


class Student(Person):
    """Student with an academic record, enrolled courses and a status."""

    def __init__(self, info: InfoBundle, allocator: Optional[IdentityAllocator] = None):
        super().__init__(info, Role.STUDENT, allocator=allocator)
        self._academic_performance = AcademicPerformance()
        self._enrolled_courses: List[Course] = []
        self._status = AcademicStatus.ACTIVE

    @property
    def academic_performance(self) -> AcademicPerformance:
        return self._academic_performance.model_copy()

    @property
    def total_credits(self) -> Union[int, float]:
        return self._academic_performance.total_credits

    @property
    def status(self) -> AcademicStatus:
        return self._status

    def enroll_course(self, course: Course) -> None:
        """Enroll in a course and add its credits to the running total.

        Enrolling twice in the same course counts its credits twice.
        """
        if self._status is not AcademicStatus.ACTIVE:
            raise UniversityError(
                "Cannot enroll: Student is not in active status",
                details={'student_id': self.id, 'status': self._status.value}
            )

        total_credits = self._academic_performance.total_credits + course.credits
        self._academic_performance.total_credits = total_credits
        self._enrolled_courses.append(course)
        self.touch()
        logger.debug(f"Student {self.id} enrolled in {course.name!r} (+{course.credits} credits)")

    def get_average_score(self) -> float:
        return self._academic_performance.gpa

    def update_gpa(self, gpa: float) -> None:
        self._academic_performance.gpa = gpa
        self.touch()

    def update_academic_status(self, new_status: Union[AcademicStatus, str]) -> None:
        """Set the status. Any status may follow any other."""
        self._status = AcademicStatus(new_status)
        self.touch()
        logger.debug(f"Student {self.id} status set to {self._status.value}")

    def get_enrolled_courses(self) -> List[Course]:
        return self._enrolled_courses.copy()

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'academic_performance': self._academic_performance.snapshot(),
            'enrolled_courses': [course.name for course in self._enrolled_courses],
            'status': self._status.value,
        })
        return base_dict
