"""
University registry: owns courses, groups and people, and answers lookups.
"""

import logging
from typing import Any, Dict, Iterable, List, NoReturn, Optional, Union

from .academics import Course, Group
from .enums import Role
from .identity import DEFAULT_ALLOCATOR, IdentityAllocator
from .people import InfoBundle, Student, Teacher
from .records import ContactInfo, PersonInfo


logger = logging.getLogger(__name__)

People = Union[Student, Teacher]


class University:
    """Top-level registry and query facade.

    Collections are append-only and never deduplicated. Recognised config
    keys are ``default_contact`` (contact details used by the factory
    methods when a bundle omits them) and ``first_person_id`` (gives the
    university its own identity allocator starting at that id).
    """

    def __init__(self, name: str, config: Optional[dict] = None,
                 allocator: Optional[IdentityAllocator] = None):
        self._name = name
        self._config = config or {}
        self._courses: List[Course] = []
        self._groups: List[Group] = []
        self._people: List[People] = []

        first_person_id = self._config.get('first_person_id')
        if allocator is None and first_person_id is not None:
            allocator = IdentityAllocator(start=first_person_id)
        self._allocator = allocator or DEFAULT_ALLOCATOR
        self._default_contact = ContactInfo.model_validate(self._config.get('default_contact', {}))

    @property
    def name(self) -> str:
        return self._name

    @property
    def allocator(self) -> IdentityAllocator:
        return self._allocator

    @property
    def courses(self) -> List[Course]:
        return self._courses.copy()

    @property
    def groups(self) -> List[Group]:
        return self._groups.copy()

    @property
    def people(self) -> List[People]:
        return self._people.copy()

    def add_course(self, course: Course) -> None:
        self._courses.append(course)
        logger.debug(f"{self._name}: added course {course.name!r}")

    def add_group(self, group: Group) -> None:
        self._groups.append(group)
        logger.debug(f"{self._name}: added group {group.name!r}")

    def add_person(self, person: People) -> None:
        self._people.append(person)
        logger.debug(f"{self._name}: added {person.role.value} {person.id}")

    def create_student(self, info: InfoBundle) -> Student:
        """Build a student with this university's allocator and register it."""
        student = Student(self._with_default_contact(info), allocator=self._allocator)
        self.add_person(student)
        return student

    def create_teacher(self, info: InfoBundle, specializations: Optional[Iterable[str]] = None) -> Teacher:
        """Build a teacher with this university's allocator and register it."""
        teacher = Teacher(self._with_default_contact(info), specializations, allocator=self._allocator)
        self.add_person(teacher)
        return teacher

    def find_group_by_course(self, course: Course) -> Optional[Group]:
        return next((group for group in self._groups if group.course is course), None)

    def find_person_by_id(self, person_id: int) -> Optional[People]:
        return next((person for person in self._people if person.id == person_id), None)

    def get_all_people_by_role(self, role: Union[Role, str]) -> List[People]:
        """Return everyone carrying ``role``, in registration order.

        Raises ValueError for anything that is not a known role, so a role
        added to ``Role`` without a branch here fails loudly.
        """
        if role == Role.STUDENT or role == Role.STUDENT.value:
            return [person for person in self._people if person.role is Role.STUDENT]
        elif role == Role.TEACHER or role == Role.TEACHER.value:
            return [person for person in self._people if person.role is Role.TEACHER]
        return self._assert_never_role(role)

    @staticmethod
    def _assert_never_role(role: Any) -> NoReturn:
        raise ValueError(f"Unhandled role: {role}")

    def _with_default_contact(self, info: InfoBundle) -> PersonInfo:
        if isinstance(info, PersonInfo):
            return info
        merged: Dict[str, Any] = self._default_contact.model_dump()
        merged.update(info)
        return PersonInfo.coerce(merged)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'courses': [course.to_dict() for course in self._courses],
            'groups': [group.to_dict() for group in self._groups],
            'people': [person.to_dict() for person in self._people],
        }
