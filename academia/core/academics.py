"""
Courses and the groups (class sections) that teach them.
"""

import logging
import math
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Union

from .exceptions import UniversityError

if TYPE_CHECKING:
    from .people import Student, Teacher


logger = logging.getLogger(__name__)


class Course:
    """Immutable course description. Credits are expected to be positive."""

    def __init__(self, name: str, credits: int, discipline: str):
        self._name = name
        self._credits = credits
        self._discipline = discipline

    @property
    def name(self) -> str:
        return self._name

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def discipline(self) -> str:
        return self._discipline

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'credits': self._credits,
            'discipline': self._discipline,
        }

    def __repr__(self) -> str:
        return f"Course(name={self._name!r}, credits={self._credits})"


class Group:
    """A section binding one course, one teacher and a roster of students.

    The roster keeps insertion order and never holds the same student
    object twice.
    """

    def __init__(self, name: str, course: Course, teacher: "Teacher"):
        self._name = name
        self._course = course
        self._teacher = teacher
        self._students: List["Student"] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def course(self) -> Course:
        return self._course

    @property
    def teacher(self) -> "Teacher":
        return self._teacher

    def add_student(self, student: "Student") -> None:
        """Add a student to the roster."""
        if any(member is student for member in self._students):
            raise UniversityError(
                "Student is already in the group",
                details={'group': self._name, 'student_id': student.id}
            )

        self._students.append(student)
        logger.debug(f"Group {self._name!r} added student {student.id}")

    def remove_student_by_id(self, student_id: int) -> None:
        """Remove the first roster entry with ``student_id``."""
        for index, student in enumerate(self._students):
            if student.id == student_id:
                del self._students[index]
                logger.debug(f"Group {self._name!r} removed student {student_id}")
                return

        raise UniversityError(
            "Student not found in group",
            details={'group': self._name, 'student_id': student_id}
        )

    def get_average_group_score(self) -> float:
        # Inverted guard is preserved: a non-empty roster reports 0 and only
        # the empty roster reaches the average, 0 / 0, reported as nan.
        if self._students:
            return 0.0

        total_score = sum(student.get_average_score() for student in self._students)
        count = len(self._students)
        return total_score / count if count else math.nan

    def get_students(self) -> List["Student"]:
        return self._students.copy()

    def get_student_by_id(self, identifier: Union[int, Iterable[int]]
                          ) -> Union["Student", List["Student"], None]:
        """Look students up by id.

        A single id returns the first match or ``None``; a collection of
        ids returns every matching student in roster order. ``bool`` is an
        ``int`` subclass and takes the single-id path. Strings are rejected
        with TypeError instead of being read as a sequence of characters.
        """
        if isinstance(identifier, (str, bytes)):
            raise TypeError(f"Student ids must be int or a collection of int, got {type(identifier).__name__}")
        if isinstance(identifier, int):
            return next((student for student in self._students if student.id == identifier), None)

        wanted = set(identifier)
        return [student for student in self._students if student.id in wanted]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'course': self._course.name,
            'teacher_id': self._teacher.id,
            'student_ids': [student.id for student in self._students],
        }
