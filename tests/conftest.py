"""
Shared pytest fixtures for the academic records test suite.
"""

from datetime import date

import pytest

from academia.core import Course, IdentityAllocator, Student, Teacher, University


@pytest.fixture
def allocator():
    """A private allocator so ids start at 1 in every test."""
    return IdentityAllocator()


@pytest.fixture
def student_info():
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "birth_day": date(2000, 6, 15),
        "gender": "female",
    }


@pytest.fixture
def teacher_info():
    return {
        "first_name": "Taras",
        "last_name": "Bondar",
        "birth_day": date(1975, 2, 3),
        "gender": "male",
        "email": "t.bondar@university.com",
        "phone": "+380501112233",
    }


@pytest.fixture
def algebra():
    return Course("Linear Algebra", 5, "Mathematics")


@pytest.fixture
def physics():
    return Course("Physics I", 4, "Physics")


@pytest.fixture
def make_student(allocator, student_info):
    """Factory for students drawing ids from the test allocator."""
    def _make(**overrides):
        info = dict(student_info)
        info.update(overrides)
        return Student(info, allocator=allocator)
    return _make


@pytest.fixture
def teacher(allocator, teacher_info):
    return Teacher(teacher_info, ["algebra", "geometry"], allocator=allocator)


@pytest.fixture
def university(allocator):
    return University("Kyiv Polytechnic", allocator=allocator)
